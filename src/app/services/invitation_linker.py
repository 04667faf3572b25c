from abc import ABC, abstractmethod
from uuid import UUID

from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.unit_of_work import UnitOfWork


class InvitationLinker(ABC):
    """Attaches invitations sent to an email before it had an account"""

    @abstractmethod
    async def link(self, uow: UnitOfWork, email: str, user_id: UUID) -> int:
        pass


class InlineInvitationLinker(InvitationLinker):
    """Links inside the registration transaction"""

    async def link(self, uow: UnitOfWork, email: str, user_id: UUID) -> int:
        return await InvitationLedger(uow).link_by_email(email, user_id)
