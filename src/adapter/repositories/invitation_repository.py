from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID, always re-reading the row from the store"""
        stmt = (
            select(Invitation)
            .where(Invitation.id == invitation_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_target_and_email(
        self, target_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by target and receiver email"""
        stmt = select(Invitation).where(
            Invitation.target_id == target_id,
            Invitation.receiver_email == email,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_pending_by_target_and_receiver(
        self, target_id: UUID, receiver_id: UUID
    ) -> Optional[Invitation]:
        """Get pending invitation by target and receiver user"""
        stmt = select(Invitation).where(
            Invitation.target_id == target_id,
            Invitation.receiver_id == receiver_id,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_receiver_id(
        self, receiver_id: UUID, status: Optional[InvitationStatus] = None
    ) -> List[Invitation]:
        """Get invitations addressed to a user, newest first"""
        stmt = select(Invitation).where(Invitation.receiver_id == receiver_id)
        if status is not None:
            stmt = stmt.where(Invitation.status == status)
        stmt = stmt.order_by(Invitation.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_sender_id(self, sender_id: UUID) -> List[Invitation]:
        """Get invitations sent by a user, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.sender_id == sender_id)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_target_id(
        self, target_id: UUID, status: Optional[InvitationStatus] = None
    ) -> List[Invitation]:
        """Get invitations for a target, newest first"""
        stmt = select(Invitation).where(Invitation.target_id == target_id)
        if status is not None:
            stmt = stmt.where(Invitation.status == status)
        stmt = stmt.order_by(Invitation.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def link_pending_to_receiver(self, email: str, receiver_id: UUID) -> int:
        """Set receiver_id on unlinked pending invitations for an email"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.receiver_email == email,
                Invitation.receiver_id.is_(None),
                Invitation.status == InvitationStatus.pending,
            )
            .values(receiver_id=receiver_id)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def transition_status(
        self,
        invitation_id: UUID,
        receiver_id: UUID,
        from_status: InvitationStatus,
        to_status: InvitationStatus,
    ) -> int:
        """Compare-and-set on status; 0 rows means another request got there first"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.receiver_id == receiver_id,
                Invitation.status == from_status,
            )
            .values(status=to_status)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete(
        self, invitation_id: UUID, only_status: Optional[InvitationStatus] = None
    ) -> int:
        """Delete an invitation (optionally only while in a given status)"""
        stmt = delete(Invitation).where(Invitation.id == invitation_id)
        if only_status is not None:
            stmt = stmt.where(Invitation.status == only_status)
        stmt = stmt.execution_options(synchronize_session="evaluate")
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_target_id(self, target_id: UUID) -> int:
        """Delete every invitation for a target"""
        stmt = (
            delete(Invitation)
            .where(Invitation.target_id == target_id)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
