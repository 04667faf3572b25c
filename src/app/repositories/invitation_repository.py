from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation, InvitationStatus


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_pending_by_target_and_email(
        self, target_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by target and receiver email"""
        pass

    @abstractmethod
    async def get_pending_by_target_and_receiver(
        self, target_id: UUID, receiver_id: UUID
    ) -> Optional[Invitation]:
        """Get pending invitation by target and receiver user"""
        pass

    @abstractmethod
    async def get_by_receiver_id(
        self, receiver_id: UUID, status: Optional[InvitationStatus] = None
    ) -> List[Invitation]:
        """Get invitations addressed to a user, newest first"""
        pass

    @abstractmethod
    async def get_by_sender_id(self, sender_id: UUID) -> List[Invitation]:
        """Get invitations sent by a user, newest first"""
        pass

    @abstractmethod
    async def get_by_target_id(
        self, target_id: UUID, status: Optional[InvitationStatus] = None
    ) -> List[Invitation]:
        """Get invitations for a target, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def link_pending_to_receiver(self, email: str, receiver_id: UUID) -> int:
        """Set receiver_id on unlinked pending invitations for an email"""
        pass

    @abstractmethod
    async def transition_status(
        self,
        invitation_id: UUID,
        receiver_id: UUID,
        from_status: InvitationStatus,
        to_status: InvitationStatus,
    ) -> int:
        """Conditionally move an invitation between statuses, returning affected rows"""
        pass

    @abstractmethod
    async def delete(
        self, invitation_id: UUID, only_status: Optional[InvitationStatus] = None
    ) -> int:
        """Delete an invitation (optionally only while in a given status)"""
        pass

    @abstractmethod
    async def delete_by_target_id(self, target_id: UUID) -> int:
        """Delete every invitation for a target"""
        pass
