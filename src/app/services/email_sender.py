from abc import ABC, abstractmethod
from typing import Optional


class IEmailSender(ABC):
    """Transactional email port - delivery is best effort"""

    @abstractmethod
    async def send_email(
        self, to: str, subject: str, html: str, text: Optional[str] = None
    ) -> bool:
        """Send one email; returns False instead of raising on delivery failure"""
        pass
