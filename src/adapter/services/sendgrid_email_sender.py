import logging
from typing import Optional

import httpx

from src.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridEmailSender(IEmailSender):
    """Email sender backed by the SendGrid v3 HTTP API"""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        from_name: str,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def send_email(
        self, to: str, subject: str, html: str, text: Optional[str] = None
    ) -> bool:
        if not self.is_configured():
            logger.warning(f"SENDGRID_API_KEY not configured, email to {to} not sent")
            return False

        content = []
        if text:
            content.append({"type": "text/plain", "value": text})
        content.append({"type": "text/html", "value": html})

        payload = {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {"email": self.from_email, "name": self.from_name},
            "subject": subject,
            "content": content,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    SENDGRID_SEND_URL, headers=headers, json=payload
                )
        except httpx.HTTPError as exc:
            logger.error(f"SendGrid request failed for {to}: {exc}")
            return False

        if 200 <= response.status_code < 300:
            logger.info(f"Email sent to {to} (status {response.status_code})")
            return True

        logger.error(
            f"SendGrid rejected email to {to}: {response.status_code} {response.text}"
        )
        return False
