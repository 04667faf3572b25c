"""
Transactional email templates.
"""

import html as html_module
import re

from pydantic import BaseModel


class RenderedEmail(BaseModel):
    subject: str
    html: str
    text: str


def html_to_text(content: str) -> str:
    """Plain-text alternative for clients that do not render HTML"""
    text = re.sub(r"<(script|style)[^>]*>.*?</\1>", "", content, flags=re.DOTALL | re.I)
    text = re.sub(r"<br\s*/?>", "\n", text, flags=re.I)
    text = re.sub(r"<[^>]+>", " ", text)
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\s*\n\s*", "\n", text).strip()
    return html_module.unescape(text)


def render_vault_invite_email(
    inviter_name: str, vault_name: str, invite_link: str
) -> RenderedEmail:
    inviter = html_module.escape(inviter_name)
    vault = html_module.escape(vault_name)
    link = html_module.escape(invite_link, quote=True)

    body = f"""
    <p style="font-family: 'Inter', sans-serif; font-size: 16px;">
      You were invited by <strong>{inviter}</strong> to join the vault
      <strong>"{vault}"</strong>.
    </p>
    <p style="font-family: 'Inter', sans-serif; font-size: 16px;">
      A vault is a shared space where you manage money and savings goals together.
      To accept the invitation, open the link below:
    </p>
    <p style="text-align: center;">
      <a href="{link}" style="display: inline-block; padding: 12px 25px;
         background-color: #B8E6B8; color: #2E5A2E; text-decoration: none;
         border-radius: 5px; font-weight: bold;">Accept invitation</a>
    </p>
    <p style="font-family: 'Inter', sans-serif; font-size: 14px; color: #777;">
      If you do not recognise this invitation, you can ignore this email.
    </p>
    """

    return RenderedEmail(
        subject=f"{inviter_name} invited you to the vault \"{vault_name}\"",
        html=body,
        text=f"{html_to_text(body)}\n{invite_link}",
    )
