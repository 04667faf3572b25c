from unittest.mock import AsyncMock, patch

import httpx
import pytest

from src.adapter.services.sendgrid_email_sender import (
    SENDGRID_SEND_URL,
    SendGridEmailSender,
)
from src.app.services.email_templates import render_vault_invite_email


def test_invite_email_escapes_user_input():
    email = render_vault_invite_email(
        inviter_name="Ana <script>",
        vault_name='Trip & "Fun"',
        invite_link="https://app.example.com/invitations",
    )

    assert email.subject == 'Ana <script> invited you to the vault "Trip & "Fun""'
    assert "<script>" not in email.html
    assert "Ana &lt;script&gt;" in email.html
    assert 'href="https://app.example.com/invitations"' in email.html
    assert "Ana <script>" in email.text
    assert email.text.endswith("https://app.example.com/invitations")


@pytest.mark.asyncio
async def test_unconfigured_sender_does_not_send(caplog):
    sender = SendGridEmailSender(api_key="", from_email="no@x.com", from_name="X")

    with patch.object(httpx.AsyncClient, "post", new=AsyncMock()) as post:
        with caplog.at_level("WARNING"):
            sent = await sender.send_email("a@b.com", "Hi", "<p>Hi</p>")

    assert sent is False
    post.assert_not_awaited()
    assert "not configured" in caplog.text


@pytest.mark.asyncio
async def test_accepted_response_is_success():
    sender = SendGridEmailSender(api_key="key", from_email="no@x.com", from_name="X")
    response = httpx.Response(202, request=httpx.Request("POST", SENDGRID_SEND_URL))

    with patch.object(
        httpx.AsyncClient, "post", new=AsyncMock(return_value=response)
    ) as post:
        sent = await sender.send_email("a@b.com", "Hi", "<p>Hi</p>", text="Hi")

    assert sent is True
    payload = post.await_args.kwargs["json"]
    assert payload["personalizations"] == [{"to": [{"email": "a@b.com"}]}]
    assert payload["content"][0] == {"type": "text/plain", "value": "Hi"}
    assert post.await_args.kwargs["headers"]["Authorization"] == "Bearer key"


@pytest.mark.asyncio
async def test_rejected_response_is_failure():
    sender = SendGridEmailSender(api_key="key", from_email="no@x.com", from_name="X")
    response = httpx.Response(
        401, text="unauthorized", request=httpx.Request("POST", SENDGRID_SEND_URL)
    )

    with patch.object(httpx.AsyncClient, "post", new=AsyncMock(return_value=response)):
        sent = await sender.send_email("a@b.com", "Hi", "<p>Hi</p>")

    assert sent is False


@pytest.mark.asyncio
async def test_transport_error_is_failure():
    sender = SendGridEmailSender(api_key="key", from_email="no@x.com", from_name="X")

    with patch.object(
        httpx.AsyncClient,
        "post",
        new=AsyncMock(side_effect=httpx.ConnectError("boom")),
    ):
        sent = await sender.send_email("a@b.com", "Hi", "<p>Hi</p>")

    assert sent is False
