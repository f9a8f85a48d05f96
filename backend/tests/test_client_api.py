import json

import httpx
import pytest

from contactform.client import api
from contactform.client.api import ContactSendError, send_contact_email
from contactform.client.form import ContactFormData, Failure, FormController, Success
from contactform.core import mailer
from contactform.core.settings import settings
from contactform.lib import messages
from contactform.main import app

FORM = ContactFormData(
    name="Choi",
    email="choi@example.com",
    subject="Booking",
    message="Can I book a session next week?",
)


def use_relay(monkeypatch, handler):
    seen = []

    def _handler(request: httpx.Request):
        seen.append(request)
        return handler(request)

    monkeypatch.setattr(api, "_http_client", lambda: httpx.AsyncClient(transport=httpx.MockTransport(_handler)))
    return seen


@pytest.mark.asyncio
async def test_posts_form_as_json(monkeypatch):
    monkeypatch.setattr(settings, "relay_auth_token", "anon-key")
    seen = use_relay(monkeypatch, lambda r: httpx.Response(200, json={"success": True, "id": "m1"}))

    result = await send_contact_email(FORM)

    assert result["id"] == "m1"
    assert str(seen[0].url) == settings.relay_url
    assert seen[0].headers["authorization"] == "Bearer anon-key"
    assert json.loads(seen[0].content) == {
        "name": "Choi",
        "email": "choi@example.com",
        "subject": "Booking",
        "message": "Can I book a session next week?",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(400, json={"error": "Invalid email format"}),
        httpx.Response(500, text="upstream down"),
        httpx.Response(200, json={"error": "weird"}),
    ],
)
async def test_non_success_raises(monkeypatch, response):
    use_relay(monkeypatch, lambda r: response)
    with pytest.raises(ContactSendError):
        await send_contact_email(FORM)


def _wire_to_app(monkeypatch, provider_handler):
    """Client -> in-process relay -> fake provider."""
    monkeypatch.setattr(
        api,
        "_http_client",
        lambda: httpx.AsyncClient(transport=httpx.ASGITransport(app=app)),
    )
    monkeypatch.setattr(
        mailer,
        "_http_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(provider_handler)),
    )


def _fill(ctl: FormController):
    for field in ("name", "email", "subject", "message"):
        ctl.update_field(field, getattr(FORM, field))


@pytest.mark.asyncio
async def test_end_to_end_success(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "re_live")
    _wire_to_app(monkeypatch, lambda r: httpx.Response(200, json={"id": "prov-42"}))

    ctl = FormController()
    _fill(ctl)
    status = await ctl.submit()

    assert status == Success(messages.SUBMIT_SUCCESS)
    assert ctl.form == ContactFormData()


@pytest.mark.asyncio
async def test_end_to_end_missing_credential(monkeypatch):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    _wire_to_app(monkeypatch, lambda r: httpx.Response(200, json={"id": "never"}))

    ctl = FormController()
    _fill(ctl)
    status = await ctl.submit()

    assert status == Failure(messages.SUBMIT_FAILURE)
    assert ctl.form == FORM
