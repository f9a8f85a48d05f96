# contactform/client/api.py
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any, Dict

import httpx

from contactform.core.settings import settings

if TYPE_CHECKING:
    from contactform.client.form import ContactFormData

log = logging.getLogger(__name__)


class ContactSendError(Exception):
    """The relay answered, but not with a success."""

    def __init__(self, status_code: int, body: Any):
        super().__init__(f"relay responded {status_code}: {body}")
        self.status_code = status_code
        self.body = body


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.relay_timeout)


def _headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if settings.relay_auth_token:
        headers["Authorization"] = f"Bearer {settings.relay_auth_token}"
    return headers


async def send_contact_email(data: "ContactFormData") -> Dict[str, Any]:
    async with _http_client() as client:
        response = await client.post(settings.relay_url, headers=_headers(), json=asdict(data))

    try:
        body = response.json()
    except ValueError:
        body = response.text

    if not response.is_success or not (isinstance(body, dict) and body.get("success") is True):
        raise ContactSendError(response.status_code, body)

    log.debug("relay accepted message id=%s", body.get("id"))
    return body
