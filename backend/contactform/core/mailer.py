# contactform/core/mailer.py
import logging
from typing import Any, Dict

import httpx

from contactform.core.settings import settings
from contactform.lib.email_template import EmailDeliveryPayload
from contactform.lib.errors import DeliveryError

log = logging.getLogger("uvicorn.error")


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.delivery_timeout)


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or "Unknown error"
    if isinstance(data, dict):
        return data.get("message") or data.get("error") or "Unknown error"
    return "Unknown error"


async def send_email(payload: EmailDeliveryPayload, api_key: str) -> Dict[str, Any]:
    """
    Hands one email to Resend.
    Returns the provider's JSON body (contains "id") on 2xx.
    Raises DeliveryError on transport failure or any non-2xx status.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    body = payload.model_dump(by_alias=True)

    try:
        async with _http_client() as client:
            response = await client.post(settings.resend_api_url, headers=headers, json=body)
    except httpx.HTTPError as exc:
        log.error(f"[mailer] transport error talking to provider: {exc!r}")
        raise DeliveryError(str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        detail = _error_detail(response)
        log.error(f"[mailer] provider returned {response.status_code}: {response.text}")
        raise DeliveryError(detail, provider_status=response.status_code)

    result = response.json()
    log.info(f"[mailer] email sent: {result}")
    return result
