# contactform/routers/send_email.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from contactform.core import mailer
from contactform.core.cors import cors_headers
from contactform.core.settings import get_settings
from contactform.lib import messages
from contactform.lib.email_template import build_delivery_payload
from contactform.lib.errors import (
    ConfigurationError,
    DeliveryError,
    InvalidEmailError,
    MethodNotAllowedError,
    MissingFieldsError,
    RelayError,
)
from contactform.lib.validation import FIELDS, is_valid_email

router = APIRouter(prefix="/functions/v1", tags=["contact"])
log = logging.getLogger("uvicorn.error")

# every method lands in the handler so the 405 body matches the other errors
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
RELAY_PATH = "/functions/v1/send-email"


class ContactIn(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


def parse_contact(body: Any) -> ContactIn:
    if not isinstance(body, dict):
        raise MissingFieldsError()
    try:
        data = ContactIn.model_validate(body)
    except ValidationError:
        # non-string values count as missing
        raise MissingFieldsError()
    if any(not getattr(data, f).strip() for f in FIELDS):
        raise MissingFieldsError()
    if not is_valid_email(data.email):
        raise InvalidEmailError()
    return data


async def relay_contact(data: ContactIn) -> Dict[str, Any]:
    """
    Validated form -> Resend. Returns the provider result (has "id").
    Raises ConfigurationError when no credential is set, DeliveryError when
    the provider call fails.
    """
    cfg = get_settings()
    if not cfg.resend_api_key:
        log.error("[send-email] RESEND_API_KEY not found in environment variables")
        raise ConfigurationError()

    payload = build_delivery_payload(
        name=data.name,
        email=data.email,
        subject=data.subject,
        message=data.message,
        sender=cfg.contact_from_email,
        recipient=cfg.contact_to_email,
        subject_prefix=cfg.contact_subject_prefix,
    )
    return await mailer.send_email(payload, cfg.resend_api_key)


def _json(status_code: int, content: Dict[str, Any], origin: Optional[str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=cors_headers(origin))


@router.api_route("/send-email", methods=RELAY_METHODS)
async def send_email(request: Request):
    origin = request.headers.get("origin")
    try:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers(origin))
        if request.method != "POST":
            raise MethodNotAllowedError()

        data = parse_contact(await request.json())
        result = await relay_contact(data)
        return _json(
            200,
            {"success": True, "message": messages.RELAY_SENT, "id": result.get("id")},
            origin,
        )
    except RelayError as exc:
        if exc.status_code >= 500:
            if isinstance(exc, DeliveryError):
                log.error(f"[send-email] {exc.error} (provider status {exc.provider_status}): {exc.details}")
            else:
                log.error(f"[send-email] {exc.error}: {exc.details}")
        else:
            log.info(f"[send-email] rejected ({exc.status_code}): {exc.error}")
        return _json(exc.status_code, exc.to_body(), origin)
    except Exception:
        log.exception("[send-email] error sending email")
        return _json(
            500,
            {"error": "Internal server error", "message": messages.RELAY_INTERNAL_ERROR},
            origin,
        )


async def relay_http_exception_handler(request: Request, exc: StarletteHTTPException):
    # methods outside RELAY_METHODS are rejected by routing before the handler runs
    if exc.status_code == 405 and request.url.path == RELAY_PATH:
        return _json(405, MethodNotAllowedError().to_body(), request.headers.get("origin"))
    return await http_exception_handler(request, exc)
