# contactform/main.py
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from contactform.core.settings import settings
from contactform.routers.send_email import router as send_email_router, relay_http_exception_handler
from contactform.routers.health import router as health_router

logging.getLogger("uvicorn.error").setLevel(settings.log_level)

# CORS headers are set by the relay itself; OPTIONS must reach the handler untouched
app = FastAPI(title=settings.api_title)
app.add_exception_handler(StarletteHTTPException, relay_http_exception_handler)

# Routers
app.include_router(send_email_router)
app.include_router(health_router)

logging.getLogger("uvicorn.error").info(f"[main] {settings.api_title} ready; relay at /functions/v1/send-email")
