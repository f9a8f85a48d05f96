# contactform/core/cors.py
from typing import Dict, List, Optional

from contactform.core.settings import settings


def _allowed_origins() -> List[str]:
    return [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


def cors_headers(origin: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }
    allowed = _allowed_origins()
    if not allowed or "*" in allowed:
        return headers

    # reflect a listed origin, otherwise pin to the first configured one
    headers["Access-Control-Allow-Origin"] = origin if origin in allowed else allowed[0]
    headers["Vary"] = "Origin"
    return headers
