# contactform/lib/errors.py
from typing import Any, Dict, Optional


class RelayError(Exception):
    """A relay failure with the status code and JSON body it maps to."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.error)
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class MethodNotAllowedError(RelayError):
    status_code = 405
    error = "Method not allowed"


class MissingFieldsError(RelayError):
    status_code = 400
    error = "All fields are required"


class InvalidEmailError(RelayError):
    status_code = 400
    error = "Invalid email format"


class ConfigurationError(RelayError):
    status_code = 500
    error = "Email service not configured"


class DeliveryError(RelayError):
    status_code = 500
    error = "Failed to send email"

    def __init__(self, details: Optional[str] = None, provider_status: Optional[int] = None):
        super().__init__(details or "Unknown error")
        self.provider_status = provider_status
