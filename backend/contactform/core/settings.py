# contactform/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Optional

LOG_LEVELS = {"CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Contact Form API", alias="API_TITLE")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Resend credential; read per request, a missing key is reported as a 500
    resend_api_key: Optional[str] = Field(default=None, alias="RESEND_API_KEY")
    resend_api_url: str = Field(default="https://api.resend.com/emails", alias="RESEND_API_URL")

    contact_from_email: str = Field(default="contact@example.com", alias="CONTACT_FROM_EMAIL")
    contact_to_email: str = Field(default="contact@example.com", alias="CONTACT_TO_EMAIL")
    contact_subject_prefix: str = Field(default="새로운 문의: ", alias="CONTACT_SUBJECT_PREFIX")

    # None means no timeout on the provider call
    delivery_timeout: Optional[float] = Field(default=None, alias="DELIVERY_TIMEOUT")

    # Client side: where the form posts to
    relay_url: str = Field(
        default="http://localhost:8000/functions/v1/send-email",
        alias="RELAY_URL",
    )
    relay_auth_token: Optional[str] = Field(default=None, alias="RELAY_AUTH_TOKEN")
    relay_timeout: Optional[float] = Field(default=None, alias="RELAY_TIMEOUT")

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value):
        # unknown names fall back to INFO instead of failing at import
        level = str(value or "").strip().upper()
        return level if level in LOG_LEVELS else "INFO"


def get_settings() -> Settings:
    """Fresh read of the environment; used where a value must be current per request."""
    return Settings()


settings = Settings()
