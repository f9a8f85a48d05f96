# contactform/lib/email_template.py
import html
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from contactform.lib import messages


class EmailDeliveryPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: List[str]
    subject: str
    html: str


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


def render_message_html(message: str) -> str:
    return _esc(message).replace("\n", "<br>")


def render_contact_html(name: str, email: str, subject: str, message: str) -> str:
    return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
          <h2 style="color: #333; border-bottom: 2px solid #e1e5e9; padding-bottom: 10px;">
            {messages.EMAIL_HEADING}
          </h2>

          <div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #495057; margin-top: 0;">{messages.EMAIL_SENDER_SECTION}</h3>
            <p style="margin: 8px 0;"><strong>{messages.EMAIL_NAME}:</strong> {_esc(name)}</p>
            <p style="margin: 8px 0;"><strong>{messages.EMAIL_EMAIL}:</strong> {_esc(email)}</p>
            <p style="margin: 8px 0;"><strong>{messages.EMAIL_SUBJECT}:</strong> {_esc(subject)}</p>
          </div>

          <div style="background-color: #ffffff; padding: 20px; border: 1px solid #e1e5e9; border-radius: 8px;">
            <h3 style="color: #495057; margin-top: 0;">{messages.EMAIL_BODY_SECTION}</h3>
            <div style="line-height: 1.6; color: #333;">
              {render_message_html(message)}
            </div>
          </div>

          <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #e1e5e9; color: #6c757d; font-size: 14px;">
            <p>{messages.EMAIL_FOOTER_AUTO}</p>
            <p>{messages.EMAIL_FOOTER_REPLY}</p>
          </div>
        </div>
      """


def build_delivery_payload(
    name: str,
    email: str,
    subject: str,
    message: str,
    sender: str,
    recipient: str,
    subject_prefix: str,
) -> EmailDeliveryPayload:
    return EmailDeliveryPayload(
        from_=sender,
        to=[recipient],
        subject=f"{subject_prefix}{subject}",
        html=render_contact_html(name, email, subject, message),
    )
