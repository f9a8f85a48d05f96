# contactform/client/form.py
"""
Client-side contact form state.

FormController owns the four field values, their inline errors and the
submission status. submit() is the only place that talks to the relay.
"""
import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, ClassVar, Dict, Optional, Protocol, Union

from contactform.client import api
from contactform.lib import messages
from contactform.lib.validation import FIELDS, collect_field_errors

log = logging.getLogger(__name__)


@dataclass
class ContactFormData:
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class StatusKind(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Idle:
    kind: ClassVar[StatusKind] = StatusKind.IDLE


@dataclass(frozen=True)
class Loading:
    kind: ClassVar[StatusKind] = StatusKind.LOADING


@dataclass(frozen=True)
class Success:
    message: str
    kind: ClassVar[StatusKind] = StatusKind.SUCCESS


@dataclass(frozen=True)
class Failure:
    message: str
    kind: ClassVar[StatusKind] = StatusKind.ERROR


SubmissionStatus = Union[Idle, Loading, Success, Failure]
Sender = Callable[[ContactFormData], Awaitable[Any]]


class SubmitEvent(Protocol):
    def prevent_default(self) -> None: ...


class FormController:
    def __init__(self, sender: Optional[Sender] = None):
        self.form = ContactFormData()
        self.errors: Dict[str, str] = {}
        self.status: SubmissionStatus = Idle()
        self._sender = sender

    # ---- view state ----

    @property
    def is_submitting(self) -> bool:
        return isinstance(self.status, Loading)

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting

    @property
    def status_message(self) -> str:
        return getattr(self.status, "message", "")

    @property
    def submit_label(self) -> str:
        return messages.SUBMITTING_LABEL if self.is_submitting else messages.SUBMIT_LABEL

    @property
    def dismiss_label(self) -> Optional[str]:
        if isinstance(self.status, Success):
            return messages.NEW_MESSAGE_LABEL
        if isinstance(self.status, Failure):
            return messages.RETRY_LABEL
        return None

    # ---- operations ----

    def update_field(self, field: str, value: str) -> None:
        if field not in FIELDS:
            raise ValueError(f"unknown field: {field!r}")
        setattr(self.form, field, value)
        # clear as soon as the user edits
        self.errors.pop(field, None)

    def validate(self) -> bool:
        self.errors = collect_field_errors(asdict(self.form))
        return not self.errors

    async def submit(self, event: Optional[SubmitEvent] = None) -> SubmissionStatus:
        if event is not None:
            event.prevent_default()
        if not self.can_submit:
            return self.status
        if not self.validate():
            return self.status

        self.status = Loading()
        sender = self._sender or api.send_contact_email
        try:
            await sender(ContactFormData(**asdict(self.form)))
        except Exception as exc:
            log.error("Email sending failed: %r", exc)
            self.status = Failure(messages.SUBMIT_FAILURE)
            return self.status

        self.status = Success(messages.SUBMIT_SUCCESS)
        self.form = ContactFormData()
        return self.status

    def reset_status(self) -> None:
        self.status = Idle()
