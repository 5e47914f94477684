"""
State holder for a waitlist signup form.

    IDLE -> SUBMITTING -> SUCCESS
    IDLE -> SUBMITTING -> ERROR -> IDLE (reset) or -> SUBMITTING (resubmit)

Only one request is ever in flight: submit() is ignored while SUBMITTING and
after SUCCESS, so repeated clicks never reach the server.
"""

from enum import Enum
from typing import Any, Optional

import httpx

from app.features.waitlist.client.api_client import WaitlistApiClient
from app.features.waitlist.client.query_client import QueryClient
from app.features.waitlist.utils.validator import validate_submission
from app.platform.exceptions import ValidationError
from app.platform.logger import get_logger

logger = get_logger(__name__)

STATS_QUERY_KEY = "waitlist-stats"

FIELD_MESSAGES = {
    ("name", "required"): "Name is required",
    ("email", "required"): "Please enter a valid email address",
    ("email", "invalid_format"): "Please enter a valid email address",
}
ALREADY_JOINED_MESSAGE = "You're already on our waitlist! We'll be in touch soon."
INVALID_MESSAGE = "Please check your information and try again."
RETRY_LATER_MESSAGE = "Something went wrong. Please try again."


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class WaitlistFormController:
    def __init__(self, api: WaitlistApiClient, query_client: QueryClient):
        self.api = api
        self.query_client = query_client
        self.state = FormState.IDLE
        self.entry: Optional[dict] = None
        self.field_errors: dict[str, str] = {}
        self.error_message: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        return self.state in (FormState.IDLE, FormState.ERROR)

    async def submit(self, data: dict[str, Any]) -> FormState:
        if not self.can_submit:
            logger.debug(f"Ignoring submit while {self.state.value}")
            return self.state

        # The state flips before the first await, so a second call made while
        # this one is in flight sees SUBMITTING and returns above.
        self.state = FormState.SUBMITTING
        self.field_errors = {}
        self.error_message = None

        try:
            submission = validate_submission(data)
        except ValidationError as exc:
            return self._fail_field(exc.field, exc.reason)

        payload = {
            "name": submission.name,
            "email": submission.email,
            "message": submission.message,
        }
        if submission.source:
            payload["source"] = submission.source

        try:
            result = await self.api.join(payload)
        except httpx.RequestError as exc:
            logger.warning(f"Waitlist request failed: {exc}")
            return self._fail(RETRY_LATER_MESSAGE)
        except Exception:
            self._fail(RETRY_LATER_MESSAGE)
            raise

        if result.status_code == 201:
            self.entry = result.data
            self.state = FormState.SUCCESS
            self.query_client.invalidate(STATS_QUERY_KEY)
            return self.state
        if result.status_code == 409:
            return self._fail(ALREADY_JOINED_MESSAGE)
        if result.status_code == 400 and result.data.get("field"):
            return self._fail_field(result.data["field"], result.data.get("reason", "invalid"))
        if result.status_code == 400:
            return self._fail(INVALID_MESSAGE)
        return self._fail(RETRY_LATER_MESSAGE)

    def reset(self) -> FormState:
        """Leave ERROR for IDLE. Does nothing in any other state."""
        if self.state == FormState.ERROR:
            self.state = FormState.IDLE
            self.field_errors = {}
            self.error_message = None
        return self.state

    @property
    def success_message(self) -> Optional[str]:
        if self.state != FormState.SUCCESS or not self.entry:
            return None
        position = self.entry.get("position")
        if position:
            return f"You're #{position} in line. We'll notify you when we launch!"
        return "We'll notify you when we launch!"

    def _fail(self, message: str) -> FormState:
        self.error_message = message
        self.state = FormState.ERROR
        return self.state

    def _fail_field(self, field: str, reason: str) -> FormState:
        self.field_errors[field] = FIELD_MESSAGES.get((field, reason), INVALID_MESSAGE)
        return self._fail(INVALID_MESSAGE)
