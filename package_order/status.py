"""Tagged request status shared by catalog loading and order submission."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .errors import OrderError


class RequestState(str, Enum):
    """Lifecycle of one remote request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RequestStatus(BaseModel):
    """
    Immutable status record.

    Build instances through the constructors below rather than directly;
    each one is a complete transition, so a caller never observes a
    half-updated status.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: RequestState = RequestState.IDLE
    payload: Any = None
    message: Optional[str] = None
    error: Optional[OrderError] = None

    @classmethod
    def idle(cls) -> "RequestStatus":
        return cls(state=RequestState.IDLE)

    @classmethod
    def loading(cls) -> "RequestStatus":
        return cls(state=RequestState.LOADING)

    @classmethod
    def succeeded(cls, payload: Any) -> "RequestStatus":
        return cls(state=RequestState.SUCCEEDED, payload=payload)

    @classmethod
    def failed(cls, message: str, error: Optional[OrderError] = None) -> "RequestStatus":
        return cls(state=RequestState.FAILED, message=message, error=error)

    @property
    def is_idle(self) -> bool:
        return self.state is RequestState.IDLE

    @property
    def is_loading(self) -> bool:
        return self.state is RequestState.LOADING

    @property
    def is_succeeded(self) -> bool:
        return self.state is RequestState.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.state is RequestState.FAILED

    def describe(self) -> dict[str, Any]:
        """JSON-friendly view without the payload."""
        return {
            "state": self.state.value,
            "message": self.message,
            "error_type": type(self.error).__name__ if self.error else None,
        }
