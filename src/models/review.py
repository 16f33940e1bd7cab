"""Request and result models for the review gateway."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ReviewRequest(BaseModel):
    """A single prompt submitted for review."""

    prompt: StrictStr

    model_config = ConfigDict(frozen=True)

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """Reject the empty string; whitespace-only text is still a prompt."""
        if not v:
            raise ValueError("prompt cannot be empty")
        return v


class ReviewFailureKind(str, Enum):
    """Caller-facing classification of a failed review."""

    INVALID_INPUT = "invalid_input"
    EMPTY_UPSTREAM_RESPONSE = "empty_upstream_response"
    UPSTREAM_QUOTA_EXCEEDED = "upstream_quota_exceeded"
    UPSTREAM_NOT_FOUND = "upstream_not_found"
    UPSTREAM_TRANSPORT_ERROR = "upstream_transport_error"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    UPSTREAM_UNKNOWN = "upstream_unknown"


FAILURE_MESSAGES: dict[ReviewFailureKind, str] = {
    ReviewFailureKind.INVALID_INPUT: "Prompt must be a non-empty string",
    ReviewFailureKind.EMPTY_UPSTREAM_RESPONSE: "Empty response from the AI service.",
    ReviewFailureKind.UPSTREAM_QUOTA_EXCEEDED: (
        "AI quota exceeded. Please try again later or upgrade your plan."
    ),
    ReviewFailureKind.UPSTREAM_NOT_FOUND: (
        "Model not found. Please check your configuration."
    ),
    ReviewFailureKind.UPSTREAM_TRANSPORT_ERROR: "AI service temporarily unavailable.",
    ReviewFailureKind.UPSTREAM_TIMEOUT: "AI service timed out. Please try again later.",
    ReviewFailureKind.UPSTREAM_UNKNOWN: "Something went wrong while reviewing the code.",
}


class ReviewSuccess(BaseModel):
    """Review text produced by the model."""

    status: Literal["success"] = "success"
    text: str

    model_config = ConfigDict(frozen=True)


class ReviewFailure(BaseModel):
    """A classified failure with a message that is safe to show callers."""

    status: Literal["failure"] = "failure"
    kind: ReviewFailureKind
    message: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, kind: ReviewFailureKind) -> "ReviewFailure":
        """Build a failure carrying the fixed message for ``kind``."""
        return cls(kind=kind, message=FAILURE_MESSAGES[kind])


ReviewResult = Annotated[ReviewSuccess | ReviewFailure, Field(discriminator="status")]
