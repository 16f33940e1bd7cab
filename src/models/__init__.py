"""Data models for the Code Review Gateway."""

from .review import (
    FAILURE_MESSAGES,
    ReviewFailure,
    ReviewFailureKind,
    ReviewRequest,
    ReviewResult,
    ReviewSuccess,
)

__all__ = [
    "ReviewRequest",
    "ReviewResult",
    "ReviewSuccess",
    "ReviewFailure",
    "ReviewFailureKind",
    "FAILURE_MESSAGES",
]
