"""Gateway between callers and the review text generator."""

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError
from pydantic_ai.exceptions import ModelHTTPError

from src.agents.code_reviewer import TextGenerator
from src.models.review import (
    ReviewFailure,
    ReviewFailureKind,
    ReviewRequest,
    ReviewResult,
    ReviewSuccess,
)

logger = logging.getLogger(__name__)


def _upstream_status(exc: BaseException) -> int | None:
    """Extract an HTTP status code from an upstream error, if it carries one."""
    if isinstance(exc, ModelHTTPError):
        return exc.status_code
    # google-genai APIError exposes the numeric status as ``code``
    for attr in ("status_code", "code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def classify_upstream_error(exc: BaseException) -> ReviewFailureKind:
    """Map an error raised by the text generator onto a failure kind.

    Args:
        exc: The exception raised while generating the review

    Returns:
        The ReviewFailureKind callers should see
    """
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return ReviewFailureKind.UPSTREAM_TIMEOUT

    status = _upstream_status(exc)
    if status == 429:
        return ReviewFailureKind.UPSTREAM_QUOTA_EXCEEDED
    if status == 404:
        return ReviewFailureKind.UPSTREAM_NOT_FOUND
    if status is not None and status >= 400:
        return ReviewFailureKind.UPSTREAM_TRANSPORT_ERROR

    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return ReviewFailureKind.UPSTREAM_TRANSPORT_ERROR

    return ReviewFailureKind.UPSTREAM_UNKNOWN


class ReviewGateway:
    """Validates prompts, calls the generator once, and normalizes the outcome.

    ``review`` never raises: every failure comes back as a ReviewFailure whose
    message is fixed per kind, so upstream error details stay in the logs.
    """

    def __init__(self, generator: TextGenerator, timeout_seconds: float) -> None:
        self._generator = generator
        self._timeout_seconds = timeout_seconds

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    async def review(self, prompt: Any) -> ReviewResult:
        """Generate review feedback for ``prompt``.

        Args:
            prompt: Code or question to review; must be a non-empty string

        Returns:
            ReviewSuccess with the generated text, or a classified ReviewFailure
        """
        try:
            request = ReviewRequest(prompt=prompt)
        except ValidationError:
            logger.warning(
                f"Rejected review request: invalid prompt of type {type(prompt).__name__}"
            )
            return ReviewFailure.of(ReviewFailureKind.INVALID_INPUT)

        try:
            text = await asyncio.wait_for(
                self._generator.generate(request.prompt),
                timeout=self._timeout_seconds,
            )
        except Exception as e:
            kind = classify_upstream_error(e)
            logger.error(f"Review generation failed ({kind.value}): {e!r}")
            return ReviewFailure.of(kind)

        if not text:
            logger.error("Review generation failed: empty response from AI service")
            return ReviewFailure.of(ReviewFailureKind.EMPTY_UPSTREAM_RESPONSE)

        logger.info(f"Review generated:\n{text}")
        return ReviewSuccess(text=text)
