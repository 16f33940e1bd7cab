"""Unit tests for review request and result models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from src.models.review import (
    FAILURE_MESSAGES,
    ReviewFailure,
    ReviewFailureKind,
    ReviewRequest,
    ReviewResult,
    ReviewSuccess,
)


class TestReviewRequest:
    """Test suite for ReviewRequest model."""

    def test_accepts_code_snippet(self) -> None:
        request = ReviewRequest(prompt="function add(a,b){return a+b}")
        assert request.prompt == "function add(a,b){return a+b}"

    def test_preserves_surrounding_whitespace(self) -> None:
        """Prompts are passed through unmodified."""
        request = ReviewRequest(prompt="  x = 1\n")
        assert request.prompt == "  x = 1\n"

    @pytest.mark.parametrize("prompt", ["   ", "\n\t"])
    def test_accepts_whitespace_only_text(self, prompt) -> None:
        assert ReviewRequest(prompt=prompt).prompt == prompt

    @pytest.mark.parametrize("prompt", [None, "", 42, 3.5, b"code", ["a"], {"a": 1}])
    def test_rejects_empty_or_non_text(self, prompt) -> None:
        with pytest.raises(ValidationError):
            ReviewRequest(prompt=prompt)


class TestReviewResult:
    """Test suite for the result union."""

    def test_every_kind_has_a_message(self) -> None:
        assert set(FAILURE_MESSAGES) == set(ReviewFailureKind)

    def test_failure_of_uses_fixed_message(self) -> None:
        failure = ReviewFailure.of(ReviewFailureKind.UPSTREAM_QUOTA_EXCEEDED)

        assert failure.status == "failure"
        assert failure.kind is ReviewFailureKind.UPSTREAM_QUOTA_EXCEEDED
        assert failure.message == (
            "AI quota exceeded. Please try again later or upgrade your plan."
        )

    def test_discriminates_on_status(self) -> None:
        adapter = TypeAdapter(ReviewResult)

        success = adapter.validate_python({"status": "success", "text": "LGTM"})
        failure = adapter.validate_python(
            {"status": "failure", "kind": "upstream_timeout", "message": "timed out"}
        )

        assert isinstance(success, ReviewSuccess)
        assert success.text == "LGTM"
        assert isinstance(failure, ReviewFailure)
        assert failure.kind is ReviewFailureKind.UPSTREAM_TIMEOUT

    def test_results_are_immutable(self) -> None:
        success = ReviewSuccess(text="LGTM")
        with pytest.raises(ValidationError):
            success.text = "changed"
