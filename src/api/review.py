"""Review endpoint."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from src.models.review import ReviewFailure, ReviewFailureKind
from src.services.review_gateway import ReviewGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ai", tags=["review"])

FAILURE_STATUS_CODES: dict[ReviewFailureKind, int] = {
    ReviewFailureKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ReviewFailureKind.EMPTY_UPSTREAM_RESPONSE: status.HTTP_502_BAD_GATEWAY,
    ReviewFailureKind.UPSTREAM_QUOTA_EXCEEDED: status.HTTP_429_TOO_MANY_REQUESTS,
    ReviewFailureKind.UPSTREAM_NOT_FOUND: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ReviewFailureKind.UPSTREAM_TRANSPORT_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ReviewFailureKind.UPSTREAM_TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ReviewFailureKind.UPSTREAM_UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_review_gateway(request: Request) -> ReviewGateway:
    """Return the gateway built at startup."""
    return request.app.state.review_gateway


async def extract_prompt(request: Request) -> Any:
    """Pull the prompt out of a JSON object body or a raw text body.

    Returns None when no prompt can be found; the gateway rejects it.
    """
    body = await request.body()
    content_type = request.headers.get("content-type", "").lower()

    if "application/json" in content_type:
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Review request body is not valid JSON")
            return None
        if not isinstance(payload, dict):
            return None
        return payload.get("prompt")

    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Review request body is not valid UTF-8 text")
        return None


@router.post("/review", response_class=PlainTextResponse)
async def review_code(
    request: Request,
    gateway: ReviewGateway = Depends(get_review_gateway),
) -> PlainTextResponse:
    """
    Review a code snippet.

    Accepts ``{"prompt": "..."}`` as JSON or the snippet as a raw text body.

    Returns:
        The review text, or a caller-safe error message with a matching status
    """
    prompt = await extract_prompt(request)
    result = await gateway.review(prompt)

    if isinstance(result, ReviewFailure):
        return PlainTextResponse(
            result.message,
            status_code=FAILURE_STATUS_CODES[result.kind],
            headers={"X-Review-Error-Kind": result.kind.value},
        )
    return PlainTextResponse(result.text)
