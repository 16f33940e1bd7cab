"""Services for external API interactions."""

from src.services.review_gateway import ReviewGateway, classify_upstream_error

__all__ = ["ReviewGateway", "classify_upstream_error"]
