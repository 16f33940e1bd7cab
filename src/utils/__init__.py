"""Utility functions and helpers."""

from .cors import OriginGuardMiddleware, is_allowed_origin
from .logging import setup_observability

__all__ = [
    "setup_observability",
    "is_allowed_origin",
    "OriginGuardMiddleware",
]
