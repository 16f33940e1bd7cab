"""Process-wide log configuration and optional Logfire tracing."""

import logging
import sys

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries that log every request at INFO
QUIET_LOGGERS = ("httpx", "urllib3", "google_genai")


def setup_logging() -> None:
    """Send all records to stdout at the level named by LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _enable_logfire(token: str) -> None:
    import logfire

    logfire.configure(token=token)
    logfire.instrument_pydantic_ai()
    logfire.instrument_httpx()


def setup_observability() -> bool:
    """Configure logging, then trace Gemini and HTTP calls when LOGFIRE_TOKEN is set.

    Returns:
        Whether Logfire ended up enabled; main.py uses it to instrument FastAPI.
    """
    setup_logging()
    logger = logging.getLogger(__name__)

    token = settings.logfire_token
    if not token:
        logger.info("LOGFIRE_TOKEN not set; tracing disabled")
        return False

    try:
        _enable_logfire(token)
    except ImportError:
        logger.warning(
            "LOGFIRE_TOKEN is set but logfire is missing; install code-review-gateway[logfire]"
        )
        return False
    except Exception as e:
        logger.error(f"Logfire setup failed, continuing without tracing: {e}")
        return False

    logger.info(f"Logfire tracing enabled ({settings.environment})")
    return True
