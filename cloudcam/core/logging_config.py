"""Process-wide logging setup."""
import logging

from .config import get_settings

_configured = False


def configure_logging() -> None:
    """Configure the root logger once, at the level given by LOG_LEVEL."""
    global _configured
    if _configured:
        return
    level = getattr(logging, get_settings().log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request at INFO; the gateway already does
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    _configured = True
