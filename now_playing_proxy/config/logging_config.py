# now_playing_proxy/config/logging_config.py
import logging

from now_playing_proxy.config.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Root logging setup; safe to call more than once."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("now_playing_proxy").setLevel(level.upper())


def mask_token(token: str | None) -> str:
    if not token:
        return "<none>"
    return f"{token[:6]}..."
