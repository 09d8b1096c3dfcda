from __future__ import annotations
import logging


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure root logging for the application.

    Unknown level names fall back to WARNING. Returns a module logger for
    the caller.
    """
    if isinstance(level, str):
        numeric = getattr(logging, level.upper(), None)
        level = numeric if isinstance(numeric, int) else logging.WARNING

    logging.log(100, f'[kvstore]: Log level set to: {logging.getLevelName(level)}')

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)

    # Keep known noisy libraries quiet by default
    logging.getLogger('uvicorn.access').setLevel(max(level, logging.WARNING))
    logger.info("Starting kvstore server")

    return logger
