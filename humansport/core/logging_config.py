import logging
import sys

from humansport.core.config import get_settings


def setup_logging() -> None:
    """Configure the root logger once, honouring DEBUG_MODE."""
    settings = get_settings()
    root = logging.getLogger()
    level = logging.DEBUG if settings.DEBUG_MODE else logging.INFO
    root.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Uvicorn may have installed its own handlers already
    if root.hasHandlers():
        root.handlers.clear()
    root.addHandler(console_handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)

    root.info("Logging configured at level %s", logging.getLevelName(level))


__all__ = ["setup_logging"]
