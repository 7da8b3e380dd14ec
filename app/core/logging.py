import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Attach a single stderr handler to the root logger. Safe to call repeatedly."""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    if any(getattr(handler, "_trip_planner", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._trip_planner = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # httpx logs every request line at INFO, which drowns out our own messages.
    logging.getLogger("httpx").setLevel(logging.WARNING)
