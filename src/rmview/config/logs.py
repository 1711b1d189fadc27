"""
Logging setup for rmview.

The terminal belongs to the UI, so records only ever go to a file.

Created: 2026-10-19
"""

import logging
from pathlib import Path

from rmview.config.settings import LoggingSettings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: LoggingSettings) -> Path:
    """
    Attach a file handler to the ``rmview`` logger.

    Args:
        settings: Logging settings (level and file path)

    Returns:
        Resolved log file path
    """
    log_path = Path(settings.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("rmview")
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)
    root.setLevel(settings.level.upper())
    root.propagate = False

    return log_path
