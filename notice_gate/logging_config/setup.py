"""Root logger configuration."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    log_file: str | Path | None = None,
    log_level: str = "INFO",
) -> logging.Logger:
    """
    Configure the root logger with console and optional file output.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        log_file: Log file path, or None to log to the console only
        log_level: Level name such as "INFO" or "DEBUG"

    Returns:
        The configured root logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
