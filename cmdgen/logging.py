"""Logging for cmdgen runs.

cmdgen runs once per build, so console records read like compiler
diagnostics (``cmdgen: warning: vpc.py:12: ...``) rather than service logs.
Records about a spec file carry its location through :func:`source_location`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

_LOGGER_NAME = "cmdgen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the cmdgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def source_location(path: str | Path, lineno: int | None = None) -> Dict[str, str]:
    """Build the ``extra`` mapping that pins a record to a spec file line."""
    name = Path(path).name
    return {"location": f"{name}:{lineno}" if lineno else name}


class DiagnosticFormatter(logging.Formatter):
    """Formats records as ``<prog>: [<level>: ][<file:line>: ]<message>``.

    Info and debug records omit the level so progress lines stay short.
    """

    def __init__(self, prog: str = _LOGGER_NAME, *, timestamps: bool = False) -> None:
        super().__init__("%(asctime)s %(message)s" if timestamps else "%(message)s")
        self.prog = prog
        self.timestamps = timestamps

    def formatMessage(self, record: logging.LogRecord) -> str:
        parts = [self.prog]
        if record.levelno >= logging.WARNING:
            parts.append(record.levelname.lower())
        location = getattr(record, "location", None)
        if location:
            parts.append(location)
        text = ": ".join(parts + [record.message])
        if self.timestamps:
            return f"{record.asctime} {text}"
        return text


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route cmdgen diagnostics to stderr and, optionally, to ``log_file``.

    The file sink always records debug detail with timestamps, whatever the
    console verbosity.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Re-running the CLI in-process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    console.setFormatter(DiagnosticFormatter())
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(DiagnosticFormatter(timestamps=True))
        logger.addHandler(file_handler)

    return logger


__all__ = ["DiagnosticFormatter", "configure_logging", "get_logger", "source_location"]
