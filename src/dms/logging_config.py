from __future__ import annotations

import json
import logging
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional, TextIO

from .config import Settings, get_settings
from .errors import ResourceError
from .events import composite_id, message_for, severity_of
from .models import EventRecord

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_MODE = 0o644

logger = logging.getLogger(__name__)


def setup_logging(level: str, log_file: Path | None = None) -> None:
    """Configure plain-text diagnostics for console and optional file output.

    Parameters
    ----------
    level:
        Log level name (e.g., "INFO", "DEBUG").
    log_file:
        If provided, diagnostics are also written to this file.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=FORMAT,
        handlers=handlers,
        force=True,
    )


class JSONFormatter(logging.Formatter):
    """Render event records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
            timespec="milliseconds"
        )
        if ts.endswith("+00:00"):
            ts = ts[:-6] + "Z"
        payload = {}
        event = getattr(record, "event", None)
        if isinstance(event, EventRecord):
            payload.update(event.model_dump())
        else:
            payload["level"] = record.levelname.lower()
        payload["msg"] = record.getMessage()
        payload["time"] = ts
        return json.dumps(payload, ensure_ascii=False)


class EventLogger:
    """Structured event log bound to a single sink.

    The sink, formatter and minimum level are fixed when the handle is
    created; :meth:`log` only writes. ``sink=None`` selects standard output.
    """

    def __init__(self, sink: Optional[TextIO] = None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.sink = sink if sink is not None else sys.stdout
        self._handler = logging.StreamHandler(self.sink)
        self._handler.setFormatter(JSONFormatter())
        # Not registered with the logging manager, so handles never share state.
        self._logger = logging.Logger(f"{__name__}.events", self.settings.level)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    def log(self, code: int, transaction: str, src: str) -> None:
        """Write one record for ``code`` if its severity passes the level gate."""
        severity = severity_of(code)
        record = EventRecord(
            level=severity.label,
            id=composite_id(code, self.settings.namespace),
            prio=int(severity),
            code=int(code),
            transaction=transaction,
            src=src,
        )
        self._logger.log(
            severity.level,
            "%s",
            message_for(code, self.settings.service_name),
            extra={"event": record},
        )

    @property
    def owns_sink(self) -> bool:
        return self.sink not in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)

    def close(self) -> None:
        """Flush the sink and close it unless it is a standard stream."""
        self._handler.flush()
        self._logger.removeHandler(self._handler)
        self._handler.close()
        if self.owns_sink and not self.sink.closed:
            self.sink.close()

    def __enter__(self) -> "EventLogger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_log_file(path: str | Path) -> TextIO:
    """Open ``path`` write-only for appending, creating it with mode 0644."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, LOG_FILE_MODE)
    except OSError as exc:
        raise ResourceError(path, exc.strerror or str(exc)) from exc
    return os.fdopen(fd, "a", encoding="utf-8")


@contextmanager
def open_event_logger(
    path: str | Path, settings: Settings | None = None, src: str = "main"
) -> Iterator[EventLogger]:
    """Yield an :class:`EventLogger` writing to ``path``.

    When the file cannot be opened, event 200001 is written to standard
    output and standard output becomes the sink. The sink is flushed and
    closed when the block exits.
    """
    settings = settings or get_settings()
    try:
        sink: TextIO = open_log_file(path)
    except ResourceError as exc:
        logger.warning("%s, falling back to stdout", exc)
        with EventLogger(sys.stdout, settings) as fallback:
            fallback.log(exc.code, settings.transaction_id, src)
        sink = sys.stdout

    events = EventLogger(sink, settings)
    try:
        yield events
    finally:
        events.close()


__all__ = [
    "EventLogger",
    "JSONFormatter",
    "open_event_logger",
    "open_log_file",
    "setup_logging",
]
