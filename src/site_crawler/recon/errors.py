"""Error bookkeeping: in-memory list plus the append-only error log file."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.models import ErrorReason, ErrorRecord
from .state import CrawlState

logger = logging.getLogger(__name__)


class ErrorRecorder:
    """Appends failures to the crawl state and to the error log on disk."""

    def __init__(self, state: CrawlState, log_path: Path) -> None:
        self.state = state
        self.log_path = Path(log_path)

    def record(self, source: str, destination: str, reason: ErrorReason) -> ErrorRecord:
        entry = ErrorRecord(source=source, destination=destination, reason=reason)
        self.state.errors.append(entry)
        self._append_to_log(entry)
        return entry

    def _append_to_log(self, entry: ErrorRecord) -> None:
        try:
            with self.log_path.open("a", encoding="utf-8") as handle:
                handle.write(entry.to_log_entry())
        except OSError:
            logger.error(
                "Could not append to error log %s; keeping record in memory only",
                self.log_path,
                exc_info=True,
            )
