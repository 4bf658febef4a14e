"""Shared data structures used across the crawler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

CONNECTION_ERROR = "Connection Error"
INITIAL_SOURCE = "Initial Page"
LOG_SEPARATOR = "-------------------"

ErrorReason = Union[int, str]


@dataclass(frozen=True)
class ErrorRecord:
    """A destination that failed to load and the page that linked to it."""

    source: str
    destination: str
    reason: ErrorReason

    def to_log_entry(self) -> str:
        return (
            f"Source: {self.source}\n"
            f"Destination: {self.destination}\n"
            f"Error Code: {self.reason}\n"
            f"{LOG_SEPARATOR}\n"
        )

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "destination": self.destination,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class Candidate:
    """An address waiting on the worklist, paired with the page that referenced it."""

    url: str
    source: str


@dataclass
class LoadResult:
    """Outcome of a single page load reported by the rendering session."""

    url: str
    status: Optional[int] = None
    links: List[str] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.status is not None and 400 <= self.status < 600
