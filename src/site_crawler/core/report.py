"""Summary of a finished crawl; only its errors are written to disk."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set

from .models import ErrorRecord


@dataclass
class CrawlReport:
    """Structured data produced by a crawl run.

    ``visited_urls`` is kept for the caller's inspection only and is never
    serialized.
    """

    seed_url: str = ""
    visited_urls: Set[str] = field(default_factory=set)
    errors: List[ErrorRecord] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def format_errors(self) -> str:
        return "\n".join(record.to_log_entry() for record in self.errors)

    def to_json(self) -> str:
        data = {
            "seed_url": self.seed_url,
            "errors": [record.to_dict() for record in self.errors],
        }
        return json.dumps(data, indent=4)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
