from __future__ import annotations

from dataclasses import dataclass, field

from ..core.models import ErrorRecord


class VisitLedger:
    """Set of normalized addresses that have already been scheduled."""

    def __init__(self) -> None:
        self._visited: set[str] = set()

    def try_mark(self, address: str) -> bool:
        """Insert ``address`` and return ``True`` only on its first insertion."""

        if address in self._visited:
            return False
        self._visited.add(address)
        return True

    @property
    def visited(self) -> frozenset[str]:
        return frozenset(self._visited)


@dataclass(slots=True)
class CrawlState:
    """Mutable bookkeeping for a single crawl run."""

    origin_host: str
    ledger: VisitLedger = field(default_factory=VisitLedger)
    errors: list[ErrorRecord] = field(default_factory=list)
    loaded_count: int = 0

    @property
    def visited(self) -> frozenset[str]:
        return self.ledger.visited
