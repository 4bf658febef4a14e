"""Depth-first same-origin crawler that records unreachable destinations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.config import CrawlerConfig
from ..core.models import CONNECTION_ERROR, INITIAL_SOURCE, Candidate
from ..core.report import CrawlReport
from ..render.session import BrowserSession, TransportError
from .errors import ErrorRecorder
from .state import CrawlState
from .targeting import OriginFilter, normalize_url

logger = logging.getLogger(__name__)


@dataclass
class Crawler:
    """Visits every reachable page of the seed's host exactly once."""

    config: CrawlerConfig
    session_factory: Callable[[CrawlerConfig], BrowserSession] = BrowserSession
    _state: Optional[CrawlState] = field(default=None, init=False, repr=False)

    @property
    def runtime_state(self) -> Optional[CrawlState]:
        """Return the state of the current or last crawl."""

        return self._state

    # ------------------------------------------------------------------
    # Core workflow
    # ------------------------------------------------------------------
    def crawl(self, seed_url: Optional[str] = None) -> CrawlReport:
        seed = seed_url or self.config.seed_url
        origin = OriginFilter.from_seed(seed)
        if origin is None:
            logger.warning("Seed %r is not an absolute http(s) URL; nothing to crawl", seed)
            self._state = None
            return CrawlReport(seed_url=seed)

        state = CrawlState(origin_host=origin.origin_host)
        recorder = ErrorRecorder(state, self.config.error_log_path)
        self._state = state

        # LIFO with children pushed in reverse keeps recursive depth-first order
        worklist: List[Candidate] = [Candidate(url=seed, source=INITIAL_SOURCE)]

        with self.session_factory(self.config) as session:
            while worklist:
                if self._page_limit_reached(state):
                    logger.info("Stopping after %d pages (MAX_PAGES)", state.loaded_count)
                    break
                candidate = worklist.pop()
                children = self._visit(session, candidate, origin, state, recorder)
                worklist.extend(reversed(children))

        return CrawlReport(
            seed_url=seed,
            visited_urls=set(state.visited),
            errors=list(state.errors),
        )

    # ------------------------------------------------------------------
    # Crawling primitives
    # ------------------------------------------------------------------
    def _visit(
        self,
        session: BrowserSession,
        candidate: Candidate,
        origin: OriginFilter,
        state: CrawlState,
        recorder: ErrorRecorder,
    ) -> List[Candidate]:
        if not origin.is_allowed(candidate.url):
            logger.debug("Skipping %s (invalid or outside %s)", candidate.url, origin.origin_host)
            return []

        address = normalize_url(candidate.url)
        if address is None or not state.ledger.try_mark(address):
            return []

        logger.info("Crawling: %s", address)
        state.loaded_count += 1

        try:
            result = session.load(address)
        except TransportError as error:
            logger.warning("Error crawling %s (%s): %s", address, error.kind, error)
            recorder.record(candidate.source, address, CONNECTION_ERROR)
            return []
        except Exception:
            logger.exception("Unexpected failure while crawling %s", address)
            recorder.record(candidate.source, address, CONNECTION_ERROR)
            return []

        if result.is_error:
            logger.warning("HTTP %s on %s (linked from %s)", result.status, address, candidate.source)
            recorder.record(candidate.source, address, result.status)
            return []

        return [Candidate(url=link, source=address) for link in result.links]

    def _page_limit_reached(self, state: CrawlState) -> bool:
        return bool(self.config.max_pages) and state.loaded_count >= self.config.max_pages
