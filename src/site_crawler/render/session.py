"""Playwright-backed rendering session used to load crawl targets."""

from __future__ import annotations

import logging
from typing import List, Optional

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, Response, sync_playwright
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..core.config import CrawlerConfig
from ..core.models import LoadResult
from ..recon.link_collector import LinkCollector
from ..recon.targeting import normalize_url

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
)

# Chromium net error codes as they appear in Playwright navigation errors
NETWORK_ERROR_KINDS = (
    ("ERR_TIMED_OUT", "timeout"),
    ("ERR_CONNECTION_TIMED_OUT", "timeout"),
    ("ERR_NAME_NOT_RESOLVED", "dns"),
    ("ERR_NAME_RESOLUTION_FAILED", "dns"),
    ("ERR_ADDRESS_UNREACHABLE", "refused"),
    ("ERR_CONNECTION_REFUSED", "refused"),
    ("ERR_CONNECTION_RESET", "connection"),
    ("ERR_CONNECTION_CLOSED", "connection"),
    ("ERR_CONNECTION_ABORTED", "connection"),
    ("ERR_CERT_", "tls"),
    ("ERR_SSL_", "tls"),
    ("ERR_HTTP2_PROTOCOL_ERROR", "protocol"),
    ("ERR_INVALID_RESPONSE", "protocol"),
    ("ERR_EMPTY_RESPONSE", "protocol"),
    ("ERR_TOO_MANY_REDIRECTS", "protocol"),
)


class TransportError(RuntimeError):
    """Raised when a navigation fails before the destination answered."""

    def __init__(self, url: str, kind: str, message: str = "") -> None:
        detail = f"{kind} error loading {url}"
        super().__init__(f"{detail}: {message}" if message else detail)
        self.url = url
        self.kind = kind


def classify_navigation_error(error: Exception) -> str:
    if isinstance(error, PlaywrightTimeoutError):
        return "timeout"
    message = str(error)
    for marker, kind in NETWORK_ERROR_KINDS:
        if marker in message:
            return kind
    return "unknown"


class ResponseObserver:
    """Watches page responses and keeps the statuses of the exact destination.

    Responses for sub-resources or for redirect targets never match.
    """

    def __init__(self, destination: str) -> None:
        self.destination = normalize_url(destination) or destination
        self.statuses: List[int] = []

    def __call__(self, response: Response) -> None:
        if normalize_url(response.url) == self.destination:
            self.statuses.append(response.status)

    @property
    def status(self) -> Optional[int]:
        for status in self.statuses:
            if 400 <= status < 600:
                return status
        return self.statuses[0] if self.statuses else None


class BrowserSession:
    """One Chromium instance for the whole crawl, one page per load."""

    def __init__(self, config: CrawlerConfig, link_collector: Optional[LinkCollector] = None) -> None:
        self.config = config
        self.link_collector = link_collector or LinkCollector()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    def __enter__(self) -> "BrowserSession":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def open(self) -> None:
        if self._context is not None:
            return

        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(
                headless=self.config.headless,
                args=list(CHROMIUM_ARGS),
            )
            self._context = self._browser.new_context()
        except Exception:
            self.close()
            raise

    def close(self) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            self._browser = None
            self._context = None
            if self._playwright is not None:
                self._playwright.stop()
                self._playwright = None

    def load(self, url: str) -> LoadResult:
        """Navigate to ``url`` and report its status and outgoing links.

        Links are only extracted when the destination did not answer with
        an error status.
        """

        if self._context is None:
            raise RuntimeError("BrowserSession.load() called before open()")

        page = self._context.new_page()
        observer = ResponseObserver(url)
        page.on("response", observer)

        try:
            try:
                page.goto(
                    url,
                    wait_until=self.config.wait_until,
                    timeout=self.config.navigation_timeout_ms,
                )
            except PlaywrightError as error:
                raise TransportError(url, classify_navigation_error(error), str(error)) from error

            result = LoadResult(url=url, status=observer.status)
            if not result.is_error:
                result.links = self.link_collector.collect_from_page(page)
            return result
        finally:
            self._close_page(page)

    @staticmethod
    def _close_page(page: Page) -> None:
        try:
            page.close()
        except PlaywrightError:
            logger.debug("Page was already closed", exc_info=True)
