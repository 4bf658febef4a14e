from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from .targeting import HTTP_SCHEMES

logger = logging.getLogger(__name__)

# anchor.href is resolved against the document base by the browser
ANCHOR_HREFS_SCRIPT = "anchors => anchors.map(anchor => anchor.href)"


def filter_http_links(links: Iterable[Optional[str]]) -> List[str]:
    """Keep absolute http(s) links, preserving order and duplicates."""

    kept: List[str] = []
    for link in links:
        if not link or not isinstance(link, str):
            continue
        try:
            scheme = urlparse(link).scheme.lower()
        except ValueError:
            continue
        if scheme in HTTP_SCHEMES:
            kept.append(link)
    return kept


@dataclass(slots=True)
class LinkCollector:
    """Extracts hyperlink targets from a rendered page in document order."""

    parser: str = "html.parser"

    def collect_from_page(self, page: Any) -> List[str]:
        """Collect anchor targets from a Playwright page.

        Falls back to parsing the serialized HTML when the DOM cannot be
        evaluated (for example after the page navigated away mid-query).
        """

        try:
            hrefs = page.eval_on_selector_all("a", ANCHOR_HREFS_SCRIPT)
        except Exception:
            logger.debug("DOM link query failed on %s; parsing HTML instead", page.url, exc_info=True)
            html = self._read_page_html(page)
            return self.gather_from_html(html, page.url) if html else []

        return filter_http_links(hrefs)

    def gather_from_html(self, html: str, base_url: str) -> List[str]:
        soup = BeautifulSoup(html, self.parser)
        hrefs = [
            urljoin(base_url, anchor["href"].strip())
            for anchor in soup.find_all("a", href=True)
        ]
        return filter_http_links(hrefs)

    @staticmethod
    def _read_page_html(page: Any) -> str:
        try:
            return page.content()
        except Exception:
            return ""
