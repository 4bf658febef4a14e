"""Centralized imports for the site_crawler package used in tests."""

from site_crawler.core import config as config_module  # type: ignore[import]
from site_crawler.core.config import (  # type: ignore[import]
    CrawlerConfig,
    load_configuration,
)
from site_crawler.core.models import (  # type: ignore[import]
    CONNECTION_ERROR,
    INITIAL_SOURCE,
    ErrorRecord,
    LoadResult,
)
from site_crawler.core.report import CrawlReport  # type: ignore[import]
from site_crawler.recon.crawler import Crawler  # type: ignore[import]
from site_crawler.recon.errors import ErrorRecorder  # type: ignore[import]
from site_crawler.recon.link_collector import LinkCollector, filter_http_links  # type: ignore[import]
from site_crawler.recon.state import CrawlState, VisitLedger  # type: ignore[import]
from site_crawler.recon.targeting import (  # type: ignore[import]
    OriginFilter,
    is_admissible,
    normalize_url,
)
from site_crawler.render.session import TransportError  # type: ignore[import]

__all__ = [
    "config_module",
    "CrawlerConfig",
    "load_configuration",
    "CONNECTION_ERROR",
    "INITIAL_SOURCE",
    "ErrorRecord",
    "LoadResult",
    "CrawlReport",
    "Crawler",
    "ErrorRecorder",
    "LinkCollector",
    "filter_http_links",
    "CrawlState",
    "VisitLedger",
    "OriginFilter",
    "is_admissible",
    "normalize_url",
    "TransportError",
]
