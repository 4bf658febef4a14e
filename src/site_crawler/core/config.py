"""Configuration loading utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

WAIT_CONDITIONS = frozenset({"load", "domcontentloaded", "networkidle", "commit"})
DEFAULT_ERROR_LOG = "error_log.txt"
DEFAULT_NAVIGATION_TIMEOUT_MS = 30000


@dataclass(slots=True)
class CrawlerConfig:
    """Holds runtime options for a single crawl."""

    seed_url: str
    error_log_path: Path
    report_path: Optional[Path] = None
    headless: bool = True
    wait_until: str = "networkidle"
    navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS
    max_pages: int = 0


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def load_configuration(seed_url: str) -> CrawlerConfig:
    """Builds a ``CrawlerConfig`` from the seed URL and environment variables."""

    load_dotenv()  # Loads .env values if present

    wait_until = os.getenv("WAIT_UNTIL", "networkidle").lower()
    if wait_until not in WAIT_CONDITIONS:
        raise ValueError(
            f"WAIT_UNTIL must be one of {sorted(WAIT_CONDITIONS)}, got {wait_until!r}"
        )

    report_name = os.getenv("REPORT_PATH") or None

    return CrawlerConfig(
        seed_url=seed_url.strip(),
        error_log_path=Path(os.getenv("ERROR_LOG_PATH", DEFAULT_ERROR_LOG)).resolve(),
        report_path=Path(report_name).resolve() if report_name else None,
        headless=_env_flag("HEADLESS", "true"),
        wait_until=wait_until,
        navigation_timeout_ms=int(
            os.getenv("NAVIGATION_TIMEOUT_MS", str(DEFAULT_NAVIGATION_TIMEOUT_MS))
        ),
        max_pages=max(0, int(os.getenv("MAX_PAGES", "0"))),
    )
