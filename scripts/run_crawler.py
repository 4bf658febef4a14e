"""Helper script to run the crawler with one-off overrides.

Useful for smoke tests against a staging site without editing ``.env``:
the headless mode, error log and JSON report paths can be set per run.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Guarantee imports resolve to the local source tree when running from a checkout.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    src_str = str(SRC_PATH)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

from site_crawler.cli import configure_logging, print_summary
from site_crawler.core.config import load_configuration
from site_crawler.recon.crawler import Crawler


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the crawler against a single seed URL"
    )
    parser.add_argument("url", help="Seed URL of the site to crawl")
    parser.add_argument(
        "--headless",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force headless mode (default comes from .env/environment)",
    )
    parser.add_argument("--error-log", help="Error log file (overrides ERROR_LOG_PATH)")
    parser.add_argument("--report", help="JSON report file (overrides REPORT_PATH)")
    parser.add_argument("--max-pages", type=int, help="Stop after this many pages (overrides MAX_PAGES)")
    return parser.parse_args()


def main() -> None:
    args = parse_arguments()
    config = load_configuration(args.url)
    configure_logging()

    if args.headless is not None:
        config.headless = args.headless
    if args.error_log:
        config.error_log_path = Path(args.error_log).resolve()
    if args.report:
        config.report_path = Path(args.report).resolve()
    if args.max_pages is not None:
        config.max_pages = max(0, args.max_pages)

    crawler = Crawler(config)

    print(f"[*] Crawling {config.seed_url}")
    try:
        report = crawler.crawl()
    except KeyboardInterrupt:
        print("[!] Interrupted by user")
        return

    if config.report_path is not None:
        report.save(config.report_path)
        print(f"[+] Report saved to {config.report_path}")

    print(f"    Pages visited : {len(report.visited_urls)}")
    print(f"    Errors logged : {len(report.errors)}")
    print(f"    Error log     : {config.error_log_path}")
    print_summary(report)


if __name__ == "__main__":
    main()
