"""Command line interface for the site crawler."""

from __future__ import annotations

import argparse
import logging
import os

from .core.config import load_configuration
from .core.report import CrawlReport
from .recon.crawler import Crawler


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crawl every page of a site and log links that fail to load"
    )
    parser.add_argument("url", help="Seed URL; only links on the same hostname are followed")
    return parser.parse_args()


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_summary(report: CrawlReport) -> None:
    if report.has_errors:
        print("\nErrors found:")
        print(report.format_errors())
    else:
        print("\nNo errors found!")


def run_cli() -> None:
    args = parse_arguments()
    config = load_configuration(args.url)
    configure_logging()

    print("Starting crawler...")
    report = Crawler(config).crawl()
    print("Crawling complete!")

    if config.report_path is not None:
        report.save(config.report_path)
        print(f"[+] Report saved to {config.report_path}")

    print_summary(report)


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
