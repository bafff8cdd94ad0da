"""
Command line front ends.

gh-stats collects stats for one repository and prints them as JSON;
md-table renders one or more of those JSON files as markdown.
"""

import os
import sys
import json
import argparse
import logging
from datetime import datetime
from typing import List

from dotenv import load_dotenv

from .analyzer import PullRequestStatsAnalyzer
from .config import Config
from .exceptions import ConfigurationError
from .models import parse_timestamp
from .output import MarkdownTableFormatter


def configure_logging():
    """Configure logging to stderr (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p',
        stream=sys.stderr
    )


def parse_date(value: str) -> datetime:
    """Parse an ISO-8601 date-time with offset from the command line."""
    try:
        parsed = parse_timestamp(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 date-time: {value}")
    if parsed.tzinfo is None:
        raise argparse.ArgumentTypeError(f"date-time needs a UTC offset: {value}")
    return parsed


def build_stats_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gh-stats',
        description='Collect review, comment and commit counts for PRs merged in a date window.'
    )
    parser.add_argument('repository', help='Repository in owner/name form')
    parser.add_argument('from_date', metavar='from', type=parse_date,
                        help='Inclusive start, e.g. 2024-01-01T00:00:00Z')
    parser.add_argument('to_date', metavar='to', type=parse_date,
                        help='Inclusive end, e.g. 2024-03-31T23:59:59Z')
    parser.add_argument('--no-cache', action='store_true',
                        help='Ignore the CACHE directory and fetch everything live')
    return parser


def stats_main(argv: List[str] = None) -> int:
    """Entry point for gh-stats; returns the process exit status."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    configure_logging()

    args = build_stats_parser().parse_args(argv)

    try:
        config = Config.from_env()
        if args.no_cache:
            config = config.without_cache()
        if not config.token:
            raise ConfigurationError("Missing environment variable: GITHUB_TOKEN")

        analyzer = PullRequestStatsAnalyzer(config)
        result = analyzer.run(args.repository, args.from_date, args.to_date)
    except Exception as e:
        logging.error(f"Error analyzing {args.repository}: {e}", exc_info=True)
        return 1

    print(json.dumps(result, indent=2))
    return 0


def build_table_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='md-table',
        description='Render gh-stats JSON files as a markdown approvals summary.'
    )
    parser.add_argument('files', nargs='+', help='JSON files written by gh-stats')
    return parser


def table_main(argv: List[str] = None) -> int:
    """Entry point for md-table; returns the process exit status."""
    configure_logging()

    args = build_table_parser().parse_args(argv)

    try:
        documents = []
        for path in args.files:
            with open(path, 'r', encoding='utf-8') as f:
                documents.append(json.load(f))
    except Exception as e:
        logging.error(f"Error reading stats: {e}", exc_info=True)
        return 1

    MarkdownTableFormatter().print_summary(documents)
    return 0


def main():
    sys.exit(stats_main())


def md_table():
    sys.exit(table_main())
