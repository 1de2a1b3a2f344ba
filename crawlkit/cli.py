"""Command-line entry point for the crawler."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .engine import CrawlError, run
from .options import (
    DEFAULT_MAX_PAGES,
    DEFAULT_REQUESTS_PER_HOST,
    DEFAULT_ROBOTS_TIMEOUT,
    DEFAULT_SEED,
    DEFAULT_STRATEGY,
    DEFAULT_TOKENS,
    DEFAULT_USER_AGENT,
    DEFAULT_WORKERS,
    Options,
)

_FLAGS = [
    ("seed", "seed", str, DEFAULT_SEED, "initial URL to start crawling from"),
    ("maxPages", "max_pages", int, DEFAULT_MAX_PAGES, "stop after N pages"),
    ("workers", "workers", int, DEFAULT_WORKERS, "number of parallel fetchers"),
    ("strategy", "strategy", str, DEFAULT_STRATEGY,
     "bfs (breadth-first), dfs (depth-first) or mixedN (N%% depth-first)"),
    ("maxPerHost", "max_per_host", float, DEFAULT_REQUESTS_PER_HOST,
     "max requests/sec to one host"),
    ("userAgent", "user_agent", str, DEFAULT_USER_AGENT, "HTTP User-Agent string"),
    ("robotsTimeout", "robots_timeout", int, int(DEFAULT_ROBOTS_TIMEOUT),
     "robots.txt timeout (sec)"),
    ("tokens", "tokens", int, DEFAULT_TOKENS, "max number of tokens to parse in HTML content"),
]


def build_parser() -> argparse.ArgumentParser:
    """The argument parser; every flag takes one or two leading dashes."""
    parser = argparse.ArgumentParser(
        prog="crawl", description="Crawl the web from a seed URL.", allow_abbrev=False
    )
    for flag, dest, kind, default, help_text in _FLAGS:
        parser.add_argument(
            f"-{flag}", f"--{flag}", dest=dest, type=kind, default=default, help=help_text
        )
    return parser


def parse_options(argv: Sequence[str] | None = None) -> Options:
    """Turn command-line arguments into crawl options."""
    args = build_parser().parse_args(argv)
    return Options(
        seeds=[args.seed],
        max_pages=args.max_pages,
        workers=args.workers,
        strategy=args.strategy,
        requests_per_host=args.max_per_host,
        robots_timeout=float(args.robots_timeout),
        user_agent=args.user_agent,
        tokens=args.tokens,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run a crawl; return the process exit status."""
    try:
        run(parse_options(argv))
    except CrawlError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())