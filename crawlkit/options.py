"""Crawl options and the frontier selection strategy."""

from __future__ import annotations

import random
import re
import time
from dataclasses import dataclass, field

from .frontier import Queue

DEFAULT_SEED = "https://example.com/"
DEFAULT_MAX_PAGES = 5000
DEFAULT_WORKERS = 32
DEFAULT_STRATEGY = "bfs"
DEFAULT_REQUESTS_PER_HOST = 2.0
DEFAULT_USER_AGENT = "crawlkit/0.2"
DEFAULT_ROBOTS_TIMEOUT = 5.0
DEFAULT_TOKENS = 5000
DEFAULT_METRICS_PORT = 2112


def mix_percent(strategy: str) -> int:
    """Percent of pops taken from the back: ``bfs`` 0, ``dfs`` 100, ``mixedN`` N in 0..100.

    Anything else, or a malformed or out-of-range N, gives 0.
    """
    s = strategy.lower()
    if s == "dfs":
        return 100
    suffix = s[len("mixed"):]
    if s.startswith("mixed") and re.fullmatch(r"[+-]?[0-9]+", suffix):
        n = int(suffix)
        if -(2**63) <= n < 2**63:
            return max(0, min(100, n))
    return 0


@dataclass
class Options:
    """Settings for one crawl."""

    seeds: list[str] = field(default_factory=lambda: [DEFAULT_SEED])
    max_pages: int = DEFAULT_MAX_PAGES
    workers: int = DEFAULT_WORKERS
    strategy: str = DEFAULT_STRATEGY
    requests_per_host: float = DEFAULT_REQUESTS_PER_HOST
    robots_timeout: float = DEFAULT_ROBOTS_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    tokens: int = DEFAULT_TOKENS
    metrics_port: int | None = DEFAULT_METRICS_PORT

    def mix_pct(self) -> int:
        """Share of pops, in percent, taken depth-first."""
        return mix_percent(self.strategy)

    def select_url(self, queue: Queue, rng: random.Random) -> str | None:
        """Pop the next URL from the front or back of ``queue`` by strategy."""
        pct = self.mix_pct()
        if pct == 100 or (pct != 0 and rng.randrange(100) < pct):
            return queue.pop_back()
        return queue.pop_front()

    def make_rng(self) -> random.Random:
        """A random generator seeded from the clock."""
        return random.Random(time.time_ns())