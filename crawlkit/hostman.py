"""Per-host politeness: robots.txt rules and request rate limiting."""

from __future__ import annotations

import math
import threading
import time
from typing import Callable
from urllib.parse import urlsplit
from urllib.robotparser import RobotFileParser

import requests

ROBOTS_USER_AGENT = "crawlkit-robots/0.2"


class RateLimitError(RuntimeError):
    """A wait on a rate limiter could not be satisfied."""


class WaitCancelled(RateLimitError):
    """A wait on a rate limiter was cancelled."""


class RateLimiter:
    """A token bucket refilled at ``rate`` tokens per second, holding at most ``burst``."""

    def __init__(self, rate: float, burst: int) -> None:
        self.rate = float(rate)
        self.burst = int(burst)
        self._tokens = float(self.burst)
        self._last = time.monotonic()
        self._lock = threading.Lock()

    def _give_back(self) -> None:
        with self._lock:
            self._tokens = min(float(self.burst), self._tokens + 1)

    def wait(self, cancel_event: threading.Event | None = None) -> None:
        """Block until one token is available.

        Raises WaitCancelled if ``cancel_event`` is or becomes set, and
        RateLimitError if the bucket can never supply a token.
        """
        if cancel_event is not None and cancel_event.is_set():
            raise WaitCancelled("wait cancelled")
        if math.isinf(self.rate):
            return
        if self.burst < 1:
            raise RateLimitError(f"wait(n=1) exceeds limiter's burst {self.burst}")

        with self._lock:
            now = time.monotonic()
            self._tokens = min(float(self.burst), self._tokens + (now - self._last) * self.rate)
            self._last = now
            self._tokens -= 1
            deficit = -self._tokens

        if deficit <= 0:
            return
        if self.rate <= 0:
            self._give_back()
            raise RateLimitError("rate limit is zero and no tokens remain")
        delay = deficit / self.rate
        if cancel_event is None:
            time.sleep(delay)
        elif cancel_event.wait(delay):
            self._give_back()
            raise WaitCancelled("wait cancelled")


def fetch_robots(scheme: str, host: str, timeout: float) -> RobotFileParser | None:
    """Download and parse ``robots.txt``; ``None`` when it is unavailable."""
    robots_url = f"{scheme}://{host}/robots.txt"
    try:
        resp = requests.get(robots_url, headers={"User-Agent": ROBOTS_USER_AGENT}, timeout=timeout)
    except requests.RequestException:
        return None
    if resp.status_code >= 400:
        return None
    parser = RobotFileParser(robots_url)
    parser.parse(resp.text.splitlines())
    return parser


class HostManager:
    """Keeps robots rules and a rate limiter for every host seen."""

    def __init__(self, user_agent: str, rps: float, robots_timeout: float) -> None:
        self.user_agent = user_agent
        self.rps = rps
        self.robots_timeout = robots_timeout
        self._hosts: dict[str, tuple[RobotFileParser | None, RateLimiter]] = {}
        self._lock = threading.Lock()

    def check(self, url: str) -> tuple[bool, Callable[..., None]]:
        """Return ``(allowed, wait)`` for ``url``; ``wait`` blocks on the host's limiter."""
        parts = urlsplit(url)
        host = parts.netloc
        with self._lock:
            info = self._hosts.get(host)
        if info is None:
            fresh = (
                fetch_robots(parts.scheme, host, self.robots_timeout),
                RateLimiter(self.rps, int(self.rps)),
            )
            with self._lock:
                info = self._hosts.setdefault(host, fresh)

        robots, limiter = info
        allowed = robots is None or robots.can_fetch(self.user_agent, parts.path or "/")
        return allowed, limiter.wait