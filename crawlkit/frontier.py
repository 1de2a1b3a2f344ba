"""Crawl frontier: a thread-safe URL queue and a hashed visited set."""

from __future__ import annotations

import threading
from collections import deque

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def fnv1a_64(text: str) -> int:
    """Return the 64-bit FNV-1a hash of the UTF-8 encoding of ``text``."""
    value = _FNV64_OFFSET
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


class Queue:
    """A double-ended URL queue, safe to share between threads."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()
        self._total = 0
        self._lock = threading.Lock()

    def enqueue(self, url: str) -> None:
        """Append ``url`` to the back of the queue."""
        with self._lock:
            self._items.append(url)
            self._total += 1

    def pop_front(self) -> str | None:
        """Remove and return the oldest URL, or ``None`` when empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def pop_back(self) -> str | None:
        """Remove and return the newest URL, or ``None`` when empty."""
        with self._lock:
            return self._items.pop() if self._items else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def total_queued(self) -> int:
        """Number of URLs ever enqueued, including those already popped."""
        with self._lock:
            return self._total


class Visited:
    """A set of seen URLs, stored as 64-bit FNV-1a hashes."""

    def __init__(self) -> None:
        self._hashes: set[int] = set()
        self._lock = threading.Lock()

    def add(self, url: str) -> None:
        """Mark ``url`` as visited."""
        digest = fnv1a_64(url)
        with self._lock:
            self._hashes.add(digest)

    def __contains__(self, url: object) -> bool:
        if not isinstance(url, str):
            return False
        digest = fnv1a_64(url)
        with self._lock:
            return digest in self._hashes

    def __len__(self) -> int:
        with self._lock:
            return len(self._hashes)