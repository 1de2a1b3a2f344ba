"""Fetching pages and the worker loop that processes crawl jobs."""

from __future__ import annotations

import threading
from queue import Empty, Full
from queue import Queue as JobQueue

import requests

from . import metrics
from .frontier import Queue, Visited
from .htmlparse import extract, parse_html
from .storage import Store, Webpage

FETCH_TIMEOUT = 15.0
MAX_BODY_BYTES = 1 << 20
_CHUNK = 64 * 1024
_POLL_INTERVAL = 0.1


def _read_capped(resp: requests.Response) -> bytes:
    data = bytearray()
    try:
        for chunk in resp.iter_content(chunk_size=_CHUNK):
            data.extend(chunk)
            if len(data) >= MAX_BODY_BYTES:
                break
    except requests.RequestException:
        pass
    return bytes(data[:MAX_BODY_BYTES])


def fetch(url: str) -> bytes:
    """GET ``url`` and return at most 1 MiB of its body; ``b""`` on failure."""
    try:
        resp = requests.get(url, timeout=FETCH_TIMEOUT, stream=True)
    except requests.RequestException:
        return b""
    with resp:
        body = _read_capped(resp)
    metrics.BYTES_FETCHED.inc(len(body))
    metrics.PAGES_FETCHED.inc()
    return body


def run_worker(
    stop: threading.Event,
    jobs: "JobQueue[str | None]",
    visited: Visited,
    queue: Queue,
    store: Store,
    token_limit: int,
) -> None:
    """Process URLs from ``jobs`` until ``stop`` is set or ``None`` arrives.

    A ``None`` job marks the end of work; it is put back for other workers.
    """
    while not stop.is_set():
        try:
            url = jobs.get(timeout=_POLL_INTERVAL)
        except Empty:
            continue
        if url is None:
            try:
                jobs.put_nowait(None)
            except Full:
                pass
            return
        if url in visited:
            continue
        visited.add(url)

        body = fetch(url)
        if not body:
            continue
        title, content, word_count = extract(body, token_limit)
        _, links = parse_html(url, body, token_limit)
        store.insert(
            Webpage(url=url, title=title, content=content, word_count=word_count)
        )

        for link in links:
            if link not in visited:
                queue.enqueue(link)