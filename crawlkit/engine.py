"""The crawl engine: dispatcher, worker pool, stats and metrics."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass
from queue import Full
from queue import Queue as JobQueue
from random import Random
from urllib.parse import urlsplit

from dotenv import load_dotenv
from pymongo.errors import PyMongoError

from .frontier import Queue, Visited
from .hostman import HostManager, RateLimitError
from .metrics import start_metrics_server
from .options import Options
from .storage import Store
from .worker import run_worker

_IDLE_SLEEP = 0.1
_STATS_INTERVAL = 60.0


class CrawlError(RuntimeError):
    """The crawl could not start."""


@dataclass(frozen=True)
class CrawlStats:
    """Counts reported at the end of a crawl."""

    crawled: int
    queued: int


def _put(jobs: JobQueue, item: str, stop: threading.Event) -> None:
    while not stop.is_set():
        try:
            jobs.put(item, timeout=_IDLE_SLEEP)
            return
        except Full:
            continue


def _dispatch(
    opts: Options,
    queue: Queue,
    visited: Visited,
    hosts: HostManager,
    rng: Random,
    jobs: JobQueue,
    stop: threading.Event,
) -> None:
    while not stop.is_set():
        if len(visited) >= opts.max_pages:
            stop.set()
            try:
                jobs.put_nowait(None)
            except Full:
                pass
            return

        url = opts.select_url(queue, rng)
        if url is None:
            time.sleep(_IDLE_SLEEP)
            continue

        try:
            parsed = urlsplit(url)
        except ValueError:
            continue
        allowed, wait = hosts.check(url)
        if not allowed:
            continue
        try:
            wait(stop)
        except RateLimitError:
            continue

        _put(jobs, parsed.geturl(), stop)


def _report(start: float, visited: Visited, queue: Queue, done: threading.Event) -> None:
    while not done.wait(_STATS_INTERVAL):
        minutes = (time.monotonic() - start) / 60
        print(f"[{minutes:.0f} min] crawled={len(visited)} queued={len(queue)}")


def _crawl(opts: Options, store: Store) -> CrawlStats:
    queue = Queue()
    visited = Visited()
    for seed in opts.seeds:
        queue.enqueue(seed)

    hosts = HostManager(opts.user_agent, opts.requests_per_host, opts.robots_timeout)
    rng = opts.make_rng()
    jobs: JobQueue = JobQueue(maxsize=opts.workers * 2)
    stop = threading.Event()

    server = None
    if opts.metrics_port is not None:
        try:
            server = start_metrics_server(opts.metrics_port)
        except OSError as exc:
            print("metrics server:", exc)

    try:
        dispatcher = threading.Thread(
            target=_dispatch,
            args=(opts, queue, visited, hosts, rng, jobs, stop),
            daemon=True,
        )
        dispatcher.start()

        workers = [
            threading.Thread(
                target=run_worker,
                args=(stop, jobs, visited, queue, store, opts.tokens),
                daemon=True,
            )
            for _ in range(opts.workers)
        ]
        for worker in workers:
            worker.start()

        ticker_done = threading.Event()
        ticker = threading.Thread(
            target=_report,
            args=(time.monotonic(), visited, queue, ticker_done),
            daemon=True,
        )
        ticker.start()

        for worker in workers:
            worker.join()
        ticker_done.set()
        stop.set()
        dispatcher.join()
    finally:
        if server is not None:
            server.shutdown()
            server.server_close()

    stats = CrawlStats(crawled=len(visited), queued=len(queue))
    print("------- FINAL STATS -------")
    print(f"Crawled: {stats.crawled} pages")
    print(f"Queued : {stats.queued} (never visited)")
    return stats


def run(opts: Options) -> CrawlStats:
    """Crawl from ``opts.seeds`` until ``opts.max_pages`` pages are visited.

    Raises CrawlError if the database cannot be reached.
    """
    load_dotenv()

    uri = os.environ.get("MONGODB_URI", "")
    access = uri != ""
    print("Connecting to DB at:", uri)
    if not access:
        print("MongoDB access disabled, running in no-op mode")
    try:
        store = Store(uri, access)
    except PyMongoError as exc:
        raise CrawlError(f"failed to connect to MongoDB: {exc}") from exc

    with store:
        return _crawl(opts, store)