"""Monotonic counters and a small HTTP endpoint exposing them."""

from __future__ import annotations

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Iterable


class Counter:
    """A thread-safe counter that only goes up."""

    def __init__(self, name: str, help_text: str) -> None:
        self.name = name
        self.help_text = help_text
        self._value = 0.0
        self._lock = threading.Lock()

    def inc(self, amount: float = 1.0) -> None:
        """Increase the counter by ``amount``, which must not be negative."""
        if amount < 0:
            raise ValueError("counter cannot decrease in value")
        with self._lock:
            self._value += amount

    def value(self) -> float:
        """Current value."""
        with self._lock:
            return self._value


PAGES_FETCHED = Counter(
    "crawler_pages_fetched_total", "Total number of pages successfully fetched"
)
BYTES_FETCHED = Counter("crawler_bytes_fetched_total", "Total bytes downloaded")


def render(counters: Iterable[Counter] | None = None) -> str:
    """Render counters in the text exposition format."""
    lines = []
    for c in counters if counters is not None else (PAGES_FETCHED, BYTES_FETCHED):
        value = c.value()
        shown = str(int(value)) if value.is_integer() else repr(value)
        lines.append(
            f"# HELP {c.name} {c.help_text}\n# TYPE {c.name} counter\n{c.name} {shown}\n"
        )
    return "".join(lines)


class _MetricsHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        if self.path.split("?", 1)[0] != "/metrics":
            self.send_error(404)
            return
        body = render().encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; version=0.0.4; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args) -> None:
        pass


def start_metrics_server(port: int = 2112) -> ThreadingHTTPServer:
    """Serve ``/metrics`` on ``port`` from a daemon thread and return the server."""
    server = ThreadingHTTPServer(("", port), _MetricsHandler)
    threading.Thread(target=server.serve_forever, daemon=True).start()
    return server