"""A polite multi-threaded web crawler with robots.txt support and optional MongoDB storage."""

__version__ = "0.2.0"