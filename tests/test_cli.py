import pytest
import responses

from crawlkit.cli import build_parser, main, parse_options
from crawlkit.options import (
    DEFAULT_MAX_PAGES,
    DEFAULT_SEED,
    DEFAULT_TOKENS,
    DEFAULT_USER_AGENT,
    DEFAULT_WORKERS,
    Options,
)


def test_defaults():
    opts = parse_options([])
    assert opts.seeds == [DEFAULT_SEED]
    assert opts.max_pages == DEFAULT_MAX_PAGES
    assert opts.workers == DEFAULT_WORKERS
    assert opts.strategy == "bfs"
    assert opts.requests_per_host == 2.0
    assert opts.robots_timeout == 5.0
    assert opts.user_agent == DEFAULT_USER_AGENT
    assert opts.tokens == DEFAULT_TOKENS


def test_single_dash_flags():
    opts = parse_options(
        [
            "-seed", "http://x.test/",
            "-maxPages", "10",
            "-strategy", "mixed50",
            "-maxPerHost", "1.5",
            "-userAgent", "bot/1",
            "-robotsTimeout", "7",
            "-tokens", "99",
        ]
    )
    assert opts == Options(
        seeds=["http://x.test/"],
        max_pages=10,
        workers=DEFAULT_WORKERS,
        strategy="mixed50",
        requests_per_host=1.5,
        robots_timeout=7.0,
        user_agent="bot/1",
        tokens=99,
    )
    assert opts.mix_pct() == 50


def test_double_dash_flags():
    opts = parse_options(["--workers", "4", "--seed", "http://y.test/"])
    assert opts.workers == 4
    assert opts.seeds == ["http://y.test/"]


def test_bad_integer_exits_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["-maxPages", "many"])
    assert excinfo.value.code == 2


def test_main_runs_crawl(monkeypatch, capsys):
    monkeypatch.setenv("MONGODB_URI", "")
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, "http://cli.test/robots.txt", status=404)
        rsps.add(
            responses.GET,
            "http://cli.test/",
            body="<html><body><p>hi</p></body></html>",
            content_type="text/html",
        )
        status = main(
            ["-seed", "http://cli.test/", "-maxPages", "1", "-workers", "1",
             "-maxPerHost", "10", "-robotsTimeout", "1"]
        )
    assert status == 0
    assert "Crawled: 1 pages" in capsys.readouterr().out


def test_main_reports_database_failure(monkeypatch, capsys):
    monkeypatch.setenv("MONGODB_URI", "not-a-mongo-uri")
    status = main(["-seed", "http://cli.test/"])
    assert status == 1
    assert "failed to connect to MongoDB" in capsys.readouterr().err