from crawlkit.frontier import Queue
from crawlkit.options import (
    DEFAULT_SEED,
    DEFAULT_STRATEGY,
    Options,
    mix_percent,
)

import pytest


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


def _queue(*urls):
    q = Queue()
    for u in urls:
        q.enqueue(u)
    return q


@pytest.mark.parametrize(
    "strategy, expected",
    [
        ("bfs", 0),
        ("BFS", 0),
        ("dfs", 100),
        ("Dfs", 100),
        ("mixed30", 30),
        ("MIXED+40", 40),
        ("mixed150", 100),
        ("mixed-5", 0),
        ("mixed", 0),
        ("mixedabc", 0),
        ("mixed 30", 0),
        ("mixed99999999999999999999", 0),
        ("random", 0),
    ],
)
def test_mix_percent(strategy, expected):
    assert mix_percent(strategy) == expected


def test_defaults():
    opts = Options()
    assert opts.seeds == [DEFAULT_SEED]
    assert opts.strategy == DEFAULT_STRATEGY
    assert opts.mix_pct() == 0


def test_bfs_pops_front():
    q = _queue("a", "b", "c")
    opts = Options(strategy="bfs")
    rng = _FixedRng(0)
    assert [opts.select_url(q, rng) for _ in range(3)] == ["a", "b", "c"]
    assert rng.calls == []


def test_dfs_pops_back():
    q = _queue("a", "b", "c")
    opts = Options(strategy="dfs")
    assert [opts.select_url(q, _FixedRng(0)) for _ in range(3)] == ["c", "b", "a"]


def test_empty_queue_gives_none():
    for strategy in ("bfs", "dfs", "mixed50"):
        assert Options(strategy=strategy).select_url(Queue(), _FixedRng(0)) is None


def test_mixed_below_threshold_pops_back():
    q = _queue("a", "b", "c")
    rng = _FixedRng(29)
    assert Options(strategy="mixed30").select_url(q, rng) == "c"
    assert rng.calls == [100]


def test_mixed_at_threshold_pops_front():
    q = _queue("a", "b", "c")
    assert Options(strategy="mixed30").select_url(q, _FixedRng(30)) == "a"
    assert len(q) == 2


def test_make_rng_draws_in_range():
    rng = Options().make_rng()
    draws = [rng.randrange(100) for _ in range(200)]
    assert all(0 <= d < 100 for d in draws)