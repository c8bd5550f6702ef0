from __future__ import annotations

import random
import threading
from concurrent.futures import Future
from typing import List

from howto_guide.loading import QUOTES, random_quote, wait_with_quotes


def test_random_quote_comes_from_fixed_list() -> None:
    rng = random.Random(7)
    for _ in range(20):
        assert random_quote(rng) in QUOTES


def test_wait_with_quotes_shows_one_quote_when_already_done() -> None:
    future: Future = Future()
    future.set_result("done")
    shown: List[str] = []

    wait_with_quotes(future, shown.append, interval=10.0)

    assert len(shown) == 1
    assert shown[0] in QUOTES


def test_wait_with_quotes_rotates_until_future_completes() -> None:
    future: Future = Future()
    shown: List[str] = []
    timer = threading.Timer(0.2, future.set_result, args=("done",))
    timer.start()
    try:
        wait_with_quotes(future, shown.append, interval=0.02, rng=random.Random(1))
    finally:
        timer.cancel()

    assert future.done()
    assert len(shown) >= 2
    assert all(quote in QUOTES for quote in shown)
