"""Rotating quotes shown while an answer is being fetched."""
from __future__ import annotations

import random
from concurrent import futures
from typing import Any, Callable, Optional

LOADING_QUOTE_INTERVAL_SECONDS = 4.0

QUOTES = (
    "The secret of getting ahead is getting started. - Mark Twain",
    "The only way to do great work is to love what you do. - Steve Jobs",
    "It does not matter how slowly you go as long as you do not stop. - Confucius",
    "Believe you can and you're halfway there. - Theodore Roosevelt",
    "The future belongs to those who believe in the beauty of their dreams. - Eleanor Roosevelt",
    "Success is not final, failure is not fatal: it is the courage to continue that counts. - Winston Churchill",
    "The best way to predict the future is to create it. - Peter Drucker",
)


def random_quote(rng: Optional[random.Random] = None) -> str:
    """Pick one quote at random."""
    return (rng or random).choice(QUOTES)


def wait_with_quotes(
    future: "futures.Future[Any]",
    show: Callable[[str], Any],
    interval: float = LOADING_QUOTE_INTERVAL_SECONDS,
    rng: Optional[random.Random] = None,
) -> None:
    """Show a quote now and a new one every ``interval`` seconds until ``future`` is done.

    Purely cosmetic: the future's result is left for the caller to read.
    """
    show(random_quote(rng))
    while True:
        done, _ = futures.wait([future], timeout=interval)
        if done:
            return
        show(random_quote(rng))
