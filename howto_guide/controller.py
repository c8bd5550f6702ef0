"""Query lifecycle: submit, success, failure and clear transitions."""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Protocol

from .errors import ServiceError
from .prompts import build_howto_prompt
from .types import AnswerResult, QueryState

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class AnswerClient(Protocol):
    def fetch_answer(self, prompt: str) -> AnswerResult: ...


class QueryController:
    """Owns the single QueryState of a session and allows one query at a time."""

    def __init__(self, client: AnswerClient, state: Optional[QueryState] = None) -> None:
        self.client = client
        self.state = state if state is not None else QueryState()

    def begin(self, query: str) -> bool:
        """Enter the loading state for ``query``; returns False when the submission is ignored.

        A submission is ignored while another query is loading or when the
        query is blank.
        """
        if self.state.is_loading or not query.strip():
            logger.debug("Ignoring submission (loading=%s)", self.state.is_loading)
            return False

        state = self.state
        state.query = query
        state.is_loading = True
        state.error = None
        state.answer_text = ""
        state.sources = []
        return True

    def run(self, wait: Optional[Callable[["Future[AnswerResult]"], Any]] = None) -> None:
        """Fetch the answer for the loading query and store the outcome.

        ``wait`` is called on this thread with the in-flight future, e.g. to
        drive the loading carousel.
        """
        state = self.state
        if not state.is_loading:
            return
        try:
            with ThreadPoolExecutor(max_workers=1) as pool:
                future = pool.submit(self.client.fetch_answer, build_howto_prompt(state.query))
                if wait is not None:
                    wait(future)
                result = future.result()
            state.answer_text = result.text
            state.sources = list(result.sources)
        except ServiceError as exc:
            state.error = str(exc)
        except Exception:
            logger.exception("Unexpected failure while answering %r", state.query)
            state.error = UNEXPECTED_ERROR_MESSAGE
        finally:
            state.is_loading = False

    def submit(
        self,
        query: str,
        wait: Optional[Callable[["Future[AnswerResult]"], Any]] = None,
    ) -> bool:
        """Run one query to completion; returns False when the submission was ignored."""
        if not self.begin(query):
            return False
        self.run(wait)
        return True

    def clear(self) -> None:
        """Drop the answer, sources and error; the typed query is kept."""
        self.state.answer_text = ""
        self.state.sources = []
        self.state.error = None

    def dismiss_error(self) -> None:
        self.state.error = None
