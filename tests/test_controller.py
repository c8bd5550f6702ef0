from __future__ import annotations

from concurrent.futures import Future
from typing import List

from howto_guide.controller import UNEXPECTED_ERROR_MESSAGE, QueryController
from howto_guide.errors import ServiceError
from howto_guide.types import AnswerResult, QueryState, Source


class FakeAnswerClient:
    def __init__(self, result: AnswerResult | None = None, error: Exception | None = None) -> None:
        self.result = result or AnswerResult(text="answer", sources=(Source(uri="u", title="t"),))
        self.error = error
        self.prompts: List[str] = []

    def fetch_answer(self, prompt: str) -> AnswerResult:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result


def test_submit_success_stores_answer_and_sources() -> None:
    client = FakeAnswerClient()
    controller = QueryController(client)

    assert controller.submit("fix a leaky tap") is True

    assert client.prompts == ["How to fix a leaky tap"]
    state = controller.state
    assert state.query == "fix a leaky tap"
    assert state.answer_text == "answer"
    assert state.sources == [Source(uri="u", title="t")]
    assert state.error is None
    assert state.is_loading is False


def test_begin_enters_loading_and_ignores_second_submission() -> None:
    client = FakeAnswerClient()
    controller = QueryController(client)

    assert controller.begin("first question") is True
    assert controller.state.is_loading is True
    assert controller.begin("second question") is False
    assert controller.state.query == "first question"
    assert client.prompts == []

    controller.run()

    assert client.prompts == ["How to first question"]
    assert controller.state.is_loading is False
    assert controller.state.answer_text == "answer"


def test_run_without_pending_query_does_nothing() -> None:
    client = FakeAnswerClient()
    controller = QueryController(client)

    controller.run()

    assert client.prompts == []
    assert controller.state.answer_text == ""


def test_submit_ignores_blank_query() -> None:
    client = FakeAnswerClient()
    controller = QueryController(client)

    assert controller.submit("   ") is False
    assert client.prompts == []


def test_submit_is_noop_while_loading() -> None:
    client = FakeAnswerClient()
    controller = QueryController(client, QueryState(is_loading=True))

    assert controller.submit("anything") is False
    assert client.prompts == []


def test_submit_service_error_sets_message_and_ends_loading() -> None:
    controller = QueryController(FakeAnswerClient(error=ServiceError("Failed to get answer from AI: 503")))

    assert controller.submit("query") is True

    assert controller.state.error == "Failed to get answer from AI: 503"
    assert controller.state.answer_text == ""
    assert controller.state.is_loading is False


def test_submit_unexpected_error_uses_generic_message() -> None:
    controller = QueryController(FakeAnswerClient(error=KeyError("bad")))

    controller.submit("query")

    assert controller.state.error == UNEXPECTED_ERROR_MESSAGE


def test_submit_clears_previous_error_on_success() -> None:
    controller = QueryController(FakeAnswerClient(), QueryState(error="old failure", answer_text="old"))

    controller.submit("query")

    assert controller.state.error is None
    assert controller.state.answer_text == "answer"


def test_submit_calls_wait_hook_with_future_while_loading() -> None:
    seen: List[bool] = []

    def wait(future: Future) -> None:
        seen.append(controller.state.is_loading)
        future.result()

    controller = QueryController(FakeAnswerClient())
    controller.submit("query", wait=wait)

    assert seen == [True]
    assert controller.state.is_loading is False


def test_clear_resets_answer_sources_and_error() -> None:
    controller = QueryController(FakeAnswerClient())
    controller.submit("query")
    controller.state.error = "stale"

    controller.clear()

    assert controller.state.answer_text == ""
    assert controller.state.sources == []
    assert controller.state.error is None
    assert controller.state.query == "query"


def test_dismiss_error_keeps_answer() -> None:
    controller = QueryController(FakeAnswerClient(), QueryState(answer_text="kept", error="oops"))

    controller.dismiss_error()

    assert controller.state.error is None
    assert controller.state.answer_text == "kept"
