from __future__ import annotations

import io
from pathlib import Path

import pytest

import cli
from howto_guide.errors import ServiceError
from howto_guide.types import AnswerResult, Source


class FakeSearchClient:
    result = AnswerResult(text="## Steps\n1. Open\n2. Close", sources=(Source(uri="https://a", title="A"),))
    error: Exception | None = None

    def __init__(self, api_key: str, model_name: str) -> None:
        self.api_key = api_key
        self.model_name = model_name

    def fetch_answer(self, prompt: str) -> AnswerResult:
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "load_dotenv", lambda: None)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)


def test_render_command_prints_terminal_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    answer_file = tmp_path / "answer.md"
    answer_file.write_text("## Steps\n* Do this\n* Do that\n\nDone.", encoding="utf-8")

    assert cli.main(["render", str(answer_file)]) == 0

    out = capsys.readouterr().out
    assert out == "Steps\n=====\n\n  • Do this\n  • Do that\n\nDone.\n"


def test_render_command_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("plain answer"))

    assert cli.main(["render"]) == 0
    assert capsys.readouterr().out == "plain answer\n"


def test_render_command_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["render", str(tmp_path / "missing.md")]) == 2
    assert "File not found" in capsys.readouterr().err


def test_ask_without_api_key_is_config_failure(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["ask", "boil an egg"]) == 2
    assert "GEMINI_API_KEY" in capsys.readouterr().err


def test_ask_prints_answer_and_sources(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(cli, "GeminiSearchClient", FakeSearchClient)

    assert cli.main(["ask", "boil an egg", "--api-key", "k", "--show-sources"]) == 0

    out = capsys.readouterr().out
    assert "Steps\n=====" in out
    assert "  1. Open\n  2. Close" in out
    assert "[1] A" in out


def test_ask_reports_service_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(FakeSearchClient, "error", ServiceError("Failed to get answer from AI: quota"))
    monkeypatch.setattr(cli, "GeminiSearchClient", FakeSearchClient)

    assert cli.main(["ask", "boil an egg", "--api-key", "k"]) == 1
    assert "quota" in capsys.readouterr().err
