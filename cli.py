from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from howto_guide.config import Settings, configure_logging
from howto_guide.controller import QueryController
from howto_guide.errors import ConfigError
from howto_guide.llm import GeminiSearchClient
from howto_guide.markdown import parse_document
from howto_guide.render import render_sources_text, render_text


def _print_answer(answer_text: str) -> None:
    """Print the terminal rendering of an answer."""
    rendered = render_text(parse_document(answer_text))
    print(rendered if rendered else "(empty answer)")


def _read_answer_text(raw_path: str | None) -> str:
    """Read stored answer text from a file, or stdin when no path is given."""
    if not raw_path or raw_path == "-":
        return sys.stdin.read()
    path = Path(raw_path).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise ValueError(f"Not a file: {path}")
    return path.read_text(encoding="utf-8")


def command_ask(args: argparse.Namespace, settings: Settings) -> int:
    """Ask one how-to question and print the rendered answer."""
    api_key = args.api_key or settings.gemini_api_key
    model_name = args.model or settings.gemini_model_name
    try:
        client = GeminiSearchClient(api_key=api_key, model_name=model_name)
    except ConfigError as exc:
        print(f"Missing Gemini API key ({exc}). Set GEMINI_API_KEY or pass --api-key.", file=sys.stderr)
        return 2

    controller = QueryController(client)
    if not controller.submit(args.query):
        print("Question is empty.", file=sys.stderr)
        return 2

    state = controller.state
    if state.error:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    print()
    _print_answer(state.answer_text)
    if args.show_sources:
        sources_text = render_sources_text(state.sources)
        print()
        print(sources_text if sources_text else "No sources returned.")
    return 0


def command_render(args: argparse.Namespace, _: Settings) -> int:
    """Render stored answer text without calling the service."""
    try:
        answer_text = _read_answer_text(args.file)
    except Exception as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2
    _print_answer(answer_text)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(description="AI How-To Guide CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ask_parser = subparsers.add_parser("ask", help='Ask a "how to" question, e.g. "change a bike tire"')
    ask_parser.add_argument("query", help='Question text, without the leading "How to"')
    ask_parser.add_argument("--api-key", default="", help="Gemini API key (overrides GEMINI_API_KEY)")
    ask_parser.add_argument("--model", default="", help="Gemini model name (overrides GEMINI_MODEL)")
    ask_parser.add_argument(
        "--show-sources",
        action="store_true",
        help="Print the web sources cited by the answer",
    )

    render_parser = subparsers.add_parser("render", help="Render stored answer markdown for the terminal")
    render_parser.add_argument("file", nargs="?", default=None, help="Answer text file (stdin when omitted)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    load_dotenv()
    settings = Settings()
    configure_logging(settings.log_level)
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.command == "ask":
        return command_ask(args, settings)
    if args.command == "render":
        return command_render(args, settings)

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
