"""Gemini API wrapper for grounded how-to answers."""
from __future__ import annotations

import logging
from typing import Any, Optional

from google import genai
from google.genai import errors
from google.genai import types as genai_types

from .errors import ConfigError, ServiceError
from .sources import sources_from_grounding
from .types import AnswerResult

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"


class GeminiSearchClient:
    """Answers prompts with Gemini, grounded by the Google Search tool."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL_NAME) -> None:
        if not api_key:
            raise ConfigError("Gemini API key is required")
        self.client = genai.Client(api_key=api_key)
        self.model_name = model_name

    @staticmethod
    def _generation_config() -> genai_types.GenerateContentConfig:
        """Enable Google Search grounding for the request."""
        return genai_types.GenerateContentConfig(
            tools=[genai_types.Tool(google_search=genai_types.GoogleSearch())],
        )

    @staticmethod
    def _status_code(error: Exception) -> Optional[int]:
        """Extract the HTTP status code from a Gemini SDK error."""
        code = getattr(error, "code", None)
        return code if isinstance(code, int) else None

    @staticmethod
    def _grounding_chunks(response: Any) -> Optional[list]:
        """Return the first candidate's grounding chunks, if any."""
        candidates = getattr(response, "candidates", None)
        if not candidates:
            return None
        metadata = getattr(candidates[0], "grounding_metadata", None)
        if metadata is None:
            return None
        return getattr(metadata, "grounding_chunks", None)

    def fetch_answer(self, prompt: str) -> AnswerResult:
        """Send one prompt and return the answer text with its unique sources.

        Any API or transport failure, and a response without answer text, is
        raised as ServiceError. There is no retry.
        """
        logger.debug("Requesting answer from %s for prompt %r", self.model_name, prompt)
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self._generation_config(),
            )
        except errors.APIError as exc:
            status_code = self._status_code(exc)
            logger.exception("Gemini API error (%s) while fetching answer", status_code or "unknown")
            raise ServiceError(
                f"Failed to get answer from AI: Gemini API error ({status_code or 'unknown'}): {exc}"
            ) from exc
        except Exception as exc:
            logger.exception("Gemini client error while fetching answer")
            raise ServiceError(f"Failed to get answer from AI: {exc}") from exc

        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            logger.error("Gemini response contained no answer text")
            raise ServiceError("Failed to get answer from AI: the response contained no answer text.")

        sources = sources_from_grounding(self._grounding_chunks(response))
        logger.debug("Received %d characters and %d sources", len(text), len(sources))
        return AnswerResult(text=text, sources=sources)
