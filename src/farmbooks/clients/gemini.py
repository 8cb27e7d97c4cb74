"""Google Gemini text-generation client.

Uses the google-genai SDK. Only plain text generation is needed: the
advisor builds the prompts and interprets the replies.
"""

from typing import Optional

import structlog
from google import genai
from google.genai import types

from farmbooks.config.settings import Settings

logger = structlog.get_logger(__name__)


class GeminiAdviceClient:
    """Client for Google's Gemini API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or Settings.from_env()
        self._api_key = api_key or settings.gemini_api_key
        self._model_name = model or settings.gemini_model

        self._client = genai.Client(api_key=self._api_key)

        self._logger = logger.bind(client="gemini", model=self._model_name)

    def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.6,
    ) -> Optional[str]:
        """Generate text for a single prompt.

        Args:
            prompt: User prompt
            system_instruction: Optional system instruction
            temperature: Sampling temperature

        Returns:
            Response text, or None if the model returned no text
        """
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
        )
        self._logger.debug("sending request", prompt_chars=len(prompt))

        response = self._client.models.generate_content(
            model=self._model_name,
            contents=prompt,
            config=config,
        )

        text = response.text
        self._logger.debug("received response", response_chars=len(text or ""))
        return text
