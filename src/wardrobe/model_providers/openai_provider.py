"""OpenAI vision/chat provider implementing IVisionOracle."""

from __future__ import annotations

from typing import Any

import openai
from openai import OpenAI

from wardrobe.core.exceptions import ConfigurationError, OracleError, OracleResponseError
from wardrobe.models.objects import ImageInput


class OpenAIVisionOracle:
    """Production IVisionOracle backed by the OpenAI chat completions API."""

    def __init__(self, api_key: str | None, *, base_url: str | None = None,
                 vision_model: str = "gpt-4o", text_model: str = "gpt-4o",
                 analysis_max_tokens: int = 500, recommendation_max_tokens: int = 300,
                 temperature: float = 0.7) -> None:
        if not api_key:
            raise ConfigurationError("OpenAI API key is not set (WARDROBE_ORACLE_API_KEY / OPENAI_API_KEY)")
        self._vision_model = vision_model
        self._text_model = text_model
        self._analysis_max_tokens = analysis_max_tokens
        self._recommendation_max_tokens = recommendation_max_tokens
        self._temperature = temperature
        kwargs: dict[str, Any] = {"api_key": api_key}
        if base_url:
            kwargs["base_url"] = base_url
        self._client = OpenAI(**kwargs)

    def _create(self, **kwargs: Any) -> str:
        try:
            response = self._client.chat.completions.create(**kwargs)
        except openai.OpenAIError as exc:
            raise OracleError(f"OpenAI request failed ({kwargs.get('model')}): {exc}") from exc
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise OracleResponseError(f"OpenAI returned an empty response ({kwargs.get('model')})")
        return content

    def analyze(self, image: ImageInput, instruction: str) -> str:
        return self._create(
            model=self._vision_model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": instruction},
                        {"type": "image_url", "image_url": {"url": image.as_url(), "detail": "high"}},
                    ],
                },
            ],
            max_tokens=self._analysis_max_tokens,
        )

    def complete(self, prompt: str) -> str:
        return self._create(
            model=self._text_model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self._recommendation_max_tokens,
            temperature=self._temperature,
        )
