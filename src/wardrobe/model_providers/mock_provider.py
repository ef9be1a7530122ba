"""Mock vision oracle for local development and testing.

Returns canned responses. No real model calls.
"""

from __future__ import annotations

import json

from wardrobe.core.exceptions import OracleError
from wardrobe.models.objects import ImageInput

DEFAULT_ANALYSIS = json.dumps({"category": "Other", "name": ""})


class MockVisionOracle:
    """IVisionOracle implementation that returns deterministic mock responses."""

    def __init__(self, default_analysis: str = DEFAULT_ANALYSIS,
                 default_recommendation: str = "Mock outfit recommendation") -> None:
        self._default_analysis = default_analysis
        self._default_recommendation = default_recommendation
        self._analyses: dict[str, str | Exception] = {}
        self._recommendations: dict[str, str] = {}
        self.calls: list[tuple[str, str]] = []

    def set_analysis(self, image_contains: str, response: str | Exception) -> None:
        """Register a canned analysis for images whose filename or URL contains a keyword.

        An exception instance is raised instead of returned.
        """
        self._analyses[image_contains] = response

    def set_recommendation(self, prompt_contains: str, response: str) -> None:
        self._recommendations[prompt_contains] = response

    def analyze(self, image: ImageInput, instruction: str) -> str:
        label = image.filename or image.url or ""
        self.calls.append(("analyze", label))
        for keyword, response in self._analyses.items():
            if keyword in image.filename or keyword in (image.url or ""):
                if isinstance(response, Exception):
                    raise response
                return response
        return self._default_analysis

    def complete(self, prompt: str) -> str:
        self.calls.append(("complete", prompt))
        for keyword, response in self._recommendations.items():
            if keyword in prompt:
                return response
        if not self._default_recommendation:
            raise OracleError("Mock oracle has no recommendation configured")
        return self._default_recommendation
