"""Vision oracle providers behind the IVisionOracle protocol."""

from __future__ import annotations

from wardrobe.core.config import AppSettings
from wardrobe.core.protocols import IVisionOracle
from wardrobe.model_providers.mock_provider import MockVisionOracle
from wardrobe.model_providers.openai_provider import OpenAIVisionOracle


def create_oracle(settings: AppSettings | None = None) -> IVisionOracle:
    """Construct the configured oracle once per process."""
    if settings is None:
        settings = AppSettings()
    cfg = settings.oracle
    if cfg.provider == "openai":
        return OpenAIVisionOracle(
            cfg.api_key,
            base_url=cfg.base_url,
            vision_model=cfg.vision_model,
            text_model=cfg.text_model,
            analysis_max_tokens=cfg.analysis_max_tokens,
            recommendation_max_tokens=cfg.recommendation_max_tokens,
            temperature=cfg.temperature,
        )
    return MockVisionOracle()
