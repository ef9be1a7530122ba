"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class OracleConfig(BaseSettings):
    """Vision/language model configuration."""

    model_config = {"env_prefix": "WARDROBE_ORACLE_"}

    provider: Literal["mock", "openai"] = "mock"
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("WARDROBE_ORACLE_API_KEY", "OPENAI_API_KEY"),
    )
    base_url: str | None = None
    vision_model: str = "gpt-4o"
    text_model: str = "gpt-4o"
    analysis_max_tokens: int = 500
    recommendation_max_tokens: int = 300
    temperature: float = 0.7


class RedisConfig(BaseSettings):
    """Metadata store (Redis) configuration."""

    model_config = {"env_prefix": "WARDROBE_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: str | None = None


class S3Config(BaseSettings):
    """Object store (S3) configuration."""

    model_config = {"env_prefix": "WARDROBE_S3_"}

    bucket: str = "wardrobe-images"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    public_base_url: str | None = None  # CDN/public bucket; presigned URLs otherwise
    url_expiry: int = 7 * 24 * 3600


class ScanConfig(BaseSettings):
    """Cursor scan tuning."""

    model_config = {"env_prefix": "WARDROBE_SCAN_"}

    batch_size: int = 100
    max_iterations: int = 100


class IngestionConfig(BaseSettings):
    """Ingestion pipeline configuration."""

    model_config = {"env_prefix": "WARDROBE_INGEST_"}

    key_prefix: str = "wardrobe:"
    max_workers: int = 8


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "WARDROBE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    oracle: OracleConfig = OracleConfig()
    redis: RedisConfig = RedisConfig()
    s3: S3Config = S3Config()
    scan: ScanConfig = ScanConfig()
    ingestion: IngestionConfig = IngestionConfig()
