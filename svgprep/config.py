"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgprep_env: str = "development"
    svgprep_log_level: str = "info"

    # Defaults for PipelineConfig.from_settings()
    svgprep_id_prefix: str = "anim_"
    svgprep_length_method: str = "estimate"
    svgprep_max_workers: int = 4

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Root logging setup for applications embedding the library."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.svgprep_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
