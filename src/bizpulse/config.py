"""
BizPulse configuration management.

Supports loading from YAML files, environment variables, and keyword overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """LLM provider configuration for the AI advisor (powered by litellm)."""

    model: str = Field(default="gpt-4o", description="Model identifier (litellm format)")
    api_key: str | None = Field(default=None, description="API key (or set env var)")
    api_base: str | None = Field(default=None, description="Custom API base URL")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, ge=1)
    timeout: int = Field(default=120, description="Request timeout in seconds")


class BizPulseConfig(BaseModel):
    """Root configuration for BizPulse."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    language: str = Field(default="Brazilian Portuguese", description="Language of AI-generated narratives")

    @classmethod
    def load(cls, config_path: str | None = None, **overrides: Any) -> BizPulseConfig:
        """Load configuration from file, env vars, and overrides.

        Priority: overrides > env vars > config file > defaults.
        """
        data: dict[str, Any] = {}

        # 1. Load from YAML file if provided
        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path, encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}

        # 2. Override from environment variables
        env_model = os.environ.get("BIZPULSE_MODEL")
        env_key = os.environ.get("BIZPULSE_API_KEY") or os.environ.get("OPENAI_API_KEY")
        env_base = os.environ.get("BIZPULSE_API_BASE")

        if env_model or env_key or env_base:
            llm = data.get("llm", {})
            if env_model:
                llm["model"] = env_model
            if env_key:
                llm["api_key"] = env_key
            if env_base:
                llm["api_base"] = env_base
            data["llm"] = llm

        # 3. Apply keyword overrides
        data.update(overrides)

        return cls.model_validate(data)

    @property
    def has_api_key(self) -> bool:
        return bool(self.llm.api_key or os.environ.get("ANTHROPIC_API_KEY"))
