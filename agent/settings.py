# =============================================================================
# agent/settings.py  —  Chat client configuration
# =============================================================================
#
# All configuration comes from the environment, optionally seeded from a
# .env file in the working directory:
#
#   OPENAI_API_KEY  (required)  API key for the model endpoint
#   BASE_URL        (optional)  OpenAI-compatible endpoint to talk to instead
#                               of the provider default
#   MODEL           (optional)  LiteLLM model id, provider-prefixed
#                               (e.g. "openai/gpt-4o-mini")
#
# A missing API key is fatal: the client refuses to start.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "openai/Qwen/QwQ-32B"


class ConfigError(RuntimeError):
    """Raised when required configuration is missing."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = 1000
    temperature: float = 0.7


def load_settings() -> Settings:
    """Read the client settings from the environment (and .env)."""
    load_dotenv()

    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise ConfigError("OPENAI_API_KEY is not set; add it to your environment or .env file")

    return Settings(
        api_key=api_key,
        base_url=os.environ.get("BASE_URL") or None,
        model=os.environ.get("MODEL") or DEFAULT_MODEL,
    )
