from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Local development reads a .env next to the process; real environments set vars directly
load_dotenv()


def getenv(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _env(name: str, default: str | None = None):
    """Dataclass field resolved from the environment when Settings() is built."""
    return field(default_factory=lambda: getenv(name, default))


@dataclass
class Settings:
    # Service
    service_name: str = _env("SERVICE_NAME", "brandkit-api")
    service_env: str = _env("SERVICE_ENV", "dev")
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Provider credential; a missing key fails the request, not the process
    openai_api_key: str | None = _env("OPENAI_API_KEY")
    openai_base_url: str = _env("OPENAI_BASE_URL", "https://api.openai.com/v1")
    openai_model: str = _env("OPENAI_MODEL", "gpt-4o-mini")
    openai_temperature: float = field(
        default_factory=lambda: float(getenv("OPENAI_TEMPERATURE", "0.7") or "0.7")
    )
    openai_timeout: float = field(
        default_factory=lambda: float(getenv("OPENAI_TIMEOUT", "30") or "30")
    )

    # Attempt policy: one attempt, no backoff
    generation_max_attempts: int = field(
        default_factory=lambda: max(1, int(getenv("GENERATION_MAX_ATTEMPTS", "1") or "1"))
    )
    generation_backoff_ms: int = field(
        default_factory=lambda: int(getenv("GENERATION_BACKOFF_MS", "0") or "0")
    )

    # pass_through | coerce | reject
    brand_kit_validation: str = _env("BRAND_KIT_VALIDATION", "pass_through")

    # Security & policy
    cors_allow_origins: str | None = _env("CORS_ALLOW_ORIGINS")

    @property
    def is_production(self) -> bool:
        return self.service_env in ["prod", "production"]


def load_settings() -> Settings:
    """Read a fresh Settings snapshot from the current environment."""
    return Settings()


settings = load_settings()
