# feedscout/core/config.py
from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    env: str = "dev"
    log_level: str = "INFO"

    # Resolución de URLs: esquema por defecto para "codehollow.com"
    default_scheme: str = "http"

    # Idioma para fechas (de, fr, es...). None = inglés
    date_locale: str | None = None

    # HTTP
    http_timeout: float = 20.0
    user_agent: str = "feedscout/0.1 (+feed discovery)"

    # Límites de ingesta
    max_entries: int = 50
    max_content_chars: int = 8000

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH) if ENV_PATH.exists() else None,
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
