"""
Configuration de l'application / Application configuration.
Utilise pydantic-settings pour charger depuis .env ou variables d'environnement.
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Country Directory"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True

    # Serveur / Server (port de l'image d'origine / original image port)
    HOST: str = "0.0.0.0"
    PORT: int = 8087

    # Stockage / Storage backend: "sql" ou "memory"
    STORAGE_BACKEND: Literal["sql", "memory"] = "sql"

    # Database - SQLite par défaut pour le développement
    # Database - SQLite by default for development
    DATABASE_URL: str = "sqlite+aiosqlite:///./countries.db"

    # CORS - origines autorisées / allowed origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8087"]

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "120/minute"
    RATE_LIMIT_WRITE: str = "60/minute"

    # Observabilite / Observability
    METRICS_ENABLED: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool | None = None  # None = JSON hors DEBUG / JSON unless DEBUG

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def use_json_logs(self) -> bool:
        if self.LOG_JSON is None:
            return not self.DEBUG
        return self.LOG_JSON


settings = Settings()
