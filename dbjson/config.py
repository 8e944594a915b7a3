"""Konfiguracja narzędzia."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ustawienia zrzutu (zmienne środowiskowe DBJSON_*)."""

    model_config = SettingsConfigDict(
        env_prefix="DBJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Silnik bazy
    backend: Literal["cli", "sqlalchemy"] = "cli"
    sqlite_binary: str = "sqlite3"
    command_timeout: Optional[float] = None

    # Wyjście
    json_indent: int = 4
    output_encoding: str = "utf-8"

    # Typowanie pól
    strict_reals: bool = False

    # Application
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Pobierz ustawienia (z cache)."""
    return Settings()
