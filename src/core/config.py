"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI ni la API.
- El resolver, la cadena de metadata y el extractor HTML reciben la misma
  instancia inmutable, construida una sola vez al arrancar el proceso.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - `frozen=True`: ningún request puede mutar la configuración compartida.
    """

    model_config = SettingsConfigDict(
        env_prefix="BRIGHELLA_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        frozen=True,
    )

    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "BRIGHELLA_PORT"),
        description="Puerto HTTP de escucha.",
    )
    listen_host: str = Field(
        default="0.0.0.0",
        min_length=1,
        description="Interfaz de escucha del servidor HTTP.",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging para `serve`.",
    )

    default_title: str = Field(
        default="Brighella",
        min_length=1,
        validation_alias=AliasChoices("FRAME_TITLE", "BRIGHELLA_DEFAULT_TITLE"),
        description="Título usado cuando ni DNS ni la página destino aportan uno.",
    )
    default_favicon: str = Field(
        default="https://fav.farm/🎭",
        min_length=1,
        description="Favicon del último nivel de fallback.",
    )
    scraped_default_favicon: str = Field(
        default="https://fav.farm/📸",
        min_length=1,
        description="Favicon cuando la página destino se pudo leer pero no declara ninguno.",
    )

    resolver_address: str = Field(
        default="8.8.8.8",
        min_length=1,
        description="Resolver DNS upstream para las consultas TXT.",
    )
    resolver_port: int = Field(default=53, ge=1, le=65535)
    dns_prefix: str = Field(default="_frame", min_length=1)
    dns_title_prefix: str = Field(default="_frame_title", min_length=1)
    dns_favicon_prefix: str = Field(default="_frame_favicon", min_length=1)
    dns_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Timeout del transporte UDP por consulta (segundos).",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout del fetch de la página destino; None = sin timeout.",
    )
    user_agent: str | None = Field(
        default=None,
        description="User-Agent del fetch; None deja el del cliente HTTP.",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Instancia de proceso (se lee el entorno una sola vez)."""

    return AppSettings()
