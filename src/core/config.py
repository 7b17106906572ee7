"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) para que los adaptadores
HTTP y la CLI lean los mismos endpoints y timeouts.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "iss-flyover"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "iss-flyover"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "iss-flyover"
    return Path.home() / ".config" / "iss-flyover"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todos los campos se pueden sobreescribir con variables `ISS_FLYOVER_*`
    o desde un `.env` (proyecto primero, luego el global del usuario).
    """

    model_config = SettingsConfigDict(
        env_prefix="ISS_FLYOVER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="iss-flyover/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    ip_lookup_url: str = Field(
        default="https://api.ipify.org?format=json",
        min_length=8,
        description="Endpoint que devuelve la IP pública como JSON (`ip`).",
    )
    geolocation_url: str = Field(
        default="https://freegeoip.app/json/{ip}",
        min_length=8,
        description="Endpoint de geolocalización; `{ip}` se sustituye por la IP.",
    )
    flyover_url: str = Field(
        default="http://api.open-notify.org/iss-pass.json",
        min_length=8,
        description="Endpoint de predicción de pasos de la ISS (query `lat`/`lon`).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("geolocation_url")
    @classmethod
    def _require_ip_placeholder(cls, value: str) -> str:
        if "{ip}" not in value:
            raise ValueError("geolocation_url must contain an '{ip}' placeholder")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "WARNING"
