"""Modelos del dominio (Pydantic v2).

Valores transitorios de una ejecución del pipeline: ninguno se persiste
ni se muta después de crearse.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Coordinates(BaseModel):
    """Latitud/longitud aproximadas derivadas de una IP."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ...,
        ge=-90.0,
        le=90.0,
        description="Latitud en grados decimales.",
    )
    longitude: float = Field(
        ...,
        ge=-180.0,
        le=180.0,
        description="Longitud en grados decimales.",
    )


class FlyoverPass(BaseModel):
    """Un paso previsto de la ISS sobre unas coordenadas.

    Campos desconocidos que devuelva el servicio se conservan tal cual
    (`extra="allow"`), así `model_dump()` reproduce el registro original.
    Los valores enteros se mantienen como `int` y los fraccionarios como
    `float`.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    risetime: int | float = Field(
        ...,
        description="Inicio del paso (epoch, segundos).",
    )
    duration: int | float = Field(
        ...,
        ge=0,
        description="Duración del paso (segundos).",
    )

    @property
    def rise_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.risetime, tz=timezone.utc)
