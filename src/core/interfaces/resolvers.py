"""Contratos de los resolvers del pipeline.

Cada resolver hace una única llamada de red y devuelve un `Result`.
Son asíncronos porque hacen I/O (HTTP). El cliente y la configuración se
pasan por keyword para que el orquestador pueda compartirlos en una
ejecución.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

from core.config import AppSettings
from core.domain.models import Coordinates, FlyoverPass
from core.domain.result import Result


@runtime_checkable
class IPResolver(Protocol):
    async def __call__(
        self,
        *,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> Result[str]:
        ...


@runtime_checkable
class CoordinateResolver(Protocol):
    async def __call__(
        self,
        ip: str,
        *,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> Result[Coordinates]:
        ...


@runtime_checkable
class FlyoverResolver(Protocol):
    async def __call__(
        self,
        coords: Coordinates,
        *,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> Result[list[FlyoverPass]]:
        ...
