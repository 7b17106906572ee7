"""Orquestación IP -> coordenadas -> pasos de la ISS.

Las tres etapas se ejecutan en orden estricto: ninguna empieza antes de que
la anterior termine y el primer `Err` corta el pipeline y se devuelve tal
cual al llamante. No hay reintentos.
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

import httpx

from adapters.flyover import fetch_iss_flyover_times
from adapters.geolocation import fetch_coords_by_ip
from adapters.http_client import build_async_client
from adapters.ip_lookup import fetch_my_ip
from core.config import AppSettings
from core.domain.models import FlyoverPass
from core.domain.result import Err, Ok, Result
from core.interfaces.resolvers import CoordinateResolver, FlyoverResolver, IPResolver

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    IDLE = "idle"
    AWAITING_IP = "awaiting_ip"
    AWAITING_COORDINATES = "awaiting_coordinates"
    AWAITING_PASSES = "awaiting_passes"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineStage.SUCCEEDED, PipelineStage.FAILED)


@dataclass
class FlyoverResolvers:
    """Resolvers usados por el pipeline (sustituibles en tests)."""

    ip: IPResolver = field(default=fetch_my_ip)
    coordinates: CoordinateResolver = field(default=fetch_coords_by_ip)
    passes: FlyoverResolver = field(default=fetch_iss_flyover_times)


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la capa de UI (progreso)."""

    stage_changed: Callable[[PipelineStage], None] | None = None


async def next_iss_times_for_my_location(
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
    resolvers: FlyoverResolvers | None = None,
    hooks: PipelineHooks | None = None,
) -> Result[list[FlyoverPass]]:
    """Devuelve los próximos pasos de la ISS sobre la ubicación del llamante.

    Si no se pasa `client`, se crea uno para toda la ejecución y se cierra
    al terminar.
    """

    settings = settings or AppSettings()
    resolvers = resolvers or FlyoverResolvers()
    hooks = hooks or PipelineHooks()

    def enter(stage: PipelineStage) -> None:
        logger.debug("Pipeline stage -> %s", stage.value)
        if hooks.stage_changed:
            hooks.stage_changed(stage)

    def fail(err: Err) -> Err:
        enter(PipelineStage.FAILED)
        return err

    enter(PipelineStage.IDLE)
    async with AsyncExitStack() as stack:
        if client is None:
            client = await stack.enter_async_context(build_async_client(settings))

        enter(PipelineStage.AWAITING_IP)
        ip_result = await resolvers.ip(settings=settings, client=client)
        if isinstance(ip_result, Err):
            return fail(ip_result)
        logger.info("Public IP: %s", ip_result.value)

        enter(PipelineStage.AWAITING_COORDINATES)
        coords_result = await resolvers.coordinates(ip_result.value, settings=settings, client=client)
        if isinstance(coords_result, Err):
            return fail(coords_result)
        coords = coords_result.value
        logger.info("Coordinates: lat=%s lon=%s", coords.latitude, coords.longitude)

        enter(PipelineStage.AWAITING_PASSES)
        passes_result = await resolvers.passes(coords, settings=settings, client=client)
        if isinstance(passes_result, Err):
            return fail(passes_result)

    enter(PipelineStage.SUCCEEDED)
    logger.info("Fetched %d ISS passes", len(passes_result.value))
    return Ok(passes_result.value)
