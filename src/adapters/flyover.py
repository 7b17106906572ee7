"""Resolver de pasos de la ISS (open-notify `iss-pass.json` por defecto).

Respuesta típica:

    {"message": "success", "request": {...},
     "response": [{"risetime": 134564234, "duration": 600}, ...]}

También se acepta un array JSON desnudo con los mismos registros.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import get_json
from core.config import AppSettings
from core.domain.errors import ResponseParseError
from core.domain.models import Coordinates, FlyoverPass
from core.domain.result import Err, Ok, Result

SUBJECT = "ISS flyover times"

_PASSES_ADAPTER = TypeAdapter(list[FlyoverPass])


def _extract_records(data: Any) -> list[Any] | None:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("response"), list):
        return data["response"]
    return None


async def fetch_iss_flyover_times(
    coords: Coordinates,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Result[list[FlyoverPass]]:
    settings = settings or AppSettings()
    params = {"lat": coords.latitude, "lon": coords.longitude}

    result = await get_json(settings.flyover_url, subject=SUBJECT, params=params, settings=settings, client=client)
    if isinstance(result, Err):
        return result

    records = _extract_records(result.value)
    if records is None:
        return Err(ResponseParseError(reason="missing 'response' array", subject=SUBJECT))
    try:
        passes = _PASSES_ADAPTER.validate_python(records)
    except ValidationError as exc:
        return Err(
            ResponseParseError(
                reason=f"invalid pass records ({exc.error_count()} errors)",
                subject=SUBJECT,
            )
        )
    return Ok(passes)
