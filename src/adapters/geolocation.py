"""Resolver de coordenadas a partir de una IP (freegeoip por defecto).

La IP va embebida en el path (`.../json/<ip>`); la respuesta trae
`latitude` y `longitude` numéricos.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import get_json
from core.config import AppSettings
from core.domain.errors import ResponseParseError
from core.domain.models import Coordinates
from core.domain.result import Err, Ok, Result

SUBJECT = "coordinates"


async def fetch_coords_by_ip(
    ip: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Result[Coordinates]:
    settings = settings or AppSettings()
    url = settings.geolocation_url.replace("{ip}", quote(ip, safe=":."))

    result = await get_json(url, subject=SUBJECT, settings=settings, client=client)
    if isinstance(result, Err):
        return result

    data = result.value
    if not isinstance(data, dict):
        return Err(ResponseParseError(reason="expected a JSON object", subject=SUBJECT))
    try:
        coords = Coordinates(latitude=data.get("latitude"), longitude=data.get("longitude"))
    except ValidationError as exc:
        return Err(
            ResponseParseError(
                reason=f"invalid latitude/longitude ({exc.error_count()} errors)",
                subject=SUBJECT,
            )
        )
    return Ok(coords)
