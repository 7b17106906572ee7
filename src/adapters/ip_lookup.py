"""Resolver de IP pública (ipify por defecto)."""

from __future__ import annotations

import httpx

from adapters.http_client import get_json
from core.config import AppSettings
from core.domain.errors import ResponseParseError
from core.domain.result import Err, Ok, Result

SUBJECT = "IP"


async def fetch_my_ip(
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Result[str]:
    """Devuelve la IP pública del llamante, p.ej. `Ok("162.245.144.188")`."""

    settings = settings or AppSettings()
    result = await get_json(settings.ip_lookup_url, subject=SUBJECT, settings=settings, client=client)
    if isinstance(result, Err):
        return result

    data = result.value
    ip = data.get("ip") if isinstance(data, dict) else None
    if not isinstance(ip, str) or not ip.strip():
        return Err(ResponseParseError(reason="missing 'ip' field", subject=SUBJECT))
    return Ok(ip.strip())
