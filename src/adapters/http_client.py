"""Wrapper de httpx.

Estandariza timeouts, headers y el manejo de fallos de las tres APIs JSON
que consulta el pipeline: transporte, status inesperado y cuerpo inválido
terminan todos en un `Err`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import ResponseParseError, UnexpectedStatusError
from core.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def build_async_client(settings: AppSettings | None = None) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults para APIs JSON."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def get_json(
    url: str,
    *,
    subject: str,
    params: Mapping[str, Any] | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Result[Any]:
    """GET a `url` y devuelve el cuerpo JSON decodificado.

    - Fallo de la petición (DNS, conexión, timeout, bucle de redirects,
      `Content-Encoding` inválido): `Err` con la excepción original de httpx.
    - Status != 200: `Err(UnexpectedStatusError)` con status y cuerpo.
    - JSON inválido: `Err(ResponseParseError)`.

    `subject` nombra lo que se está pidiendo ("IP", "coordinates", ...) y
    aparece en los mensajes de error.
    """

    logger.debug("GET %s (params=%s) for %s", url, dict(params or {}), subject)
    try:
        if client is not None:
            response = await client.get(url, params=params)
        else:
            async with build_async_client(settings) as own_client:
                response = await own_client.get(url, params=params)
    except httpx.RequestError as exc:
        logger.warning("Request error fetching %s: %s", subject, exc)
        return Err(exc)

    if response.status_code != 200:
        error = UnexpectedStatusError(
            status_code=response.status_code,
            body=response.text,
            subject=subject,
        )
        logger.warning("%s", error)
        return Err(error)

    try:
        return Ok(response.json())
    except ValueError as exc:
        # JSONDecodeError y UnicodeDecodeError (cuerpo que no es UTF-8)
        logger.warning("Malformed JSON fetching %s: %s", subject, exc)
        return Err(ResponseParseError(reason=f"invalid JSON ({exc})", subject=subject))
