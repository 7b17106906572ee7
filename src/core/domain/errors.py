"""Errores del dominio.

Los fallos de transporte no aparecen aquí: se propagan tal cual como
`httpx.TransportError`. Estas clases cubren lo que se construye localmente
a partir de una respuesta HTTP.
"""

from __future__ import annotations


class FlyoverError(Exception):
    """Base para errores construidos por los resolvers."""

    def __init__(self, message: str, *, subject: str) -> None:
        super().__init__(message)
        self.subject = subject


class UnexpectedStatusError(FlyoverError):
    """El servidor respondió con un status distinto de 200."""

    def __init__(self, *, status_code: int, body: str, subject: str) -> None:
        message = f"{status_code} was encountered when fetching {subject}. Response: {body}"
        super().__init__(message, subject=subject)
        self.status_code = status_code
        self.body = body


class ResponseParseError(FlyoverError):
    """El cuerpo no es JSON válido o le faltan los campos esperados."""

    def __init__(self, *, reason: str, subject: str) -> None:
        super().__init__(f"Could not parse response when fetching {subject}: {reason}", subject=subject)
        self.reason = reason
