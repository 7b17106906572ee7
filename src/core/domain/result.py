"""Resultado de una etapa: `Ok(value)` o `Err(error)`, nunca ambos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: Exception

    def __str__(self) -> str:
        return str(self.error)


Result = Union[Ok[T], Err]
