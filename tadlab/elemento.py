"""Element stored in the abstract data types, and their errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Elemento:
    """An integer key with an optional attached value."""

    clave: int
    valor: Any = None


class EstructuraLlenaError(Exception):
    """Raised when adding to a structure that reached its capacity."""


class EstructuraVaciaError(Exception):
    """Raised when reading from an empty structure."""


def _como_elemento(dato: Elemento | int) -> Elemento:
    """Wrap a bare key in an Elemento; pass Elementos through."""
    if isinstance(dato, Elemento):
        return dato
    return Elemento(dato)