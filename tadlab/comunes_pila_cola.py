"""Keys shared by a stack and a queue, with where each was found."""

from __future__ import annotations

from dataclasses import dataclass

from .colas import Cola
from .pilas import Pila


@dataclass(frozen=True)
class Coincidencia:
    """A shared key and its 1-based positions in the stack and the queue."""

    clave: int
    posicion_pila: int
    posicion_cola: int

    def __str__(self) -> str:
        return f"{self.posicion_pila}:{self.posicion_cola}:{self.clave}"


def comunes_pila_y_cola(pila: Pila, cola: Cola) -> list[Coincidencia]:
    """Keys present in both structures, walking the stack from the top.

    Positions count from the top of the stack and the front of the queue;
    for the queue the first position where the key appears is used. Both
    structures are kept.
    """
    primeras: dict[int, int] = {}
    for posicion, elemento in enumerate(cola, start=1):
        primeras.setdefault(elemento.clave, posicion)
    return [
        Coincidencia(elemento.clave, posicion, primeras[elemento.clave])
        for posicion, elemento in enumerate(pila, start=1)
        if elemento.clave in primeras
    ]