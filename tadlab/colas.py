"""Bounded queue of elements."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .elemento import Elemento, EstructuraLlenaError, EstructuraVaciaError, _como_elemento

CAPACIDAD_COLA = 100

_SEPARADOR = "-------------------------------------"


class Cola:
    """A FIFO queue limited to a fixed capacity. Iteration goes front to back."""

    def __init__(self, elementos: Iterable[Elemento | int] = (), capacidad: int = CAPACIDAD_COLA):
        self.capacidad = capacidad
        self._valores: deque[Elemento] = deque()
        for elemento in elementos:
            self.encolar(elemento)

    def encolar(self, elemento: Elemento | int) -> None:
        if self.es_llena():
            raise EstructuraLlenaError("la cola esta llena")
        self._valores.append(_como_elemento(elemento))

    def desencolar(self) -> Elemento:
        if self.es_vacia():
            raise EstructuraVaciaError("la cola esta vacia")
        return self._valores.popleft()

    def recuperar(self) -> Elemento:
        """Return the front element without removing it."""
        if self.es_vacia():
            raise EstructuraVaciaError("la cola esta vacia")
        return self._valores[0]

    def es_vacia(self) -> bool:
        return not self._valores

    def es_llena(self) -> bool:
        return len(self._valores) >= self.capacidad

    def __len__(self) -> int:
        return len(self._valores)

    def __iter__(self) -> Iterator[Elemento]:
        return iter(list(self._valores))

    def claves(self) -> list[int]:
        return [e.clave for e in self._valores]

    def __str__(self) -> str:
        if self.es_vacia():
            return "COLA VACIA !!!"
        lineas = [_SEPARADOR, "Imprimiendo las Claves de la Cola", _SEPARADOR]
        lineas.extend(f"Clave:  {c}" for c in self.claves())
        return "\n".join(lineas)