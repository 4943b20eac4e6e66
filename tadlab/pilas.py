"""Bounded stack of elements."""

from __future__ import annotations

from typing import Iterable, Iterator

from .elemento import Elemento, EstructuraLlenaError, EstructuraVaciaError, _como_elemento

CAPACIDAD_PILA = 100


class Pila:
    """A LIFO stack limited to a fixed capacity.

    Elements given to the constructor are pushed in order, so the last one
    ends on top. Iteration goes from the top down.
    """

    def __init__(self, elementos: Iterable[Elemento | int] = (), capacidad: int = CAPACIDAD_PILA):
        self.capacidad = capacidad
        self._valores: list[Elemento] = []
        for elemento in elementos:
            self.apilar(elemento)

    def apilar(self, elemento: Elemento | int) -> None:
        if self.es_llena():
            raise EstructuraLlenaError("la pila esta llena")
        self._valores.append(_como_elemento(elemento))

    def desapilar(self) -> Elemento:
        if self.es_vacia():
            raise EstructuraVaciaError("la pila esta vacia")
        return self._valores.pop()

    def tope(self) -> Elemento:
        if self.es_vacia():
            raise EstructuraVaciaError("la pila esta vacia")
        return self._valores[-1]

    def es_vacia(self) -> bool:
        return not self._valores

    def es_llena(self) -> bool:
        return len(self._valores) >= self.capacidad

    def __len__(self) -> int:
        return len(self._valores)

    def __iter__(self) -> Iterator[Elemento]:
        return iter(self._valores[::-1])

    def claves(self) -> list[int]:
        """Keys from the top down."""
        return [e.clave for e in self]

    def __str__(self) -> str:
        if self.es_vacia():
            return "PILA VACIA !!!"
        return "Contenido de la pila: " + " ".join(str(c) for c in self.claves())