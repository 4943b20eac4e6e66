"""Bounded list of elements with 1-based positions."""

from __future__ import annotations

from typing import Iterable, Iterator

from .elemento import Elemento, EstructuraLlenaError, _como_elemento

CAPACIDAD_LISTA = 100


class Lista:
    """A list of Elementos limited to a fixed capacity."""

    def __init__(self, elementos: Iterable[Elemento | int] = (), capacidad: int = CAPACIDAD_LISTA):
        self.capacidad = capacidad
        self._valores: list[Elemento] = []
        for elemento in elementos:
            self.agregar(elemento)

    def es_vacia(self) -> bool:
        return not self._valores

    def es_llena(self) -> bool:
        return len(self._valores) >= self.capacidad

    def __len__(self) -> int:
        return len(self._valores)

    def agregar(self, elemento: Elemento | int) -> None:
        """Append an element at the end."""
        if self.es_llena():
            raise EstructuraLlenaError("la lista esta llena")
        self._valores.append(_como_elemento(elemento))

    def borrar(self, clave: int) -> bool:
        """Remove every element with this key; tell whether any was removed."""
        antes = len(self._valores)
        self._valores = [e for e in self._valores if e.clave != clave]
        return len(self._valores) != antes

    def buscar(self, clave: int) -> Elemento | None:
        """Return the first element with this key, or None."""
        return next((e for e in self._valores if e.clave == clave), None)

    def insertar(self, elemento: Elemento | int, pos: int) -> bool:
        """Insert at a 1-based position.

        A position past the end appends the element and returns False.
        """
        if self.es_llena():
            raise EstructuraLlenaError("la lista esta llena")
        if pos < 1:
            raise IndexError(f"posicion invalida: {pos}")
        if pos > len(self._valores):
            self.agregar(elemento)
            return False
        self._valores.insert(pos - 1, _como_elemento(elemento))
        return True

    def eliminar(self, pos: int) -> bool:
        """Remove the element at a 1-based position, if it exists."""
        if 1 <= pos <= len(self._valores):
            del self._valores[pos - 1]
            return True
        return False

    def recuperar(self, pos: int) -> Elemento | None:
        """Return the element at a 1-based position, or None if out of range."""
        if 1 <= pos <= len(self._valores):
            return self._valores[pos - 1]
        return None

    def claves(self) -> list[int]:
        return [e.clave for e in self._valores]

    def __iter__(self) -> Iterator[Elemento]:
        return iter(list(self._valores))

    def __str__(self) -> str:
        return "Contenido de la lista: " + " ".join(str(c) for c in self.claves())