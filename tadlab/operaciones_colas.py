"""Queue exercises: search, cutting in line, removal, counting, copying and inversion."""

from __future__ import annotations

import random

from .colas import Cola
from .elemento import Elemento


def cola_aleatoria(longitud: int, maximo: int = 10, rng: random.Random | None = None) -> Cola:
    """Queue of random keys between 0 and maximo, both included."""
    generador = rng if rng is not None else random.Random()
    return Cola(generador.randint(0, maximo) for _ in range(longitud))


def existe_clave(cola: Cola, clave: int) -> bool:
    """Whether the key is in the queue; the queue is left as it was."""
    return any(elemento.clave == clave for elemento in cola)


def colar_elemento(cola: Cola, posicion: int, clave: int) -> Cola:
    """New queue with a new key placed at an ordinal position counted from the front.

    The original queue is kept. A position past the number of elements gives
    back a plain copy.
    """
    if posicion < 1:
        raise ValueError(f"posicion invalida: {posicion}")

    def recorrer():
        for indice, elemento in enumerate(cola, start=1):
            if indice == posicion:
                yield Elemento(clave)
            yield elemento

    return Cola(recorrer(), capacidad=cola.capacidad)


def sacar_elemento(cola: Cola, clave: int) -> Cola:
    """New queue without any element holding the key; the original is kept."""
    return Cola(
        (elemento for elemento in cola if elemento.clave != clave),
        capacidad=cola.capacidad,
    )


def contar_elementos(cola: Cola) -> int:
    """Number of elements in the queue; the queue is left as it was."""
    return sum(1 for _ in cola)


def copiar(cola: Cola) -> Cola:
    """New queue holding the same elements in the same order."""
    return Cola(cola, capacidad=cola.capacidad)


def invertir(cola: Cola) -> Cola:
    """New queue with the contents reversed; the original is kept."""
    return Cola(list(cola)[::-1], capacidad=cola.capacidad)