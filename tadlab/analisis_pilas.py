"""Stack analysis: inversion, removal of a key, common keys and repetition counts."""

from __future__ import annotations

from collections import Counter

from .elemento import Elemento
from .pilas import Pila


def _desde_abajo(pila: Pila) -> list[Elemento]:
    """Elements of the stack from the bottom up; the stack is left as it was."""
    return list(pila)[::-1]


def invertir(pila: Pila) -> Pila:
    """New stack with the contents reversed; the original is kept."""
    return Pila(pila, capacidad=pila.capacidad)


def eliminar_ocurrencias(pila: Pila, clave: int) -> Pila:
    """New stack without any element holding the key, solved recursively.

    The original stack is kept and the remaining elements keep their order.
    """
    elementos = _desde_abajo(pila)
    resultado = Pila(capacidad=pila.capacidad)

    def pasar(indice: int) -> Pila:
        if indice == len(elementos):
            return resultado
        elemento = elementos[indice]
        if elemento.clave != clave:
            resultado.apilar(elemento)
        return pasar(indice + 1)

    return pasar(0)


def eliminar_ocurrencias_iterativo(pila: Pila, clave: int) -> Pila:
    """New stack without any element holding the key, solved iteratively."""
    return Pila(
        (elemento for elemento in _desde_abajo(pila) if elemento.clave != clave),
        capacidad=pila.capacidad,
    )


def elementos_comunes(pila1: Pila, pila2: Pila) -> Pila:
    """New stack with the keys of pila1 that also appear in pila2.

    pila1 is walked from the top down and every match is pushed, so the
    result read from the top follows pila1 from the bottom up. Both stacks
    are kept.
    """
    claves2 = set(pila2.claves())
    return Pila(
        (Elemento(elemento.clave) for elemento in pila1 if elemento.clave in claves2),
        capacidad=pila1.capacidad,
    )


def sacar_repetidos(pila: Pila) -> Pila:
    """New stack with each key once and, as its value, how many times it appeared.

    Keys are pushed in the order they first appear from the bottom of the
    original stack, which is kept.
    """
    apariciones = Counter(elemento.clave for elemento in _desde_abajo(pila))
    return Pila(
        (Elemento(clave, cantidad) for clave, cantidad in apariciones.items()),
        capacidad=pila.capacidad,
    )