"""Stack exercises: search, insertion, removal, swapping, copying and base change."""

from __future__ import annotations

import random

from .elemento import Elemento, EstructuraLlenaError
from .pilas import Pila

_DIGITOS = "0123456789ABCDEF"


def _vaciar(pila: Pila) -> list[Elemento]:
    """Pop every element; return them bottom first."""
    elementos: list[Elemento] = []
    while not pila.es_vacia():
        elementos.append(pila.desapilar())
    elementos.reverse()
    return elementos


def _rellenar(pila: Pila, elementos: list[Elemento]) -> None:
    for elemento in elementos:
        pila.apilar(elemento)


def pila_aleatoria(longitud: int, maximo: int = 100, rng: random.Random | None = None) -> Pila:
    """Stack of random keys between 0 and maximo, both included."""
    generador = rng if rng is not None else random.Random()
    return Pila(generador.randint(0, maximo) for _ in range(longitud))


def existe_clave(pila: Pila, clave: int) -> bool:
    """Whether the key is in the stack; the stack is left as it was."""
    return any(elemento.clave == clave for elemento in pila)


def colocar_elemento(pila: Pila, posicion: int, clave: int) -> Pila:
    """Insert a new key at an ordinal position counted from the bottom.

    The stack is changed in place and returned. A position past the number
    of elements leaves the stack unchanged.
    """
    if posicion < 1:
        raise ValueError(f"posicion invalida: {posicion}")
    if posicion > len(pila):
        return pila
    if pila.es_llena():
        raise EstructuraLlenaError("la pila esta llena")
    elementos = _vaciar(pila)
    elementos.insert(posicion - 1, Elemento(clave))
    _rellenar(pila, elementos)
    return pila


def eliminar_clave(pila: Pila, clave: int) -> Pila:
    """Remove the first occurrence of the key found from the top; return the stack."""
    elementos = _vaciar(pila)
    indice = next(
        (i for i, elemento in reversed(list(enumerate(elementos))) if elemento.clave == clave),
        None,
    )
    if indice is not None:
        del elementos[indice]
    _rellenar(pila, elementos)
    return pila


def intercambiar_posiciones(pila: Pila, posicion1: int, posicion2: int) -> Pila:
    """Swap the elements at two ordinal positions counted from the bottom; return the stack."""
    if (
        posicion1 < 1
        or posicion2 < 1
        or posicion1 == posicion2
        or max(posicion1, posicion2) > len(pila)
    ):
        raise ValueError("Posiciones Invalidas")
    elementos = _vaciar(pila)
    a, b = posicion1 - 1, posicion2 - 1
    elementos[a], elementos[b] = elementos[b], elementos[a]
    _rellenar(pila, elementos)
    return pila


def duplicar_contenido(pila: Pila) -> Pila:
    """New stack where every element appears twice in a row, in the same order."""
    desde_abajo = list(pila)[::-1]
    return Pila(copia for elemento in desde_abajo for copia in (elemento, elemento))


def cantidad_elementos(pila: Pila) -> int:
    """Number of elements in the stack; the stack is left as it was."""
    return sum(1 for _ in pila)


def pilas_iguales(pila1: Pila, pila2: Pila) -> bool:
    """Whether both stacks hold exactly the same keys in the same order."""
    return pila1.claves() == pila2.claves()


def cambiar_base(decimal: int, base: int) -> str:
    """Write a non-negative number in a base from 2 to 16.

    A base outside that range gives the number back in decimal.
    """
    if not 2 <= base <= 16:
        return str(decimal)
    if decimal < 0:
        raise ValueError("el numero decimal no puede ser negativo")
    restos = Pila(capacidad=max(1, decimal.bit_length()))
    if decimal == 0:
        restos.apilar(0)
    while decimal > 0:
        decimal, resto = divmod(decimal, base)
        restos.apilar(resto)
    return "".join(_DIGITOS[elemento.clave] for elemento in restos)