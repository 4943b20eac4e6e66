"""Check whether one list is a multiple of another, position by position."""

from __future__ import annotations

from .listas import Lista


def es_multiplo_con_escalar(lista1: Lista, lista2: Lista) -> tuple[bool, int | None]:
    """Tell whether every key of lista2 divides exactly by the key of lista1 at the same position.

    Returns a pair ``(es_multiplo, escalar)``. ``escalar`` is the common
    quotient when every position gives the same one, and None otherwise.
    A zero key in lista1 makes the lists not multiples. Positions are
    compared only while both lists have elements.
    """
    escalar: int | None = None
    hay_escalar = True
    primero = True
    for elemento1, elemento2 in zip(lista1, lista2):
        divisor, dividendo = elemento1.clave, elemento2.clave
        if divisor == 0 or dividendo % divisor != 0:
            return False, None
        cociente = dividendo // divisor
        if primero:
            escalar = cociente
            primero = False
        elif escalar != cociente:
            hay_escalar = False
    return True, escalar if hay_escalar else None