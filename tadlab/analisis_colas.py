"""Queue analysis: equality, non-repeated keys and total or partial divisors."""

from __future__ import annotations

from collections import Counter

from .colas import Cola


def colas_iguales(cola1: Cola, cola2: Cola) -> bool:
    """Whether both queues hold the same keys in the same positions; both are kept."""
    return cola1.claves() == cola2.claves()


def cola_no_repetidos(cola: Cola) -> Cola:
    """New queue with the elements whose key appears only once, in their order."""
    apariciones = Counter(cola.claves())
    return Cola(
        (elemento for elemento in cola if apariciones[elemento.clave] == 1),
        capacidad=cola.capacidad,
    )


def divisor_total(cola: Cola) -> tuple[int, bool]:
    """Find a total or partial divisor among the keys of the queue.

    Every key is tried in order; it counts how many keys of the queue,
    itself included, it divides exactly. A key dividing all of them is a
    total divisor; one dividing at least half of them is a partial one.
    The last key that qualifies is returned with whether it was total.
    Returns ``(0, False)`` when there is none. Keys must be at least 2.
    """
    claves = cola.claves()
    if any(clave < 2 for clave in claves):
        raise ValueError("las claves deben ser mayores o iguales a 2")
    longitud = len(claves)
    divisor, fue_total = 0, False
    for candidato in claves:
        divididos = sum(1 for clave in claves if clave % candidato == 0)
        if divididos == longitud:
            divisor, fue_total = candidato, True
        elif longitud == 3:
            if divididos // 2 >= longitud // 2:
                divisor, fue_total = candidato, False
        elif divididos >= longitud // 2:
            divisor, fue_total = candidato, False
    return divisor, fue_total