"""Operations over pairs of lists: differences, averages, comparison."""

from __future__ import annotations

from enum import Enum

from .elemento import EstructuraVaciaError
from .listas import Lista


class Relacion(Enum):
    """How one list compares to another, key by key."""

    IGUAL = "igual"
    MAYOR = "mayor"
    MENOR = "menor"


def valores_no_en_lista(lista1: Lista, lista2: Lista) -> Lista:
    """Elements of lista1 whose key does not appear in lista2."""
    return Lista(e for e in lista1 if lista2.buscar(e.clave) is None)


def valores_comunes(lista1: Lista, lista2: Lista) -> Lista:
    """Elements of lista2 whose key also appears in lista1."""
    return Lista(e for e in lista2 if lista1.buscar(e.clave) is not None)


def promedio_lista(lista: Lista) -> float:
    """Mean of the keys of a non-empty list."""
    if lista.es_vacia():
        raise EstructuraVaciaError("no hay promedio de una lista vacia")
    return sum(lista.claves()) / len(lista)


def valor_max(lista: Lista) -> tuple[int, int]:
    """Largest key and the 1-based position of its first occurrence."""
    if lista.es_vacia():
        raise EstructuraVaciaError("no hay maximo de una lista vacia")
    posicion, maximo = max(
        enumerate(lista.claves(), start=1), key=lambda par: (par[1], -par[0])
    )
    return maximo, posicion


def comparar_listas(lista1: Lista, lista2: Lista) -> Relacion:
    """Compare two equally long lists by counting larger keys position by position."""
    if len(lista1) != len(lista2):
        raise ValueError("Las listas no tienen el mismo tamanio")
    mayores = menores = 0
    for a, b in zip(lista1, lista2):
        if a.clave > b.clave:
            mayores += 1
        elif a.clave < b.clave:
            menores += 1
    if mayores > menores:
        return Relacion.MAYOR
    if mayores < menores:
        return Relacion.MENOR
    return Relacion.IGUAL


def es_sublista(lista1: Lista, lista2: Lista) -> bool:
    """Whether every key of lista2 appears somewhere in lista1."""
    if len(lista2) > len(lista1):
        return False
    claves1 = set(lista1.claves())
    return all(e.clave in claves1 for e in lista2)