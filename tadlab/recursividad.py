"""Recursive exercises: palindromes, arithmetic by repetition, strings and pieces."""

from __future__ import annotations

from itertools import repeat
from typing import Iterator, Sequence


def es_palindromo(cadena: str) -> bool:
    """Whether the text reads the same backwards (case-sensitive)."""
    return all(a == b for a, b in zip(cadena, reversed(cadena)))


def producto(m: int, n: int) -> int:
    """Product of m and n computed as n successive additions of m."""
    if n < 0:
        raise ValueError("el multiplicador no puede ser negativo")
    return sum(repeat(m, n))


def fibonacci(numero: int) -> int:
    """Term of the Fibonacci series where terms 0 and 1 are both 1."""
    if numero < 0:
        raise ValueError("el termino debe ser mayor o igual a cero")
    anterior, actual = 1, 1
    for _ in range(numero):
        anterior, actual = actual, anterior + actual
    return anterior


def division(m: int, n: int) -> float:
    """Quotient of m by n computed through successive subtractions."""
    if n == 0:
        raise ZeroDivisionError("el divisor no puede ser cero")
    if n < 0 and m >= n:
        raise ValueError("las restas sucesivas no terminan con este divisor")
    cociente = 0
    while m >= n:
        m -= n
        cociente += 1
    return cociente + m / n


def validar_numero(numero: str) -> bool:
    """Whether the text is a non-empty string of digits, optionally led by '-'.

    A leading '-' accepts the text at once, whatever follows it.
    """
    if numero.startswith("-"):
        return True
    return bool(numero) and all("0" <= c <= "9" for c in numero)


def _agrupar_miles(digitos: str) -> str:
    if len(digitos) <= 3:
        return digitos
    return f"{_agrupar_miles(digitos[:-3])}.{digitos[-3:]}"


def agregar_separador_miles(numero: str) -> str:
    """Insert '.' between every group of three digits, counting from the right."""
    if numero.startswith("-"):
        return "-" + _agrupar_miles(numero[1:])
    return _agrupar_miles(numero)


def reunion_mafia(nivel: int) -> str:
    """Front view of a delegation meeting of the given level."""
    if nivel < 1:
        raise ValueError("el nivel de la reunion debe ser mayor a cero")
    if nivel == 1:
        return "(-.-)"
    return f"(-.{reunion_mafia(nivel - 1)}.-)"


def validar_onda(onda: str) -> str:
    """Return the wave with 'h'/'l' made upper case; raise if it holds anything else."""
    if not onda:
        raise ValueError("la onda esta vacia")
    normalizada = onda.replace("h", "H").replace("l", "L")
    if set(normalizada) - {"H", "L"}:
        raise ValueError("la onda solo admite H o L")
    return normalizada


def onda_digital(seniales: str) -> str:
    """Draw a wave of H/L signals with '-', '_' and '|' at each change."""
    partes: list[str] = []
    anterior: str | None = None
    for senial in seniales:
        if senial != " ":
            if anterior is not None and anterior != "H" and senial == "H":
                partes.append("|-")
            elif anterior is not None and anterior != "L" and senial == "L":
                partes.append("|_")
            elif senial == "L":
                partes.append("_")
            elif senial == "H":
                partes.append("-")
        anterior = senial
    return "".join(partes)


def subconjuntos_que_suman(conjunto: Sequence[int], suma_deseada: int) -> list[list[int]]:
    """Subsets of the set whose elements add up to the wanted sum.

    Elements are tried included before excluded, and a subset that reaches the
    sum is not extended further.
    """
    elementos = tuple(conjunto)

    def buscar(inicio: int, elegidos: tuple[int, ...], suma: int) -> Iterator[list[int]]:
        if suma == suma_deseada and elegidos:
            yield list(elegidos)
            return
        if inicio == len(elementos):
            return
        primero = elementos[inicio]
        yield from buscar(inicio + 1, elegidos + (primero,), suma + primero)
        yield from buscar(inicio + 1, elegidos, suma)

    return list(buscar(0, (), 0))


def divisible_por_7(numero: int) -> bool:
    """Divisibility by 7 through repeatedly subtracting twice the last digit."""
    if numero < 70:
        return numero % 7 == 0
    return divisible_por_7(numero // 10 - (numero % 10) * 2)


def explosion(numero: int, bomba: int) -> list[int]:
    """Pieces of a number exploded by a bomb, in the order they are produced."""
    if numero > bomba and bomba < 2:
        raise ValueError("la bomba debe ser mayor a uno para explotar el numero")
    piezas: list[int] = []
    pendientes = [numero]
    while pendientes:
        actual = pendientes.pop()
        if actual <= bomba:
            piezas.append(actual)
            continue
        primera = actual // bomba
        pendientes.append(actual - primera)
        pendientes.append(primera)
    return piezas