"""Polynomials stored as coefficients, lowest degree first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .elemento import Elemento


@dataclass(frozen=True)
class ResultadoFuncion:
    """Value of the polynomial at one point."""

    x: float
    resultado: float


def _coeficientes(coeficientes: Iterable[Elemento | int]) -> list[int]:
    return [c.clave if isinstance(c, Elemento) else int(c) for c in coeficientes]


def formar_polinomio(coeficientes: Iterable[Elemento | int]) -> str:
    """Text of the polynomial, highest degree first.

    A positive term is preceded by " + " unless it is the last coefficient;
    a negative one always by " - ". Zero coefficients are left out.
    """
    valores = _coeficientes(coeficientes)
    terminos: list[str] = []
    for indice, coeficiente in enumerate(valores):
        if coeficiente == 0:
            continue
        if coeficiente < 0:
            signo = " - "
        else:
            signo = "" if indice == len(valores) - 1 else " + "
        if indice > 1:
            potencia = f"x^{indice}"
        elif indice == 1:
            potencia = "x"
        else:
            potencia = ""
        terminos.append(f"{signo}{abs(coeficiente)}{potencia}")
    return "".join(reversed(terminos))


def calcular_polinomio(coeficientes: Iterable[Elemento | int], x: float) -> float:
    """Value of the polynomial at x."""
    return float(sum(c * x**i for i, c in enumerate(_coeficientes(coeficientes))))


def calcular_intervalo(
    coeficientes: Iterable[Elemento | int], x1: float, x2: float, espaciado: float
) -> list[ResultadoFuncion]:
    """Values of the polynomial from x1 towards x2 in steps of espaciado.

    A positive step walks up while x <= x2, a negative one down while x >= x2;
    a zero step yields nothing.
    """
    valores = _coeficientes(coeficientes)
    resultados: list[ResultadoFuncion] = []
    actual = float(x1)
    while (espaciado > 0 and actual <= x2) or (espaciado < 0 and actual >= x2):
        resultados.append(ResultadoFuncion(actual, calcular_polinomio(valores, actual)))
        actual += espaciado
    return resultados