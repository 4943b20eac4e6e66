"""A single clerk serving three queues in turns of a fixed time."""

from __future__ import annotations

from dataclasses import dataclass

from .colas import Cola


@dataclass(frozen=True)
class Atencion:
    """A served client: its number within its queue and the queue number."""

    cliente: int
    cola: int

    def __str__(self) -> str:
        return f"Cliente {self.cliente} Cola {self.cola}"


def atender_clientes(
    cola1: Cola, cola2: Cola, cola3: Cola, tiempo_atencion: int
) -> list[Atencion]:
    """Order in which clients are served, visiting queues 1, 2, 3 in turns.

    Each key is the time a client needs. In every turn the clerk spends up to
    ``tiempo_atencion`` on a queue, finishing clients while the time lasts and
    leaving the rest of a started client for the next turn. The queues are kept.
    """
    if tiempo_atencion < 1:
        raise ValueError("el tiempo de atencion debe ser mayor o igual a 1")

    pendientes = [cola.claves() for cola in (cola1, cola2, cola3)]
    atendidos = [0, 0, 0]
    resultado: list[Atencion] = []

    while any(pendientes):
        for numero, tiempos in enumerate(pendientes):
            disponible = tiempo_atencion
            while disponible > 0 and tiempos:
                if disponible >= tiempos[0]:
                    disponible -= tiempos.pop(0)
                    atendidos[numero] += 1
                    resultado.append(Atencion(atendidos[numero], numero + 1))
                else:
                    tiempos[0] -= disponible
                    disponible = 0
    return resultado