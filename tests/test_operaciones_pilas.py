import random

import pytest

from tadlab.pilas import Pila
from tadlab.operaciones_pilas import (
    cambiar_base,
    cantidad_elementos,
    colocar_elemento,
    duplicar_contenido,
    eliminar_clave,
    existe_clave,
    intercambiar_posiciones,
    pila_aleatoria,
    pilas_iguales,
)


def _desde_abajo(pila):
    return list(reversed(pila.claves()))


def test_pila_aleatoria_en_rango_y_longitud():
    pila = pila_aleatoria(20, 9, random.Random(3))
    assert len(pila) == 20
    assert all(0 <= k <= 9 for k in pila.claves())


def test_pila_aleatoria_reproducible_con_semilla():
    a = pila_aleatoria(10, 100, random.Random(7))
    b = pila_aleatoria(10, 100, random.Random(7))
    assert a.claves() == b.claves()


def test_existe_clave_sin_perder_la_pila():
    pila = Pila([4, 8, 15])
    assert existe_clave(pila, 8) is True
    assert existe_clave(pila, 16) is False
    assert pila.claves() == [15, 8, 4]


@pytest.mark.parametrize("posicion", [1, 2, 3])
def test_colocar_elemento_en_posicion_desde_abajo(posicion):
    original = [1, 2, 3]
    pila = Pila(original)
    resultado = colocar_elemento(pila, posicion, 9)
    assert resultado is pila
    abajo = _desde_abajo(pila)
    assert len(abajo) == 4
    assert abajo[posicion - 1] == 9
    del abajo[posicion - 1]
    assert abajo == original


def test_colocar_elemento_fuera_de_rango_no_cambia():
    pila = Pila([1, 2, 3])
    colocar_elemento(pila, 4, 9)
    assert _desde_abajo(pila) == [1, 2, 3]


def test_colocar_elemento_posicion_invalida():
    with pytest.raises(ValueError):
        colocar_elemento(Pila([1]), 0, 5)


def test_eliminar_clave_quita_primera_desde_el_tope():
    pila = Pila([5, 1, 5, 2])
    eliminar_clave(pila, 5)
    assert pila.claves().count(5) == 1
    assert _desde_abajo(pila)[0] == 5
    assert len(pila) == 3


def test_eliminar_clave_ausente_no_cambia():
    pila = Pila([1, 2, 3])
    eliminar_clave(pila, 7)
    assert pila.claves() == [3, 2, 1]


def test_intercambiar_posiciones():
    pila = Pila([10, 20, 30, 40])
    intercambiar_posiciones(pila, 2, 4)
    abajo = _desde_abajo(pila)
    assert abajo[1] == 40
    assert abajo[3] == 20
    assert abajo[0] == 10 and abajo[2] == 30


def test_intercambiar_dos_veces_vuelve_al_original():
    pila = Pila([3, 1, 4, 1, 5])
    intercambiar_posiciones(pila, 4, 1)
    intercambiar_posiciones(pila, 1, 4)
    assert _desde_abajo(pila) == [3, 1, 4, 1, 5]


@pytest.mark.parametrize("p1,p2", [(0, 2), (2, 2), (1, 5), (-1, 1)])
def test_intercambiar_posiciones_invalidas(p1, p2):
    with pytest.raises(ValueError):
        intercambiar_posiciones(Pila([1, 2, 3]), p1, p2)


def test_duplicar_contenido():
    pila = Pila([1, 2, 3])
    doble = duplicar_contenido(pila)
    assert len(doble) == 2 * len(pila)
    assert doble.claves() == [k for k in pila.claves() for _ in range(2)]
    assert pila.claves() == [3, 2, 1]


def test_duplicar_pila_vacia():
    assert duplicar_contenido(Pila()).es_vacia()


def test_cantidad_elementos_no_destruye():
    pila = Pila([7, 7, 7, 7])
    assert cantidad_elementos(pila) == 4
    assert len(pila) == 4
    assert cantidad_elementos(Pila()) == 0


def test_pilas_iguales():
    a = Pila([1, 2, 3])
    b = Pila([1, 2, 3])
    assert pilas_iguales(a, b) is True
    assert a.claves() == [3, 2, 1]
    assert b.claves() == [3, 2, 1]


def test_pilas_distintas():
    assert pilas_iguales(Pila([1, 2, 3]), Pila([1, 3, 2])) is False
    assert pilas_iguales(Pila([1, 2]), Pila([1, 2, 3])) is False


def test_cambiar_base_valores_fijos():
    assert cambiar_base(255, 16) == "FF"
    assert cambiar_base(10, 2) == "1010"
    assert cambiar_base(0, 2) == "0"


@pytest.mark.parametrize("base", range(2, 17))
@pytest.mark.parametrize("numero", [1, 7, 100, 255, 4096, 123456])
def test_cambiar_base_ida_y_vuelta(numero, base):
    assert int(cambiar_base(numero, base), base) == numero


@pytest.mark.parametrize("base", [1, 17, 0])
def test_cambiar_base_fuera_de_rango_devuelve_decimal(base):
    assert cambiar_base(42, base) == str(42)


def test_cambiar_base_negativo():
    with pytest.raises(ValueError):
        cambiar_base(-5, 2)