import pytest

from tadlab.elemento import Elemento, EstructuraLlenaError, EstructuraVaciaError
from tadlab.pilas import Pila


def test_valor_por_defecto_es_none():
    elemento = Elemento(5)
    assert elemento.clave == 5
    assert elemento.valor is None


def test_valor_adjunto():
    datos = {"x": 1.5}
    elemento = Elemento(3, datos)
    assert elemento.valor is datos


def test_igualdad_por_clave_y_valor():
    assert Elemento(2, "a") == Elemento(2, "a")
    assert Elemento(2, "a") != Elemento(2, "b")
    assert Elemento(2) != Elemento(3)


def test_errores_se_distinguen():
    pila = Pila(capacidad=1)
    with pytest.raises(EstructuraVaciaError):
        pila.desapilar()
    pila.apilar(Elemento(1))
    with pytest.raises(EstructuraLlenaError):
        pila.apilar(Elemento(2))