import pytest

from tadlab.elemento import Elemento, EstructuraLlenaError
from tadlab.listas import Lista


def test_agregar_conserva_orden():
    lista = Lista([4, 8, 1])
    assert lista.claves() == [4, 8, 1]
    assert len(lista) == 3
    assert not lista.es_vacia()


def test_lista_nueva_vacia():
    lista = Lista()
    assert lista.es_vacia()
    assert len(lista) == 0


def test_capacidad_por_defecto_100():
    lista = Lista(range(100))
    assert lista.es_llena()
    with pytest.raises(EstructuraLlenaError):
        lista.agregar(1)


def test_capacidad_propia():
    lista = Lista([1, 2], capacidad=2)
    assert lista.es_llena()
    with pytest.raises(EstructuraLlenaError):
        lista.insertar(Elemento(9), 1)


def test_borrar_todas_las_ocurrencias():
    lista = Lista([5, 1, 5, 5, 2])
    assert lista.borrar(5) is True
    assert lista.claves() == [1, 2]
    assert lista.borrar(5) is False


def test_borrar_en_lista_vacia():
    assert Lista().borrar(1) is False


def test_buscar_devuelve_el_primero():
    primero = Elemento(7, "a")
    lista = Lista([Elemento(1), primero, Elemento(7, "b")])
    assert lista.buscar(7) is primero
    assert lista.buscar(99) is None


def test_insertar_en_posicion():
    lista = Lista([1, 2, 3])
    assert lista.insertar(Elemento(9), 1) is True
    assert lista.claves() == [9, 1, 2, 3]
    assert lista.insertar(Elemento(8), 3) is True
    assert lista.claves() == [9, 1, 8, 2, 3]


def test_insertar_mas_alla_agrega_al_final():
    lista = Lista([1, 2])
    assert lista.insertar(Elemento(5), 10) is False
    assert lista.claves() == [1, 2, 5]


def test_insertar_posicion_invalida():
    with pytest.raises(IndexError):
        Lista([1]).insertar(Elemento(2), 0)


def test_eliminar_por_posicion():
    lista = Lista([1, 2, 3])
    assert lista.eliminar(2) is True
    assert lista.claves() == [1, 3]
    assert lista.eliminar(5) is False
    assert lista.eliminar(0) is False
    assert lista.claves() == [1, 3]


def test_recuperar():
    lista = Lista([10, 20])
    assert lista.recuperar(2).clave == 20
    assert lista.recuperar(3) is None


def test_iteracion_y_texto():
    lista = Lista([3, 6])
    assert [e.clave for e in lista] == [3, 6]
    assert str(lista) == "Contenido de la lista: 3 6"