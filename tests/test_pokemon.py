import pytest

from pokebatalla.enums import Estado, Tipo
from pokebatalla.pokemon import aurorus, charizard, gyarados, pikachu


def test_pikachu():
    pok = pikachu()
    assert pok.nombre == "Pikachu"
    assert pok.tipo is Tipo.ELECTRICO
    assert pok.hp_max == 180
    assert pok.hp == pok.hp_max
    assert [m.nombre for m in pok.movimientos] == ["Rayo", "Bola Voltio"]


def test_gyarados_movimientos():
    pok = gyarados()
    assert pok.tipo is Tipo.VOLADOR
    assert [m.nombre for m in pok.movimientos] == ["Rayo", "Hidropulso", "Placaje"]


def test_aurorus_y_charizard():
    assert [m.nombre for m in aurorus().movimientos] == ["Rayo Gelido", "Placaje"]
    assert [m.nombre for m in charizard().movimientos] == ["Lanzallamas", "Placaje"]


@pytest.mark.parametrize("fabrica", [pikachu, charizard, aurorus, gyarados])
def test_estado_inicial(fabrica):
    pok = fabrica()
    assert pok.estado is Estado.NORMAL
    assert not pok.debil
    assert pok.turnos_dormido == 0
    assert pok.hp == pok.hp_max


def test_recibir_danio_parcial():
    pok = charizard()
    pok.recibir_danio(50)
    assert pok.hp + 50 == pok.hp_max
    assert not pok.debil


def test_recibir_danio_letal_no_baja_de_cero():
    pok = pikachu()
    pok.recibir_danio(pok.hp_max + 100)
    assert pok.hp == 0
    assert pok.debil


def test_recibir_danio_exacto_debilita():
    pok = aurorus()
    pok.recibir_danio(pok.hp_max)
    assert pok.hp == 0
    assert pok.debil


def test_copiar_independiente():
    original = pikachu()
    copia = original.copiar()
    assert copia == original
    copia.movimientos[0].current_pp -= 1
    copia.recibir_danio(10)
    assert original.movimientos[0].current_pp == original.movimientos[0].pp
    assert original.hp == original.hp_max