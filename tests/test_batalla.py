import pytest

from pokebatalla.batalla import Batalla
from pokebatalla.entrenador import Entrenador
from pokebatalla.enums import Estado
from pokebatalla.generadores import Generador, GeneradorFijo
from pokebatalla.movimientos import lanzallamas, placaje, rayo
from pokebatalla.pokedex import Pokedex
from pokebatalla.pokemon import charizard, pikachu


class _GeneradorCero(Generador):
    def generar_num(self, num):
        return 0


@pytest.fixture
def partes():
    Pokedex.reset_instance()
    ash = Entrenador("Ash")
    gary = Entrenador("Gary")
    pika = pikachu()
    chari = charizard()
    batalla = Batalla(ash, gary, GeneradorFijo())
    ash.agregar_pokemon(pika)
    gary.agregar_pokemon(chari)
    return batalla, ash, gary, pika, chari


@pytest.fixture
def activos(partes):
    batalla, ash, gary, pika, chari = partes
    ash.pokemon_activo = pika
    gary.pokemon_activo = chari
    return partes


def test_iniciar_batalla(partes):
    batalla, ash, gary, _, _ = partes
    resultado = batalla.iniciar_batalla()
    assert "ha empezado la batalla!" in resultado
    assert "Es turno de **Ash**" in resultado
    assert batalla.entrenador_actual is ash


def test_iniciar_batalla_generador_cero_empieza_segundo():
    Pokedex.reset_instance()
    ash, gary = Entrenador("Ash"), Entrenador("Gary")
    batalla = Batalla(ash, gary, _GeneradorCero())
    resultado = batalla.iniciar_batalla()
    assert "Es turno de **Gary**" in resultado
    with pytest.raises(ValueError, match="No es tu turno, Ash!"):
        batalla.es_turno_de(ash)


def test_atacar_exitoso(activos):
    batalla, ash, _, _, _ = activos
    ataque = rayo()
    resultado = batalla.atacar(ash, ataque)
    assert "Rayo" in resultado
    assert ataque.current_pp == ataque.pp - 1
    assert batalla.entrenador_actual.nombre == "Gary"
    assert batalla.contador_turno == 1


def test_movimiento_no_presente(activos):
    batalla, ash, _, _, _ = activos
    resultado = batalla.atacar(ash, lanzallamas())
    assert "no está presente" in resultado


def test_atacar_fuera_de_turno(activos):
    batalla, _, gary, _, _ = activos
    assert batalla.atacar(gary, lanzallamas()) == "No es tu turno, Gary!"


def test_seleccionar_pokemon(partes):
    batalla, ash, _, _, _ = partes
    pokedex = Pokedex.get_instance()
    resultado = batalla.seleccionar_pokemon(ash, pokedex.get_pokemon_by_name("Pikachu"))
    assert "ha seleccionado a **Pikachu**" in resultado
    assert ash.pokemon_activo.nombre == "Pikachu"
    assert pokedex.get_pokemon_by_name("Pikachu") is None
    assert batalla.entrenador_actual.nombre == "Gary"


def test_seleccionar_pokemon_fuera_de_turno(partes):
    batalla, _, gary, _, _ = partes
    pokedex = Pokedex.get_instance()
    resultado = batalla.seleccionar_pokemon(gary, pokedex.get_pokemon_by_name("Pikachu"))
    assert resultado == "No es tu turno, Gary!"
    assert pokedex.get_pokemon_by_name("Pikachu") is not None
    assert gary.pokemon_activo.nombre == "Charizard" if gary.pokemon_activo else True


def test_verificar_estado_pokemon_dormido(activos):
    batalla, ash, _, pika, _ = activos
    pika.turnos_dormido = 2
    resultado = batalla.atacar(ash, rayo())
    assert "Dormido** y no puede atacar" in resultado
    assert pika.turnos_dormido == 1
    assert batalla.atacar(ash, rayo()) == "No es tu turno, Ash!"


def test_ataque_aplica_efecto(activos):
    batalla, ash, _, _, chari = activos
    batalla.atacar(ash, rayo())
    assert chari.estado == Estado.PARALIZADO
    assert chari.hp < chari.hp_max


def test_especial_requiere_espera(activos):
    batalla, ash, gary, pika, _ = activos
    batalla.atacar(ash, rayo())
    resultado_gary = batalla.atacar(gary, placaje())
    assert "Placaje" in resultado_gary
    assert pika.hp < pika.hp_max
    resultado = batalla.atacar(ash, rayo())
    assert "Debes esperar **2** turnos" in resultado


def test_movimiento_agotado(activos):
    batalla, ash, _, _, _ = activos
    ataque = rayo()
    ataque.current_pp = 0
    assert batalla.atacar(ash, ataque) == "**Rayo** está agotado:exclamation:"


def test_defensor_debilitado(activos):
    batalla, ash, _, _, chari = activos
    chari.debil = True
    resultado = batalla.atacar(ash, rayo())
    assert resultado == ":prohibited: Charizard está debilitado :prohibited:"


def test_sin_pokemon_activo(partes):
    batalla, ash, _, _, _ = partes
    assert batalla.atacar(ash, rayo()) == "No tienes ningún pokemon activo, Ash!"


def test_fin_de_batalla(activos):
    batalla, ash, _, _, chari = activos
    chari.hp = 1
    resultado = batalla.atacar(ash, rayo())
    assert "**Charizard** se ha debilitado" in resultado
    assert "**Ash ha ganado la batalla**:tada:\n" in resultado
    assert chari.debil


def test_cambiar_pokemon_exitoso(partes):
    batalla, ash, _, pika, chari = partes
    ash.agregar_pokemon(chari)
    ash.pokemon_activo = pika
    resultado = batalla.cambiar_pokemon_activo(ash, chari)
    assert ash.pokemon_activo.nombre == "Charizard"
    assert "ha llamado a **Charizard**" in resultado


def test_cambiar_al_mismo_pokemon(activos):
    batalla, ash, _, pika, _ = activos
    resultado = batalla.cambiar_pokemon_activo(ash, pika)
    assert resultado == ":prohibited:**Pikachu** ya es tu pokemon activo:prohibited:"


def test_obtener_entrenador_por_nombre(partes):
    batalla, ash, gary, _, _ = partes
    assert batalla.obtener_entrenador_por_nombre("Ash") is ash
    assert batalla.obtener_entrenador_por_nombre("Gary") is gary
    assert batalla.obtener_entrenador_por_nombre("Misty") is gary


def test_usar_item_cura(activos):
    batalla, ash, gary, _, chari = activos
    batalla.atacar(ash, rayo())
    hp_antes = chari.hp
    item = gary.items[0]
    usos_antes = item.usos
    batalla.usar_item(gary, item)
    assert chari.hp > hp_antes
    assert chari.hp <= chari.hp_max
    assert item.usos == usos_antes - 1


def test_usar_item_fuera_de_turno(activos):
    batalla, _, gary, _, _ = activos
    with pytest.raises(ValueError, match="No es tu turno, Gary!"):
        batalla.usar_item(gary, gary.items[0])


def test_usar_item_agotado(activos):
    batalla, ash, _, _, _ = activos
    item = ash.items[0]
    item.usos = 0
    with pytest.raises(ValueError, match="Se te terminó la piola, muchacho."):
        batalla.usar_item(ash, item)