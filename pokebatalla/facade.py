"""Single entry point that turns player commands into reply messages."""

import copy

from .batalla import Batalla
from .entrenador import Entrenador
from .menu import Menu
from .pokedex import Pokedex


class FacadeError(ValueError):
    """A command that cannot be carried out in the current state."""


class Facade:
    """Process-wide game session: waiting list, current battle and menus.

    Every command returns the text to show the player; failures are
    reported as that text rather than raised.
    """

    _instance = None

    def __init__(self):
        self._pokedex = Pokedex.get_instance()
        self._batalla = None
        self._lista_espera = []
        self._menu = Menu(self._pokedex)

    @classmethod
    def get_instance(cls):
        """Return the shared session, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Discard the session and the Pokédex, ready for a new battle."""
        Pokedex.reset_instance()
        cls._instance = None

    @property
    def batalla(self):
        """The battle in progress, or None."""
        return self._batalla

    def unir_batalla(self, nombre_entrenador):
        self._lista_espera.append(Entrenador(nombre_entrenador))
        return (
            f"**{nombre_entrenador}** está esperando para batallar "
            ":crossed_swords:\n"
        )

    def iniciar_batalla(self, generador):
        try:
            if len(self._lista_espera) < 2:
                raise FacadeError(
                    "Debe haber al menos dos entrenadores para "
                    "empezar una batalla:exclamation:"
                )
            primero, segundo = (
                copy.deepcopy(e) for e in self._lista_espera[:2]
            )
            self._batalla = Batalla(primero, segundo, generador)
            return self._batalla.iniciar_batalla()
        except (ValueError, RuntimeError) as error:
            return str(error)

    def mostrar_pokedex(self):
        try:
            if len(self._pokedex) == 0:
                raise FacadeError("La Pokedex está vacía:exclamation:")
            return self._menu.mostrar_pokedex()
        except (ValueError, RuntimeError) as error:
            return str(error)

    def seleccionar_pokemon(self, nombre_pokemon, nombre_entrenador):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            pokemon = self._pokedex.get_pokemon_by_name(nombre_pokemon)
            if pokemon is None:
                raise FacadeError("El pokemon no está disponible")
            return batalla.seleccionar_pokemon(entrenador, pokemon)
        except (ValueError, RuntimeError) as error:
            return str(error)

    def desplegar_menu_ataque(self, nombre_entrenador):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            self._tiene_pokemon_activo(entrenador)
            activo = entrenador.pokemon_activo
            if activo.debil:
                raise FacadeError(
                    f":prohibited: {activo.nombre} está debilitado :prohibited:"
                )
            batalla.es_turno_de(entrenador)
            return self._menu.menu_pokemon_ataque(entrenador)
        except (ValueError, RuntimeError) as error:
            return str(error)

    def atacar(self, nombre_entrenador, nombre_movimiento):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            self._tiene_pokemon_activo(entrenador)
            ataque = next(
                (
                    m
                    for m in entrenador.movimientos_pokemon_activo()
                    if m.nombre == nombre_movimiento
                ),
                None,
            )
            if ataque is None:
                raise FacadeError("Movimiento no encontrado!")
            # The battle works on a copy of the move; the team's move list
            # is left as it is.
            return batalla.atacar(entrenador, copy.copy(ataque))
        except (ValueError, RuntimeError) as error:
            return str(error)

    def cambiar_pokemon(self, nombre_pokemon, nombre_entrenador):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            self._tiene_pokemon_activo(entrenador)
            nuevo = entrenador.buscar_pokemon_por_nombre(nombre_pokemon)
            if nuevo is None:
                raise FacadeError(
                    "No tienes un pokemon con ese nombre:exclamation:\n"
                )
            return batalla.cambiar_pokemon_activo(entrenador, nuevo)
        except (ValueError, RuntimeError) as error:
            return str(error)

    def mis_pokemon(self, nombre_entrenador):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            self._existe_entrenador(entrenador)
            self._tiene_pokemon_activo(entrenador)
            return self._menu.listar_pokemons_entrenador(entrenador)
        except (ValueError, RuntimeError) as error:
            return str(error)

    def usar_item(self, nombre_entrenador, nombre_item):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            self._existe_entrenador(entrenador)
            self._tiene_pokemon_activo(entrenador)
            item = next(
                (i for i in entrenador.items if i.nombre == nombre_item), None
            )
            if item is None:
                raise FacadeError(f"No tienes el item {nombre_item}:exclamation:")
            batalla.usar_item(entrenador, item)
            return (
                f"**{nombre_entrenador}** ha usado *{nombre_item}* en "
                f"**{entrenador.pokemon_activo.nombre}**:exclamation:"
            )
        except (ValueError, RuntimeError) as error:
            return str(error)

    def menu_items(self, nombre_entrenador):
        try:
            batalla = self._batalla_en_curso()
            entrenador = batalla.obtener_entrenador_por_nombre(nombre_entrenador)
            self._existe_entrenador(entrenador)
            return self._menu.menu_items(entrenador)
        except (ValueError, RuntimeError) as error:
            return str(error)

    def _batalla_en_curso(self):
        if self._batalla is None:
            raise FacadeError(
                ":prohibited:**No hay batalla en curso**:prohibited:"
            )
        return self._batalla

    @staticmethod
    def _existe_entrenador(entrenador):
        if entrenador is None:
            raise FacadeError("ERROR: No se encontró el entrenador!\n")

    @staticmethod
    def _tiene_pokemon_activo(entrenador):
        if entrenador.pokemon_activo is None:
            raise FacadeError(
                f"No tienes ningún pokemon activo, {entrenador.nombre}:exclamation:"
            )