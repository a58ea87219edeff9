"""Turn-based battle between two trainers."""

from .enums import Estado, estado_to_string
from .generadores import GeneradorContexto
from .logica_ataque import LogicaAtaque
from .pokedex import Pokedex


class BatallaError(ValueError):
    """A battle action that the rules do not allow."""


class Batalla:
    """A battle between two trainers that take turns."""

    def __init__(self, entrenador_1, entrenador_2, generador):
        self.entrenador_1 = entrenador_1
        self.entrenador_2 = entrenador_2
        self.entrenador_actual = entrenador_1
        self.contador_turno = 0
        self._pokedex = Pokedex.get_instance()
        self._generador = GeneradorContexto(generador)
        self._logica = LogicaAtaque(generador)

    def iniciar_batalla(self):
        """Pick who starts and return the announcement."""
        if self._generador.generar(2) == 0:
            self.entrenador_actual = self.entrenador_2
        else:
            self.entrenador_actual = self.entrenador_1
        return (
            f"Atención **{self.entrenador_1.nombre}** y "
            f"**{self.entrenador_2.nombre}**, ha empezado la batalla! :trumpet: "
            f"\nEs turno de **{self.entrenador_actual.nombre}**"
        )

    def atacar(self, atacante, ataque):
        """Make ``atacante`` use ``ataque``; return the battle log or the reason it failed."""
        try:
            self.es_turno_de(atacante)
            defensor = self._obtener_defensor(atacante)

            self._verificar_pokemon_activo(atacante)
            self._verificar_pokemon_activo(defensor)
            self._verificar_condiciones_ataque(atacante, ataque)
            self._verificar_estado_pokemon(atacante.pokemon_activo)

            mensaje = self._logica.aplicar_ataque(atacante, defensor, ataque)
            if self._fin_batalla():
                mensaje += f"**{atacante.nombre} ha ganado la batalla**:tada:\n"

            ataque.current_pp = ataque.pp - 1
            self._siguiente_turno()
            return mensaje
        except (ValueError, RuntimeError) as error:
            return str(error)

    def seleccionar_pokemon(self, entrenador, pokemon):
        """Take a copy of ``pokemon`` from the Pokédex into the trainer's team."""
        try:
            copia = pokemon.copiar()
            self.es_turno_de(entrenador)
            entrenador.agregar_pokemon(copia)
            self._pokedex.remove_pokemon(pokemon)
            entrenador.pokemon_activo = copia
            self._siguiente_turno()
            return (
                f"**{entrenador.nombre}** ha seleccionado a **{copia.nombre}** "
                "para su equipo :inbox_tray:\n"
            )
        except ValueError as error:
            return str(error)

    def obtener_entrenador_por_nombre(self, nombre):
        """Return the first trainer if the name matches, otherwise the second."""
        if nombre == self.entrenador_1.nombre:
            return self.entrenador_1
        return self.entrenador_2

    def es_turno_de(self, entrenador):
        """Raise BatallaError unless it is ``entrenador``'s turn."""
        if entrenador.nombre != self.entrenador_actual.nombre:
            raise BatallaError(f"No es tu turno, {entrenador.nombre}!")

    def cambiar_pokemon_activo(self, entrenador, pokemon):
        """Make ``pokemon`` the trainer's active Pokémon; return the announcement."""
        try:
            activo = entrenador.pokemon_activo
            if activo is not None and pokemon.nombre == activo.nombre:
                raise BatallaError(
                    f":prohibited:**{pokemon.nombre}** ya es tu pokemon activo"
                    ":prohibited:"
                )
            self.es_turno_de(entrenador)
            entrenador.pokemon_activo = pokemon
            return (
                f"**{entrenador.nombre}** ha llamado a **{pokemon.nombre}** "
                "a la batalla:exclamation:\n"
            )
        except ValueError as error:
            return str(error)

    def usar_item(self, entrenador, item):
        """Use ``item`` on the trainer's active Pokémon; raises if not allowed."""
        self.es_turno_de(entrenador)
        item.usar(entrenador.pokemon_activo)

    def _fin_batalla(self):
        return (
            self.entrenador_1.todos_pokemon_debiles()
            or self.entrenador_2.todos_pokemon_debiles()
        )

    def _siguiente_turno(self):
        self.contador_turno += 1
        if self.entrenador_actual.nombre == self.entrenador_1.nombre:
            self.entrenador_actual = self.entrenador_2
        else:
            self.entrenador_actual = self.entrenador_1

    def _obtener_defensor(self, atacante):
        if atacante.nombre == self.entrenador_1.nombre:
            return self.entrenador_2
        return self.entrenador_1

    @staticmethod
    def _verificar_pokemon_activo(entrenador):
        activo = entrenador.pokemon_activo
        if activo is None:
            raise BatallaError(
                f"No tienes ningún pokemon activo, {entrenador.nombre}!"
            )
        if activo.debil:
            raise BatallaError(
                f":prohibited: {activo.nombre} está debilitado :prohibited:"
            )

    @staticmethod
    def _verificar_condiciones_ataque(atacante, ataque):
        if not atacante.movimiento_esta_presente(ataque):
            raise BatallaError(
                "El movimiento no está presente en tu pokemon activo!\n"
            )
        if ataque.especial and atacante.contador_especial != 0:
            raise BatallaError(
                f":prohibited: Debes esperar **{atacante.contador_especial}** "
                "turnos más para usar un ataque especial :prohibited:"
            )
        if ataque.current_pp == 0:
            raise BatallaError(f"**{ataque.nombre}** está agotado:exclamation:")

    def _verificar_estado_pokemon(self, pokemon):
        estado = self._logica.verificar_estado_pokemon(pokemon)
        if estado in (Estado.DORMIDO, Estado.PARALIZADO):
            self._siguiente_turno()
            raise BatallaError(
                f"{pokemon.nombre} está **{estado_to_string(estado)}** "
                "y no puede atacar :prohibited:\n"
            )