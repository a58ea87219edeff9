"""Damage, critical hits and status effects of an attack."""

from .efectividad import get_efectividad
from .enums import Estado, estado_to_string
from .generadores import GeneradorContexto


class LogicaAtaque:
    """Resolves attacks between the active Pokémon of two trainers."""

    PROBABILIDAD_CRITICO = 10
    PROBABILIDAD_PARALISIS = 75

    def __init__(self, generador):
        self._generador = GeneradorContexto(generador)

    def aplicar_ataque(self, atacante, defensor, ataque):
        """Apply ``ataque`` from ``atacante`` to ``defensor``; return the log."""
        pokemon_ataque = atacante.pokemon_activo
        pokemon_defensa = defensor.pokemon_activo
        if pokemon_ataque is None or pokemon_defensa is None:
            raise RuntimeError("Error: Pokémon activo no válido.")

        danio = self._calcular_danio_base(pokemon_ataque, pokemon_defensa, ataque)
        mensaje = f"*{atacante.nombre}* ha usado **{ataque.nombre}**:exclamation:\n"

        if self._es_critico():
            mensaje += "**ATAQUE CRÍTICO**:100:\n"
            danio *= 2

        mensaje += (
            f"**{pokemon_defensa.nombre}** ha recibido {danio} "
            "puntos de daño:exclamation:\n"
        )
        mensaje += self._aplicar_efectos_estado(pokemon_defensa, ataque)
        pokemon_defensa.recibir_danio(danio)
        self._actualizar_contadores(atacante, ataque)

        if pokemon_defensa.debil:
            mensaje += f"**{pokemon_defensa.nombre}** se ha debilitado:rotating_light:\n"
        return mensaje

    def verificar_estado_pokemon(self, pokemon):
        """Return the condition that governs whether ``pokemon`` may act now.

        A sleeping Pokémon spends one of its sleep turns.
        """
        if pokemon.turnos_dormido != 0:
            pokemon.turnos_dormido -= 1
            return Estado.DORMIDO
        if pokemon.estado == Estado.PARALIZADO:
            if self._generador.generar(101) < self.PROBABILIDAD_PARALISIS:
                return Estado.PARALIZADO
        return Estado.NORMAL

    def _calcular_danio_base(self, atacante, defensor, ataque):
        if ataque.especial:
            ataque_val = atacante.valor_ataque_especial
            defensa_val = defensor.valor_defensa_especial
        else:
            ataque_val = atacante.valor_ataque
            defensa_val = defensor.valor_defensa
        if defensa_val == 0:
            raise RuntimeError("Error: Defensa del Pokémon defensor es 0.")
        efectividad = get_efectividad(atacante.tipo, defensor.tipo)
        return int(ataque.danio * ataque_val * efectividad / defensa_val)

    @staticmethod
    def _aplicar_efectos_estado(pokemon, ataque):
        if pokemon.estado == Estado.DORMIDO and pokemon.turnos_dormido == 0:
            pokemon.estado = Estado.NORMAL
        if pokemon.estado == Estado.NORMAL and ataque.especial:
            pokemon.estado = ataque.efecto
            if ataque.efecto == Estado.DORMIDO:
                pokemon.turnos_dormido = 2
            return (
                f"{pokemon.nombre} ha sido **{estado_to_string(ataque.efecto)}**"
                ":exclamation:\n"
            )
        return ""

    @staticmethod
    def _actualizar_contadores(entrenador, ataque):
        contador = entrenador.contador_especial
        if ataque.especial:
            entrenador.contador_especial = 2 if contador == 0 else contador
        else:
            entrenador.contador_especial = max(0, contador - 1)

    def _es_critico(self):
        return self._generador.generar(101) < self.PROBABILIDAD_CRITICO