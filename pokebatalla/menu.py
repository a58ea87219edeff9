"""Text menus shown to the players during a battle."""

from .enums import estado_to_string, tipo_to_string
from .pokedex import Pokedex


class Menu:
    """Builds the messages that list Pokémon, moves and items."""

    def __init__(self, pokedex=None):
        self._pokedex = pokedex if pokedex is not None else Pokedex.get_instance()

    def mostrar_pokedex(self):
        """One line per Pokémon in the Pokédex, with max HP and type."""
        return "".join(
            f"- **{pokemon.nombre}** | :heart: {pokemon.hp_max} **HP Max**| "
            f":label: **{tipo_to_string(pokemon.tipo)}**\n"
            for pokemon in self._pokedex
        )

    def listar_pokemons_entrenador(self, entrenador):
        """Numbered list of the trainer's team with HP and status."""
        lineas = []
        for numero, pokemon in enumerate(entrenador.pokemons, start=1):
            if pokemon.debil:
                lineas.append(
                    f"{numero}. {pokemon.nombre}: **Debilitado :anger:**\n"
                )
            else:
                lineas.append(
                    f"{numero}. **{pokemon.nombre}**: "
                    f"[{pokemon.hp}/{pokemon.hp_max}] | "
                    f"{estado_to_string(pokemon.estado)}\n"
                )
        return "".join(lineas)

    def menu_pokemon_ataque(self, entrenador):
        """The active Pokémon's condition followed by its numbered moves."""
        activo = entrenador.pokemon_activo
        if activo is None:
            raise ValueError(
                f"No tienes ningún pokemon activo, {entrenador.nombre}:exclamation:"
            )
        lineas = [
            f":smirk_cat: **{activo.nombre}**: :heart: "
            f"[{activo.hp}/{activo.hp_max}] HP | "
            f"**{estado_to_string(activo.estado)}**\n"
        ]
        for numero, movimiento in enumerate(activo.movimientos, start=1):
            tipo = tipo_to_string(movimiento.tipo)
            usos = f"[{movimiento.current_pp}/{movimiento.pp}]"
            if movimiento.especial:
                lineas.append(
                    f"{numero}. **{movimiento.nombre}** :sparkles: | "
                    f":label: **{tipo}** | :boomerang: {usos}\n"
                )
            else:
                lineas.append(
                    f"{numero}. {movimiento.nombre} | "
                    f":label: **{tipo}** | :boomerang: {usos}\n"
                )
        return "".join(lineas)

    def menu_items(self, entrenador):
        """The trainer's inventory with remaining uses."""
        lineas = [f"**Inventario de {entrenador.nombre}**:\n"]
        lineas.extend(
            f"- :test_tube: **{item.nombre}**: {item.descripcion} "
            f"[{item.usos}/{item.usos_max}]\n"
            for item in entrenador.items
        )
        return "".join(lineas)