"""Trainers: their team, active Pokémon and inventory."""

from dataclasses import dataclass, field

from .items import SuperPocion


@dataclass(eq=False)
class Entrenador:
    """A trainer taking part in a battle."""

    nombre: str
    pokemons: list = field(default_factory=list)
    pokemon_activo: object = None
    contador_especial: int = 0
    items: list = field(default_factory=lambda: [SuperPocion()])

    def puede_usar_especial(self):
        """Whether a special move may be used this turn."""
        return self.contador_especial == 0

    def todos_pokemon_debiles(self):
        """Whether every Pokémon in the team has fainted."""
        return all(p.debil for p in self.pokemons)

    def agregar_item(self, item):
        self.items.append(item)

    def remover_item(self, item):
        """Remove this exact item object from the inventory."""
        self.items = [i for i in self.items if i is not item]

    def agregar_pokemon(self, pokemon):
        self.pokemons.append(pokemon)

    def remover_pokemon(self, pokemon):
        """Remove the team members with the same name as ``pokemon``."""
        self.pokemons = [p for p in self.pokemons if p.nombre != pokemon.nombre]

    def movimientos_pokemon_activo(self):
        """The move list of the active Pokémon."""
        if self.pokemon_activo is None:
            raise ValueError(f"{self.nombre} no tiene pokemon activo")
        return self.pokemon_activo.movimientos

    def buscar_pokemon_por_nombre(self, nombre):
        """Return the team member called ``nombre``, or None."""
        return next((p for p in self.pokemons if p.nombre == nombre), None)

    def movimiento_esta_presente(self, movimiento):
        """Whether the active Pokémon knows a move with that name."""
        return any(
            m.nombre == movimiento.nombre
            for m in self.movimientos_pokemon_activo()
        )