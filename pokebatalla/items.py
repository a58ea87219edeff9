"""Items a trainer can use on their active Pokémon."""

from abc import ABC, abstractmethod


class Item(ABC):
    """An item with a limited number of uses."""

    def __init__(self, nombre, descripcion, usos_max):
        self.nombre = nombre
        self.descripcion = descripcion
        self.usos_max = usos_max
        self.usos = usos_max

    @abstractmethod
    def usar(self, pokemon):
        """Apply the item to ``pokemon``, consuming one use."""


class SuperPocion(Item):
    """Restores 70 HP, up to the Pokémon's maximum."""

    CURACION = 70

    def __init__(self):
        super().__init__("SuperPocion", "Restaura 70 HP y marcha joya", 3)

    def usar(self, pokemon):
        if self.usos <= 0:
            raise ValueError("Se te terminó la piola, muchacho.")
        pokemon.hp = min(pokemon.hp + self.CURACION, pokemon.hp_max)
        self.usos -= 1