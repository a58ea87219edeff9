"""Pokémon and the built-in species."""

import copy
from dataclasses import dataclass, field

from .enums import Estado, Tipo
from .movimientos import (
    bola_voltio,
    hidropulso,
    lanzallamas,
    placaje,
    rayo,
    rayo_gelido,
)


@dataclass
class Pokemon:
    """A Pokémon with its stats, moves and battle condition."""

    nombre: str
    tipo: Tipo
    hp_max: int
    valor_ataque: int
    valor_defensa: int
    valor_ataque_especial: int
    valor_defensa_especial: int
    movimientos: list = field(default_factory=list)
    hp: int = field(default=None)
    debil: bool = False
    turnos_dormido: int = 0
    estado: Estado = Estado.NORMAL

    def __post_init__(self):
        if self.hp is None:
            self.hp = self.hp_max

    def recibir_danio(self, danio):
        """Lose ``danio`` HP, never below zero; at zero the Pokémon faints."""
        self.hp = max(self.hp - danio, 0)
        if self.hp == 0:
            self.debil = True

    def copiar(self):
        """Return an independent copy, moves included."""
        return copy.deepcopy(self)


def pikachu():
    return Pokemon(
        "Pikachu", Tipo.ELECTRICO, hp_max=180,
        valor_ataque=56, valor_defensa=50,
        valor_ataque_especial=60, valor_defensa_especial=53,
        movimientos=[rayo(), bola_voltio()],
    )


def charizard():
    return Pokemon(
        "Charizard", Tipo.FUEGO, hp_max=197,
        valor_ataque=61, valor_defensa=50,
        valor_ataque_especial=68, valor_defensa_especial=54,
        movimientos=[lanzallamas(), placaje()],
    )


def aurorus():
    return Pokemon(
        "Aurorus", Tipo.HIELO, hp_max=201,
        valor_ataque=53, valor_defensa=62,
        valor_ataque_especial=58, valor_defensa_especial=63,
        movimientos=[rayo_gelido(), placaje()],
    )


def gyarados():
    return Pokemon(
        "Gyarados", Tipo.VOLADOR, hp_max=190,
        valor_ataque=60, valor_defensa=60,
        valor_ataque_especial=64, valor_defensa_especial=64,
        movimientos=[rayo(), hidropulso(), placaje()],
    )