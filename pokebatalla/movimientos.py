"""Moves and the catalogue of known moves."""

from dataclasses import dataclass, field

from .enums import Estado, Tipo


@dataclass
class Movimiento:
    """A move with its power, uses and optional status effect."""

    nombre: str
    tipo: Tipo
    danio: float
    pp: int
    precision: float
    especial: bool = False
    efecto: Estado = Estado.NORMAL
    current_pp: int = field(default=None)

    def __post_init__(self):
        if self.current_pp is None:
            self.current_pp = self.pp


def hidropulso():
    """Special water move that puts the target to sleep."""
    return Movimiento(
        "Hidropulso", Tipo.AGUA, danio=65, pp=4, precision=90,
        especial=True, efecto=Estado.DORMIDO,
    )


def bola_voltio():
    """Electric physical move."""
    return Movimiento("Bola Voltio", Tipo.ELECTRICO, danio=75, pp=4, precision=90)


def placaje_electrico():
    """Electric physical move."""
    return Movimiento(
        "Placaje Electrico", Tipo.ELECTRICO, danio=90, pp=2, precision=75
    )


def rayo():
    """Special electric move that paralyses the target."""
    return Movimiento(
        "Rayo", Tipo.ELECTRICO, danio=90, pp=2, precision=75,
        especial=True, efecto=Estado.PARALIZADO,
    )


def lanzallamas():
    """Special fire move that burns the target."""
    return Movimiento(
        "Lanzallamas", Tipo.FUEGO, danio=85, pp=3, precision=95,
        especial=True, efecto=Estado.QUEMADO,
    )


def rayo_gelido():
    """Ice physical move."""
    return Movimiento("Rayo Gelido", Tipo.HIELO, danio=100, pp=2, precision=80)


def placaje():
    """Normal physical move."""
    return Movimiento("Placaje", Tipo.NORMAL, danio=50, pp=8, precision=90)