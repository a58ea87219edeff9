"""Type effectiveness multipliers."""

from .enums import Tipo

EFECTIVIDAD = {
    (Tipo.FUEGO, Tipo.PLANTA): 2.0,
    (Tipo.FUEGO, Tipo.AGUA): 0.5,
    (Tipo.AGUA, Tipo.FUEGO): 2.0,
    (Tipo.PLANTA, Tipo.ROCA): 2.0,
}


def get_efectividad(atacante, defensor):
    """Return the damage multiplier of ``atacante`` type against ``defensor``."""
    return EFECTIVIDAD.get((atacante, defensor), 1.0)