"""Number generators used to drive the random parts of a battle."""

import random
from abc import ABC, abstractmethod


class Generador(ABC):
    """Source of integers in the range [0, num)."""

    @abstractmethod
    def generar_num(self, num):
        """Return a number derived from ``num``."""


class GeneradorAleatorio(Generador):
    """Generator returning a uniformly random integer in [0, num)."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def generar_num(self, num):
        if num <= 0:
            raise ValueError(f"el rango debe ser positivo: {num}")
        return self._rng.randrange(num)


class GeneradorFijo(Generador):
    """Deterministic generator that always returns its argument."""

    def generar_num(self, num):
        return num


class GeneradorContexto:
    """Holds a generator that can be swapped at run time."""

    def __init__(self, generador):
        self.generador = generador

    def cambiar_generador(self, nuevo):
        """Replace the current generator."""
        self.generador = nuevo

    def generar(self, num):
        """Delegate to the current generator."""
        return self.generador.generar_num(num)