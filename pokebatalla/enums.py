"""Status conditions and elemental types, with their display names."""

from enum import Enum, auto


class Estado(Enum):
    """Status condition of a Pokémon."""

    NORMAL = auto()
    ENVENENADO = auto()
    QUEMADO = auto()
    DORMIDO = auto()
    PARALIZADO = auto()


class Tipo(Enum):
    """Elemental type of a Pokémon or a move."""

    FUEGO = auto()
    PLANTA = auto()
    AGUA = auto()
    PSIQUICO = auto()
    ELECTRICO = auto()
    BICHO = auto()
    HADA = auto()
    VENENO = auto()
    NORMAL = auto()
    ROCA = auto()
    TIERRA = auto()
    HIELO = auto()
    SINIESTRO = auto()
    FANTASMA = auto()
    LUCHA = auto()
    DRAGON = auto()
    ACERO = auto()
    VOLADOR = auto()


_NOMBRES_TIPO = {
    Tipo.FUEGO: "Fuego",
    Tipo.PLANTA: "Planta",
    Tipo.AGUA: "Agua",
    Tipo.PSIQUICO: "Psiquo",
    Tipo.ELECTRICO: "Electrico",
    Tipo.BICHO: "Bicho",
    Tipo.HADA: "Hada",
    Tipo.VENENO: "Veneno",
    Tipo.NORMAL: "Normal",
    Tipo.ROCA: "Roca",
    Tipo.TIERRA: "Tierra",
    Tipo.HIELO: "Hilo",
    Tipo.SINIESTRO: "Sinistro",
    Tipo.FANTASMA: "Fantasma",
    Tipo.LUCHA: "Lucha",
    Tipo.DRAGON: "Dragon",
    Tipo.ACERO: "Acero",
    Tipo.VOLADOR: "Volador",
}

_NOMBRES_ESTADO = {
    Estado.NORMAL: ":white_check_mark:Normal",
    Estado.DORMIDO: ":zzz:Dormido",
    Estado.QUEMADO: ":fire:Quemado",
    Estado.ENVENENADO: ":test_tube:Envenado",
    Estado.PARALIZADO: ":link:Paralizado",
}


def tipo_to_string(tipo):
    """Return the display name of a type."""
    return _NOMBRES_TIPO.get(tipo, "Desconocido")


def estado_to_string(estado):
    """Return the display name (with emoji code) of a status condition."""
    return _NOMBRES_ESTADO.get(estado, "Desconocido")