"""The shared catalogue of Pokémon available for selection."""

from .pokemon import aurorus, charizard, gyarados, pikachu


class Pokedex:
    """Process-wide catalogue of Pokémon that trainers can pick from."""

    _instance = None

    def __init__(self):
        self._pokemons = [pikachu(), charizard(), aurorus(), gyarados()]

    @classmethod
    def get_instance(cls):
        """Return the shared Pokédex, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Discard the shared Pokédex so the next access starts afresh."""
        cls._instance = None

    @property
    def pokemons(self):
        """A snapshot of the Pokémon currently in the catalogue."""
        return list(self._pokemons)

    def __len__(self):
        return len(self._pokemons)

    def __iter__(self):
        return iter(list(self._pokemons))

    def add_pokemon(self, pokemon):
        """Add a copy of ``pokemon`` to the catalogue."""
        self._pokemons.append(pokemon.copiar())

    def remove_pokemon(self, pokemon):
        """Remove the first Pokémon with the same name, if any."""
        for indice, candidato in enumerate(self._pokemons):
            if candidato.nombre == pokemon.nombre:
                del self._pokemons[indice]
                return

    def get_pokemon_by_name(self, nombre):
        """Return the catalogue's Pokémon called ``nombre``, or None."""
        return next((p for p in self._pokemons if p.nombre == nombre), None)