# pokebatalla

A small engine for turn-based Pokémon battles between two trainers.
All messages it produces are in Spanish and use Discord-style markdown
and emoji codes, so they can be sent straight to a chat channel.

## What it models

- **Pokédex** (`pokebatalla.pokedex.Pokedex`): a shared catalogue of
  Pokémon (Pikachu, Charizard, Aurorus, Gyarados). When a trainer picks a
  Pokémon, the trainer gets a copy and the entry leaves the Pokédex.
- **Moves** (`pokebatalla.movimientos`): each Pokémon has its own moves
  with power, PP and type. The special moves `rayo`, `lanzallamas` and
  `hidropulso` set a status on a healthy target (paralysed, burned,
  asleep for two turns). After a special move the trainer must make two
  ordinary moves before another special one is allowed.
- **Damage** (`pokebatalla.logica_ataque.LogicaAtaque`): move power times
  the attacker's attack stat times type effectiveness
  (`pokebatalla.efectividad.get_efectividad`), divided by the defender's
  defence stat; special moves use the special stats. A roll below 10
  out of 101 doubles the damage as a critical hit.
- **Items** (`pokebatalla.items`): every trainer starts with a
  `SuperPocion` that heals 70 HP, up to the Pokémon's maximum, three
  times.
- **Turns** (`pokebatalla.batalla.Batalla`): a generator decides who
  starts; after that trainers alternate. Selecting a Pokémon and attacking
  pass the turn. A sleeping Pokémon, or a paralysed one whose roll is
  below 75 out of 101, loses its turn.

## Usage

`Facade` is the entry point. Every method returns a message string;
errors such as acting out of turn come back as messages rather than
exceptions, ready to be shown to the player.

```python
from pokebatalla.facade import Facade
from pokebatalla.generadores import GeneradorFijo

facade = Facade.get_instance()

print(facade.unir_batalla("Ash"))
print(facade.unir_batalla("Gary"))
print(facade.iniciar_batalla(GeneradorFijo()))   # Ash starts

print(facade.mostrar_pokedex())
print(facade.seleccionar_pokemon("Pikachu", "Ash"))
print(facade.seleccionar_pokemon("Charizard", "Gary"))

print(facade.desplegar_menu_ataque("Ash"))
print(facade.atacar("Ash", "Rayo"))

print(facade.menu_items("Gary"))
print(facade.usar_item("Gary", "SuperPocion"))
print(facade.mis_pokemon("Gary"))

# Start over with a fresh Pokédex and no trainers waiting.
Facade.reset_instance()
```

The battle in progress is available as `facade.batalla`.

### Generators

- `GeneradorAleatorio(seed=None)` returns a random integer in `[0, num)`.
- `GeneradorFijo()` always returns the upper bound it is given, so the
  first trainer to join starts, there are no critical hits and paralysis
  never stops an attack. Use it for repeatable battles.

Any subclass of `pokebatalla.generadores.Generador` implementing
`generar_num(num)` can be passed instead.

### Lower-level pieces

`Batalla`, `LogicaAtaque`, `Entrenador`, `Pokemon`, `Movimiento`,
`Pokedex` and `Menu` can be used on their own. `Batalla.es_turno_de`
and `Batalla.usar_item` raise `BatallaError` (a `ValueError`) when a
rule is broken; the other `Batalla` methods return the error text.

## What it does not do

- It has no chat bot, command line or other front end: it only builds
  the reply messages; sending them to players is up to the caller.
- Nothing is saved: the session and the Pokédex live in memory and are
  lost when the process ends or `Facade.reset_instance()` is called.
- Move accuracy is stored but never rolled, so attacks always hit.
  Burned and poisoned Pokémon take no damage over time.
- Attacks made through `Facade.atacar` do not lower the PP shown in the
  attack menu.

## Running the tests

Install the package with its `test` extra and run `pytest` from the
project directory.