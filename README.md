# redstone

A small roguelike for the terminal. You play a warrior who starts at the top
of a dungeon eight levels deep. Each level has its own theme, from the Church
Catacombs down to Diablo's Lair. Levels are made of rooms joined by
corridors. You see only what is within ten tiles and in your line of sight.
Tiles you have seen before stay on the map as dim `?` markers.

Monsters are undead, animals, demons, elementals and aberrations. Each kind
has its own abilities. Some monsters charge at you, some patrol, some run
away, and the smart ones retreat once they drop below half health. Only
monsters you can see move. Weapons, armour, potions and scrolls lie on the
floor, and defeated monsters sometimes drop more.

## Installation

```
pip install .
```

## Playing

```
redstone
```

To get the same dungeons every time, pass a seed:

```
redstone --seed 42
```

The game prints a title screen, then redraws the whole screen each turn with
ANSI colours. It reads one key press at a time from standard input. On a
POSIX terminal it switches the terminal to raw mode while it waits for a key,
so it is meant to be played interactively.

### Exploring

| Key                 | Action                    |
|---------------------|---------------------------|
| `w` / Up arrow      | move north                |
| `s` / Down arrow    | move south                |
| `a` / Left arrow    | move west                 |
| `d` / Right arrow   | move east                 |
| `g`                 | pick up the item here     |
| `i`                 | enter inventory mode      |
| `c`                 | show the character sheet  |
| `q`                 | quit                      |

In inventory mode, `i`, Enter or Space returns you to exploring.

Walking into a monster starts a fight. A visible monster that is next to you
when its turn comes also starts one. Stepping onto the stairs (`>`) takes you
down to the next level.

### Combat

| Key     | Action                              |
|---------|-------------------------------------|
| `1`–`9` | use the ability with that number    |
| `r`     | try to run away                     |

An ability costs mana and may have a cooldown. Agility sets the chance to hit
and the chance to get away. After each of your actions the monster strikes
back unless it died. When you win a fight you gain experience and gold. Every
level-up fully restores your health and mana. At levels 3, 6 and 9 you also
learn a new ability.

### Winning and losing

Clear every monster from the eighth and final level to win. If your health
drops to zero the game ends. Either way a final screen shows your level,
depth and gold.

## What the game does not do

- Inventory mode shows no list of items, and there are no keys to equip,
  unequip or use items. These exist only as methods on `Player`
  (`equip_item`, `unequip_item`, `use_item`).
- Persuading a monster (`attempt_to_persuade`) has no key either.
- The extra effects of abilities and items are only named. Buffs and debuffs
  write a message to the log. Poison, weapon damage and armour defence change
  nothing in a fight.
- There is no way to save or load a game, and no way to pick a class other
  than warrior from the command line.

## Using it as a library

The game logic is built from plain Python objects, so you can script it or
test it without a terminal:

```python
import random

from redstone.game import new_game

game = new_game(random.Random(42))
dungeon = game.current_dungeon().dungeon
dungeon.update_visibility(game.player.position.x, game.player.position.y)

game.handle_action("move", 0)   # north
game.finish_turn()              # monsters act, win and loss are checked
print(game.messages[-1])
```

The other modules can be used on their own. For example,
`redstone.dungeon.generate_dungeon`, `redstone.spawn.generate_monster` and
`redstone.consumables.generate_item` all take an optional `random.Random`.
The screens are built as strings by `redstone.render.render_game_screen` and
by the `render_*` functions in `redstone.menus`.

To run the tests:

```
pip install .[test]
pytest
```