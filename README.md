# cui-rpg

A tiny turn-based role-playing battle played in the terminal. The hero,
しゅんすけ, meets the big bear (おおぐま) in the forest. On each of its turns
the hero attacks, defends or runs away. The bear attacks, guards, flees,
or just flails its arms around.

## Installing

```
pip install .
```

## Playing

```
cui-rpg
```

The bear's statistics are read from a CSV file, `test.csv` in the current
directory by default. Use another file with `--data`:

```
cui-rpg --data enemies.csv
```

Each line holds a name followed by six integers:

```
name,hp,mp,attack,defense,speed,exp
```

For example:

```
おおぐま,12,0,6,4,3,5
```

The first line whose name is `おおぐま` is used. If the file cannot be
opened, the command prints `can't open file` to standard error and exits
with status 1. If the file has no line for the bear,
`cui_rpg.factory.EnemyNotFoundError` is raised. If that line has fewer than
six numbers, `ValueError` is raised.

During the hero's turn, enter a number:

- `1`: attack (こうげき)
- `2`: defend (ぼうぎょ). Damage taken is halved until the hero's next turn.
- `3`: run away (にげる)

Any other answer does nothing for that turn.

The side with the higher speed acts first. On equal speed the hero acts
first. Damage is the attacker's attack minus half the defender's defence,
halved again if the defender is defending. HP never drops below 0.

The battle ends when one side reaches 0 HP or runs away. If the bear is
beaten, its experience goes to the hero. The hero levels up at 3, 5, 8 and
15 total experience, reaching levels 2, 3, 4 and 5.

## Using the pieces

The battle can be driven from code as well:

```python
from cui_rpg.brave import Brave
from cui_rpg.factory import generate_big_bear
from cui_rpg.battle import battle_event

hero = Brave("しゅんすけ", 10, 5, 5, 5, 5)
bear = generate_big_bear(hero, "test.csv")
battle_event(hero, bear)
```

`Brave` takes an optional `reader` argument. It is called with the prompt
and returns the player's answer, and it replaces `input`.

The battle itself is made of several functions:

- `cui_rpg.battle.battle_loop` plays the turns.
- `cui_rpg.battle.after_battle` reports a defeat or a victory, and reports
  nothing after an escape.
- `battle_event` runs `battle_loop` and then `after_battle`.

`Enemy.action(brave, n)` and `BigBear.action(brave, n)` choose their action
with `n`:

- `1`: attack
- `2`: defend
- `3`: escape
- `4`: flail its arms, for `BigBear` only

When `n` is 0, the choice is made at random with
`cui_rpg.randomness.generate`.

`cui_rpg.factory.get_enemy_data(name, path)` reads any enemy's row into an
`EnemyData`.

Status ailments are bit flags on `cui_rpg.state.State`: `POISON`,
`PARALYSIS` and `SLEEP`. Use `set_state`, `remove_state`, `is_state`,
`set_normal` and `is_normal` to change or check them. A poisoned character
loses 4 HP at the end of each of its turns. A paralysed or sleeping
character cannot act (こうどうふのう).

`cui_rpg.coordinate.render_coordinates` turns `(row, column)` points into a
text picture drawn with `*` characters, up to 74 columns wide. The points
must be given in drawing order. A point on an earlier row, or in a column
outside 0 to 73, raises `ValueError`. `print_coordinates` writes the picture
to standard output.

## What it does not do

There is one fixed battle and nothing more. There is no map or
exploration, no enemy other than the big bear, no saving, and no growth in
the hero's statistics on levelling up. Experience thresholds are defined up
to level 5 only. Experience that would carry the hero past level 5 raises
`KeyError`.

## Running the tests

```
pip install .[test]
pytest
```