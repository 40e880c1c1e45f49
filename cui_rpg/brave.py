"""The player-controlled hero."""

from __future__ import annotations

from typing import Callable, Optional

from cui_rpg.character import BattleCharacter

MAX_LEVEL = 99


class Brave(BattleCharacter):
    """The hero: chooses actions from input and gains levels from experience."""

    def __init__(
        self,
        name: str,
        hp: int,
        mp: int,
        attack: int,
        defense: int,
        speed: int,
        reader: Optional[Callable[[str], str]] = None,
    ):
        super().__init__(name, hp, mp, attack, defense, speed)
        self.level = 1
        self.exp = 0
        self.level_to_exp = {2: 3, 3: 5, 4: 8, 5: 15}
        self._reader = reader if reader is not None else input

    def action(self, enemy: BattleCharacter) -> None:
        """Ask the player what to do and do it; unknown answers do nothing."""
        print("1：こうげき　2：ぼうぎょ　3：にげる")
        answer = self._reader(f"{self.name}はどうする？ > ")
        try:
            choice = int(answer.strip())
        except ValueError:
            choice = 0

        if choice == 1:
            self.attack(enemy)
        elif choice == 2:
            self.defend()
        elif choice == 3:
            self.escape()

    def is_level_up(self) -> bool:
        """Whether the experience reaches the next level.

        Raises KeyError when the next level has no threshold.
        """
        return self.exp >= self.level_to_exp[self.level + 1]

    def on_level_up(self, exp: int) -> None:
        """Gain experience and rise as many levels as it allows."""
        self.exp += exp
        before = self.level

        while self.level != MAX_LEVEL and self.is_level_up():
            self.level += 1

        gained = self.level - before
        if gained:
            print(f"{self.name}のレベルが {gained} あがった！")

    def game_over(self) -> str:
        """Announce the hero's death and return the announcement."""
        message = f"{self.name}はしんでしまった！"
        print(message)
        return message