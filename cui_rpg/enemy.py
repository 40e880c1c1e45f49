"""Computer-controlled opponents."""

from __future__ import annotations

from cui_rpg.character import BattleCharacter
from cui_rpg.randomness import generate


class Enemy(BattleCharacter):
    """An opponent that picks its actions at random and yields experience."""

    def __init__(
        self,
        brave: BattleCharacter,
        name: str,
        hp: int,
        mp: int,
        attack: int,
        defense: int,
        speed: int,
        exp: int,
    ):
        super().__init__(name, hp, mp, attack, defense, speed)
        self.brave_ref = brave
        self.exp = exp

    def action(self, brave: BattleCharacter, n: int = 0) -> None:
        """Act by choice ``n`` (1 attack, 2 defend, 3 escape); 0 picks at random."""
        if n == 0:
            n = generate(1, 3)

        if n == 2:
            self.defend()
        elif n == 3:
            self.escape()
        else:
            self.attack(brave)

    def encount(self) -> str:
        """Announce the enemy's appearance and return the announcement."""
        message = f"{self.name}があらわれた！"
        print(message)
        return message

    def die_print(self) -> list[str]:
        """Announce the enemy's defeat and the experience gained; return the lines."""
        lines = [
            f"{self.name}をたおした！",
            f"{self.exp} のけいけんちをかくとく！",
        ]
        for line in lines:
            print(line)
        return lines


class BigBear(Enemy):
    """A bear that sometimes just flails its arms instead of acting."""

    def action(self, brave: BattleCharacter, n: int = 0) -> None:
        """Act by choice ``n`` (1 to 3 as Enemy, 4 flail); 0 picks at random.

        Attacks always land on the hero the bear was created against.
        """
        if n == 0:
            n = generate(1, 4)
        if n < 4:
            super().action(self.brave_ref, n)
        else:
            print(f"{self.name}はうでをふりまわした！")