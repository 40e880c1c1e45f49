"""Characters that take part in a battle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cui_rpg.state import State, is_state

POISON_DAMAGE = 4


@dataclass
class Status:
    """A character's abilities."""

    hp: int
    mp: int
    attack: int
    defense: int
    speed: int


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


class BattleCharacter(ABC):
    """A fighter with starting and in-battle status, ailments and stances."""

    def __init__(self, name: str, hp: int, mp: int, attack: int, defense: int, speed: int):
        self.name = name
        self.state = State.NORMAL
        self.init_status = Status(hp, mp, attack, defense, speed)
        self.battle_status = Status(hp, mp, attack, defense, speed)
        self.defending = False
        self.escaped = False

    @property
    def hp(self) -> int:
        """Current hit points in battle."""
        return self.battle_status.hp

    @hp.setter
    def hp(self, value: int) -> None:
        self.battle_status.hp = max(value, 0)

    @property
    def is_dead(self) -> bool:
        return self.battle_status.hp == 0

    def attack(self, receiver: BattleCharacter) -> None:
        """Strike ``receiver`` and report the damage dealt."""
        print(f"{self.name}のこうげき！")
        damage = self.calc_attack_damage(receiver)
        receiver.hp = receiver.hp - damage
        print(f"{receiver.name}に {damage} ダメージ")

    def calc_attack_damage(self, receiver: BattleCharacter) -> int:
        """Damage an attack on ``receiver`` would deal."""
        damage = self.battle_status.attack - _half(receiver.battle_status.defense)
        return _half(damage) if receiver.defending else damage

    def turn(self, other: BattleCharacter) -> bool:
        """Play one turn against ``other``; False once the battle should stop."""
        if self.is_dead:
            return False

        self.defending = False
        self.escaped = False

        if is_state(self, State.PARALYSIS) or is_state(self, State.SLEEP):
            print("こうどうふのう")
        else:
            self.action(other)

        if is_state(self, State.POISON):
            self.poison_damage()

        return not self.is_dead and not self.escaped

    @abstractmethod
    def action(self, other: BattleCharacter) -> None:
        """Choose and perform this turn's action."""

    def poison_damage(self) -> None:
        """Take the fixed damage that poison deals each turn."""
        print(f"{self.name}はどくで {POISON_DAMAGE} ダメージをうけた！")
        self.hp = self.hp - POISON_DAMAGE

    def defend(self) -> None:
        """Take a defensive stance until the next turn."""
        print(f"{self.name}はぼうぎょのかまえをとっている。")
        self.defending = True

    def escape(self) -> None:
        """Run away from the battle."""
        print(f"{self.name}はにげだした！")
        self.escaped = True

    def is_faster(self, other: BattleCharacter) -> bool:
        """Whether this character acts before ``other``; ties favour this one."""
        return self.battle_status.speed >= other.battle_status.speed