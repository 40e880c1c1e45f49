"""A single encounter between the hero and an enemy."""

from __future__ import annotations

from cui_rpg.brave import Brave
from cui_rpg.enemy import Enemy


def battle_event(brave: Brave, enemy: Enemy) -> None:
    """Fight the battle and settle its outcome."""
    battle_loop(brave, enemy)
    after_battle(brave, enemy)


def battle_loop(brave: Brave, enemy: Enemy) -> None:
    """Alternate turns, faster side first, until one falls or escapes."""
    enemy.encount()

    while not brave.is_dead and not enemy.is_dead:
        if brave.is_faster(enemy):
            order = ((brave, enemy), (enemy, brave))
        else:
            order = ((enemy, brave), (brave, enemy))
        for actor, target in order:
            if not actor.turn(target):
                return


def after_battle(brave: Brave, enemy: Enemy) -> None:
    """Report defeat, nothing after an escape, or victory with experience."""
    if brave.is_dead:
        brave.game_over()
    elif brave.escaped or enemy.escaped:
        pass
    else:
        enemy.die_print()
        brave.on_level_up(enemy.exp)