from cui_rpg.battle import after_battle, battle_event, battle_loop
from cui_rpg.brave import Brave
from cui_rpg.enemy import Enemy


class ScriptedEnemy(Enemy):
    def __init__(self, *args, choice=1, log=None):
        super().__init__(*args)
        self.choice = choice
        self.log = log if log is not None else []

    def action(self, brave, n=0):
        self.log.append("enemy")
        super().action(brave, self.choice)


def make_brave(answer="1", speed=5, hp=10, log=None):
    def reader(prompt):
        if log is not None:
            log.append("brave")
        return answer

    return Brave("hero", hp, 5, 5, 5, speed, reader=reader)


def test_brave_wins_and_gains_exp(capsys):
    brave = make_brave("1")
    enemy = ScriptedEnemy(brave, "bear", 4, 0, 1, 0, 1, 3, choice=2)
    battle_event(brave, enemy)
    out = capsys.readouterr().out
    assert enemy.is_dead
    assert "bearがあらわれた！" in out
    assert "bearをたおした！" in out
    assert brave.exp == 3
    assert brave.level == 2


def test_brave_escape_gives_nothing(capsys):
    brave = make_brave("3")
    enemy = ScriptedEnemy(brave, "bear", 40, 0, 1, 0, 1, 3, choice=2)
    battle_event(brave, enemy)
    out = capsys.readouterr().out
    assert brave.escaped
    assert brave.exp == 0
    assert "たおした" not in out


def test_enemy_escape_gives_nothing():
    brave = make_brave("2")
    enemy = ScriptedEnemy(brave, "bear", 40, 0, 1, 0, 1, 3, choice=3)
    battle_event(brave, enemy)
    assert enemy.escaped
    assert brave.exp == 0


def test_brave_dies(capsys):
    brave = make_brave("2", hp=1, speed=1)
    enemy = ScriptedEnemy(brave, "bear", 40, 0, 50, 0, 9, 3, choice=1)
    battle_event(brave, enemy)
    assert brave.is_dead
    assert "heroはしんでしまった！" in capsys.readouterr().out


def test_faster_brave_acts_first():
    log = []
    brave = make_brave("3", speed=9, log=log)
    enemy = ScriptedEnemy(brave, "bear", 40, 0, 1, 0, 1, 3, choice=2, log=log)
    battle_loop(brave, enemy)
    assert log == ["brave"]


def test_faster_enemy_acts_first():
    log = []
    brave = make_brave("3", speed=1, log=log)
    enemy = ScriptedEnemy(brave, "bear", 40, 0, 1, 0, 9, 3, choice=2, log=log)
    battle_loop(brave, enemy)
    assert log == ["enemy", "brave"]


def test_after_battle_victory_only_when_nobody_left():
    brave = make_brave()
    enemy = ScriptedEnemy(brave, "bear", 0, 0, 1, 0, 1, 5)
    after_battle(brave, enemy)
    assert brave.exp == 5