"""Status ailments and the operations that apply them to a character."""

from __future__ import annotations

import enum
from typing import Protocol


class State(enum.Flag):
    """Ailments a battle character can suffer; several may hold at once."""

    NORMAL = 0
    POISON = 1 << 0
    PARALYSIS = 1 << 1
    SLEEP = 1 << 2


class _HasState(Protocol):
    state: State


def set_state(target: _HasState, abnormal: State) -> None:
    """Add the given ailment to the target's current state."""
    target.state = target.state | abnormal


def set_normal(target: _HasState) -> None:
    """Clear every ailment from the target."""
    target.state = State.NORMAL


def remove_state(target: _HasState, abnormal: State) -> None:
    """Remove the given ailment from the target, keeping the others."""
    target.state = target.state & ~abnormal


def is_state(target: _HasState, abnormal: State) -> bool:
    """Whether the target suffers every ailment in ``abnormal``."""
    return (target.state & abnormal) == abnormal


def is_normal(target: _HasState) -> bool:
    """Whether the target suffers no ailment at all."""
    return target.state == State.NORMAL