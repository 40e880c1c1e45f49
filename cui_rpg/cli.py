"""Command-line entry point: the hero meets a big bear in the forest."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cui_rpg.battle import battle_event
from cui_rpg.brave import Brave
from cui_rpg.factory import DEFAULT_PATH, generate_big_bear


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one battle; return the process exit status."""
    parser = argparse.ArgumentParser(prog="cui-rpg", description="A small text role-playing battle.")
    parser.add_argument("--data", default=DEFAULT_PATH, help="CSV table of enemy statistics")
    args = parser.parse_args(argv)

    brave = Brave("しゅんすけ", 10, 5, 5, 5, 5)
    try:
        enemy = generate_big_bear(brave, args.data)
    except OSError:
        print("can't open file", file=sys.stderr)
        return 1

    battle_event(brave, enemy)
    return 0


if __name__ == "__main__":
    sys.exit(main())