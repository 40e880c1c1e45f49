"""Draw a set of grid coordinates as asterisks on the terminal."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

MAX_COLUMN = 74


def render_coordinates(coordinates: Iterable[Sequence[int]]) -> str:
    """Render ``(row, column)`` points, given in drawing order, as text.

    Each point is an asterisk; rows are separated by newlines and the
    result ends with one. Raises ValueError for points that can never be
    drawn: a row above the current one, or a column outside the line.
    """
    pending = deque((point[0], point[1]) for point in coordinates)
    parts: list[str] = []
    row = 0

    while pending:
        point_row, _ = pending[0]
        if point_row < row:
            raise ValueError(f"point {pending[0]} comes after row {row}")
        if point_row != row:
            parts.append("\n")
            row += 1
            continue

        drawn = len(pending)
        for column in range(MAX_COLUMN):
            if not pending:
                break
            if pending[0][1] == column:
                parts.append("*")
                pending.popleft()
            else:
                parts.append(" ")
        if len(pending) == drawn:
            raise ValueError(f"column of point {pending[0]} is outside 0..{MAX_COLUMN - 1}")

    parts.append("\n")
    return "".join(parts)


def print_coordinates(coordinates: Iterable[Sequence[int]]) -> None:
    """Print the rendering of ``coordinates``."""
    print(render_coordinates(coordinates), end="")