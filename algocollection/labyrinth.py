"""Shortest path through a grid labyrinth from cell A to cell B."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence

_STEPS = {(1, 0): "D", (0, 1): "R", (-1, 0): "U", (0, -1): "L"}


def parse_grid(text: str) -> list[str]:
    """Read ``n m`` followed by ``n * m`` cell characters into ``n`` rows.

    Whitespace between cells is ignored; anything after the grid is too.
    """
    parts = text.split(maxsplit=2)
    if len(parts) < 2:
        raise ValueError("missing grid dimensions")
    try:
        rows, columns = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError("grid dimensions must be integers") from None
    if rows < 1 or columns < 1:
        raise ValueError("grid dimensions must be positive")
    cells = "".join(parts[2].split()) if len(parts) == 3 else ""
    if len(cells) < rows * columns:
        raise ValueError(f"expected {rows * columns} cells, found {len(cells)}")
    return [cells[r * columns : (r + 1) * columns] for r in range(rows)]


def solve_labyrinth(grid: Sequence[str]) -> str | None:
    """Moves (``U D L R``) of a shortest walk from ``A`` to ``B`` over ``.`` cells.

    Returns None when ``B`` cannot be reached.
    """
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows differ in length")

    start = end = None
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "A":
                start = (r, c)
            elif cell == "B":
                end = (r, c)
    if start is None:
        raise ValueError("grid has no start cell 'A'")
    if end is None:
        raise ValueError("grid has no target cell 'B'")

    parent: dict[tuple[int, int], tuple[int, int]] = {}
    visited = {start}
    queue = deque([start])
    target = None
    while queue and target is None:
        r, c = queue.popleft()
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(rows) and 0 <= nc < width):
                continue
            cell = rows[nr][nc]
            if cell == "." and (nr, nc) not in visited:
                visited.add((nr, nc))
                parent[(nr, nc)] = (r, c)
                queue.append((nr, nc))
            elif cell == "B":
                parent[(nr, nc)] = (r, c)
                target = (nr, nc)
                break
    if target is None:
        return None

    moves = []
    cell = target
    while cell != start:
        previous = parent[cell]
        moves.append(_STEPS[(cell[0] - previous[0], cell[1] - previous[1])])
        cell = previous
    return "".join(reversed(moves))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a labyrinth and print whether B can be reached, and how."""
    parser = argparse.ArgumentParser(description="Find a shortest path from A to B.")
    parser.add_argument("input", nargs="?", help="file holding the labyrinth (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    try:
        path = solve_labyrinth(parse_grid(text))
    except ValueError as exc:
        parser.error(str(exc))
    if path is None:
        print("NO")
    else:
        print("YES")
        print(len(path))
        print(path)
    return 0