"""A crane that moves boxes between stacks following a command string."""

from __future__ import annotations

from collections.abc import Iterable


def run_crane(heights: Iterable[int], max_height: int, commands: str) -> list[int]:
    """Return the stack heights after the crane runs ``commands``.

    The crane starts over the first stack, empty-handed. Commands:
    ``1`` move left, ``2`` move right, ``3`` pick up a box, ``4`` drop the
    box held, ``0`` stop. Moves off either end, picking from an empty stack,
    picking while holding, dropping on a full stack or dropping with nothing
    held are ignored, as is any other character.
    """
    stacks = list(heights)
    if not stacks:
        raise ValueError("at least one stack is needed")
    position = 0
    holding = False
    for command in commands:
        if command == "0":
            break
        if command == "1":
            if position >= 1:
                position -= 1
        elif command == "2":
            if position < len(stacks) - 1:
                position += 1
        elif command == "3":
            if not holding and stacks[position] > 0:
                stacks[position] -= 1
                holding = True
        elif command == "4":
            if holding and stacks[position] < max_height:
                stacks[position] += 1
                holding = False
    return stacks