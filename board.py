"""Draw the board and read moves like A1, B3"""

import re

from hexgraph import HexGraph, signs

COMMAND = re.compile(r"^([A-Za-z])(\d{1,2})$")


class BadCommand(ValueError):
    pass


def letter(col: int) -> str:
    return chr(ord("A") + col)


def name(row: int, col: int) -> str:
    """(2, 1) -> B3"""
    return f"{letter(col)}{row + 1}"


def parse(command: str, size: int) -> tuple[int, int]:
    """B3 -> (2, 1)"""
    command = command.strip()
    match = COMMAND.match(command)
    if not match:
        raise BadCommand(f"{command} is not a valid entry!")
    col = ord(match.group(1).upper()) - ord("A")
    row = int(match.group(2)) - 1
    if not (0 <= row < size and 0 <= col < size):
        raise BadCommand(
            f"{command} is not a valid entry! Entry must be within a size of {size}"
        )
    return row, col


def draw(graph: HexGraph) -> str:
    S = graph.size
    letters = "".join(f"{letter(c)}   " for c in range(S))
    lines = ["", "NORTH".rjust(2 * S + 4), "", "  " + letters, ""]
    for r in range(S):
        indent = " " * (2 * r if r < 9 else 2 * r - 1)
        cells = " - ".join(signs[graph.sign(graph.index(r, c))] for c in range(S))
        lines.append(f"{indent}{r + 1}  {cells}   {r + 1}")
        if r < S - 1:
            lines.append("  " + " " * (2 * r + 1) + " \\" + " / \\" * (S - 1))
    lines += ["", " " * (2 * S) + "  " + letters, "", "SOUTH".rjust(4 * S + 3)]
    return "\n".join(lines)
