"""Random completion of a board"""

import numpy as np

from connectivity import winner
from hexgraph import HexGraph, empty, opponent


def complete_random_game(
    graph: HexGraph,
    next_player: int,
    player: int,
    rng: np.random.Generator | None = None,
) -> int:
    """Fill every empty cell in random order, alternating turns from next_player.

    The graph is modified, pass a clone. The winner is only computed once the
    board is full: on a full board exactly one side is connected, so checking
    after every placement buys nothing.

    Returns the winner, seen from player's perspective first.
    """
    if rng is None:
        rng = np.random.default_rng()

    S = graph.size
    cells = np.where(graph.marks[: graph.V] == empty)[0]
    turn = next_player
    for index in rng.permutation(cells).tolist():
        graph.mark(index // S, index % S, turn)
        turn = opponent(turn)

    return winner(graph, player)
