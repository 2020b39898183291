"Quick hack to look at the win stats of the Monte Carlo player against random moves"

import argparse
import time

import numpy as np

from connectivity import winner
from hexgraph import HexGraph, opponent, player1, player2
from montecarlo import SIMULATIONS, MonteCarlo
from table import Table


def random_move(graph: HexGraph, rng: np.random.Generator) -> tuple[int, int]:
    cells = graph.empty_cells()
    return cells[rng.integers(len(cells))]


def play_game(
    ai: MonteCarlo, size: int, ai_player: int, rng: np.random.Generator
) -> tuple[int, int, int]:
    """One game, returns the winner, the number of moves and the AI playouts"""
    graph = HexGraph(size)
    playouts = 0
    turn = player1
    while True:
        if turn == ai_player:
            ai.play(graph, turn)
            playouts += ai.playouts
        else:
            graph.mark(*random_move(graph, rng), turn)
        won = winner(graph, turn)
        if won:
            return won, graph.moves, playouts
        turn = opponent(turn)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Evaluate Monte Carlo win stats against a random player",
    )
    parser.add_argument("size", type=int)
    parser.add_argument("games", type=int)
    parser.add_argument("--simulations", type=int, default=SIMULATIONS)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)

    print(args)

    ai = MonteCarlo(args.simulations, workers=args.workers, seed=args.seed)
    rng = np.random.default_rng(args.seed)

    T = Table(["Game", "AI", "Winner", "Moves", "Seconds"], ["d", "d", "d", "d", "6.2f"])
    wins = 0
    playouts = 0
    tstart = time.time()
    for game in range(args.games):
        # alternate who starts
        ai_player = player1 if game % 2 == 0 else player2
        t0 = time.time()
        won, moves, n = play_game(ai, args.size, ai_player, rng)
        t1 = time.time()
        wins += won == ai_player
        playouts += n
        if args.verbose:
            T.print(game, ai_player, won, moves, t1 - t0)
    tend = time.time()

    elapsed = tend - tstart
    print(f"rate = {100 * wins / args.games:.1f}%")
    print(f"{args.games / elapsed:.2f} games/second")
    print(f"{playouts / elapsed:.1f} playouts/second")
    return wins


if __name__ == "__main__":
    main()
