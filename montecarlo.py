"""Choose a move by estimating the win rate of every empty cell with random playouts

For each candidate the board is cloned, the candidate played, and the rest of
the board filled at random many times. The cell whose playouts are won most
often is chosen. A candidate is dropped as soon as it can no longer beat the
best rate seen, even if all of its remaining playouts were wins.
"""

import time
from concurrent.futures import ProcessPoolExecutor

import numpy as np

from connectivity import winner
from hexgraph import HexGraph, opponent
from playout import complete_random_game
from table import Table

SIMULATIONS = 1000
TIEBREAKS = ("random", "first")

Cell = tuple[int, int]


def expired(stop: float | None) -> bool:
    return stop is not None and time.time() >= stop


def simulate(
    graph: HexGraph,
    player: int,
    cell: Cell,
    best: float,
    simulations: int = SIMULATIONS,
    rng=None,
    stop: float | None = None,
) -> tuple[int, int]:
    """Play cell for player then run up to simulations playouts.

    :param best: The best win rate known, used to stop early.
    :param rng: A numpy Generator, SeedSequence or seed.
    :param stop: Absolute time.time() after which no playout is started.
    :return: wins and playouts run.
    """
    rng = np.random.default_rng(rng)
    board = graph.clone()
    board.mark(*cell, player)
    # a move that decides the game needs no playouts
    decided = winner(board, player)
    other = opponent(player)
    limit = best * simulations

    wins = 0
    runs = 0
    while runs < simulations:
        if simulations - runs + wins <= limit or expired(stop):
            break
        if decided:
            result = decided
        else:
            result = complete_random_game(board.clone(), other, player, rng)
        if result == player:
            wins += 1
        runs += 1
    return wins, runs


def evaluate(
    graph: HexGraph,
    player: int,
    cell: Cell,
    best: float = -1.0,
    simulations: int = SIMULATIONS,
    rng=None,
    stop: float | None = None,
) -> float:
    """Estimated win rate of cell, an underestimate when pruned"""
    wins, _ = simulate(graph, player, cell, best, simulations, rng, stop)
    return wins / simulations


class MonteCarlo:
    """Monte Carlo move selection

    :param simulations: Playouts per candidate.
    :param workers: Processes evaluating candidates, 1 runs in process.
    :param seed: Makes every search reproducible, None seeds from the OS.
    :param tiebreak: "random" shuffles the candidates so equal rates are
        broken at random, "first" keeps row major order.
    :param verbose: Print the candidate rates.
    """

    def __init__(
        self,
        simulations: int = SIMULATIONS,
        workers: int = 1,
        seed: int | None = None,
        tiebreak: str = "random",
        verbose: bool = False,
    ):
        if simulations < 1:
            raise ValueError(f"simulations must be at least 1, got {simulations}")
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if tiebreak not in TIEBREAKS:
            raise ValueError(f"tiebreak must be one of {TIEBREAKS}, got {tiebreak!r}")
        self.simulations = simulations
        self.workers = workers
        self.seed = seed
        self.tiebreak = tiebreak
        self.verbose = verbose
        self.last: list[tuple[Cell, float]] = []
        self.playouts = 0

    def log(self, *args, **kwargs):
        if self.verbose:
            print(*args, **kwargs)

    def candidates(self, graph: HexGraph, seeds: np.random.SeedSequence):
        cells = graph.empty_cells()
        if self.tiebreak == "random":
            rng = np.random.default_rng(seeds)
            cells = [cells[i] for i in rng.permutation(len(cells))]
        return cells

    def best_move(
        self, graph: HexGraph, player: int, deadline: float | None = None
    ) -> Cell:
        """The empty cell with the highest estimated win rate for player

        :param deadline: Seconds allowed, the best cell so far is returned
            when they run out.
        """
        seeds = np.random.SeedSequence(self.seed)
        cells = self.candidates(graph, seeds)
        if not cells:
            raise ValueError("no empty cells to play")
        streams = seeds.spawn(len(cells))
        stop = None if deadline is None else time.time() + deadline

        t0 = time.time()
        self.last = []
        self.playouts = 0
        if self.workers > 1:
            results = self._parallel(graph, player, cells, streams, stop)
        else:
            results = self._sequential(graph, player, cells, streams, stop)

        best = -1.0
        move = cells[0]
        for cell, wins, runs in results:
            rate = wins / self.simulations
            self.last.append((cell, rate))
            self.playouts += runs
            if rate > best:
                best = rate
                move = cell
        t1 = time.time()

        if self.verbose:
            T = Table(["Cell", "Rate", "Playouts"], ["s", "5.3f", "d"])
            for (cell, rate), (_, _, runs) in zip(self.last, results):
                T.print(str(cell), rate, runs)
            self.log(
                f"chose {move} rate {best:.3f} after {self.playouts} playouts "
                f"in {t1 - t0:.2f}s"
            )
            if len(self.last) < len(cells):
                self.log(f"out of time after {len(self.last)} of {len(cells)} cells")
        return move

    def _sequential(self, graph, player, cells, streams, stop):
        best = -1.0
        results = []
        for cell, stream in zip(cells, streams):
            if expired(stop):
                break
            wins, runs = simulate(
                graph, player, cell, best, self.simulations, stream, stop
            )
            results.append((cell, wins, runs))
            best = max(best, wins / self.simulations)
        return results

    def _parallel(self, graph, player, cells, streams, stop):
        """Evaluate batches of candidates in worker processes.

        A batch is pruned against the best rate known when it was submitted.
        That bound can only be lower than the sequential one, and a candidate
        pruned by it can not beat the best, so the move chosen is the same.
        """
        best = -1.0
        results = []
        pending = list(zip(cells, streams))
        with ProcessPoolExecutor(max_workers=self.workers) as pool:
            for start in range(0, len(pending), self.workers):
                if expired(stop):
                    break
                batch = pending[start : start + self.workers]
                futures = [
                    pool.submit(
                        simulate,
                        graph,
                        player,
                        cell,
                        best,
                        self.simulations,
                        stream,
                        stop,
                    )
                    for cell, stream in batch
                ]
                for (cell, _), future in zip(batch, futures):
                    wins, runs = future.result()
                    results.append((cell, wins, runs))
                    best = max(best, wins / self.simulations)
        return results

    def play(self, graph: HexGraph, player: int, deadline: float | None = None) -> Cell:
        """Choose a move and make it"""
        move = self.best_move(graph, player, deadline)
        graph.mark(*move, player)
        return move


def best_move(
    graph: HexGraph,
    player: int,
    simulations: int = SIMULATIONS,
    seed: int | None = None,
    **kwargs,
) -> Cell:
    return MonteCarlo(simulations, seed=seed, **kwargs).best_move(graph, player)
