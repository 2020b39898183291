"""Play Hex against the Monte Carlo AI in the terminal"""

import argparse

from board import BadCommand, draw, name, parse
from connectivity import winner
from hexgraph import HexGraph, opponent, player1, player2
from montecarlo import SIMULATIONS, TIEBREAKS, MonteCarlo

QUIT = ("-1", "q", "quit")


class Game:
    def __init__(
        self,
        size: int,
        ai: MonteCarlo,
        human: int = player1,
        deadline: float | None = None,
        input=input,
        output=print,
    ):
        self.size = size
        self.graph = HexGraph(size)
        self.ai = ai
        self.human = human
        self.computer = opponent(human)
        self.deadline = deadline
        self.input = input
        self.output = output
        self.moves = {player1: 0, player2: 0}

    def ask(self) -> tuple[int, int] | None:
        """Read a move from the human, None to quit"""
        while True:
            try:
                command = self.input(
                    "Human, where would you like to place your move? (i.e. A1, B2, etc.): "
                )
            except EOFError:
                return None
            command = command.strip()
            if command.lower() in QUIT:
                return None
            try:
                row, col = parse(command, self.size)
            except BadCommand as e:
                self.output(e)
                continue
            if not self.graph.is_empty(row, col):
                self.output(f"{command} is already occupied. Choose another entry.")
                continue
            return row, col

    def run(self) -> int:
        """Play until someone wins, return the winner or 0 if the human quit"""
        self.output("Player 1, connects X from North to South")
        self.output("Player 2, connects O from West to East")
        self.output(f"You are Player {self.human}, the AI is Player {self.computer}")
        self.output(draw(self.graph))

        turn = player1
        while True:
            if turn == self.human:
                cell = self.ask()
                if cell is None:
                    self.output("You have quit the match.")
                    return 0
                self.graph.mark(*cell, turn)
            else:
                self.output("AI is deciding for the best move...")
                cell = self.ai.play(self.graph, turn, self.deadline)
                self.output(f"AI plays {name(*cell)}")
            self.moves[turn] += 1
            self.output(draw(self.graph))

            # nobody can span the board with fewer stones than its size
            if self.moves[turn] >= self.size:
                won = winner(self.graph, turn)
                if won:
                    break
            turn = opponent(turn)

        if won == self.human:
            self.output("YOU HAVE WON THE GAME.")
        else:
            self.output("AI has won.")
        self.output(f"Total move count for player {won}: {self.moves[won]}")
        return won


def board_size(text: str) -> int:
    size = int(text)
    if not 2 <= size <= 11:
        raise argparse.ArgumentTypeError("board size must be between 2 and 11")
    return size


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Hex against a Monte Carlo AI",
    )
    parser.add_argument("size", type=board_size)
    parser.add_argument("--second", action="store_true", help="let the AI go first")
    parser.add_argument("--simulations", type=int, default=SIMULATIONS)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--deadline", type=float, help="seconds per AI move")
    parser.add_argument("--tiebreak", choices=TIEBREAKS, default="random")
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)

    if args.verbose:
        print(args)

    ai = MonteCarlo(
        args.simulations,
        workers=args.workers,
        seed=args.seed,
        tiebreak=args.tiebreak,
        verbose=args.verbose,
    )
    human = player2 if args.second else player1
    return Game(args.size, ai, human, args.deadline).run()


if __name__ == "__main__":
    main()
