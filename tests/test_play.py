"""Tests for the terminal game and the stats script."""
import numpy as np
import pytest

import stats
from hexgraph import HexGraph, player1, player2
from montecarlo import MonteCarlo
from play import Game, main
from stats import play_game, random_move


class FirstCellAI:
    """Plays the first empty cell in row major order"""

    def play(self, graph, player, deadline=None):
        move = graph.empty_cells()[0]
        graph.mark(*move, player)
        return move


def scripted(*commands):
    commands = list(commands)

    def input(prompt=""):
        if not commands:
            raise EOFError
        return commands.pop(0)

    return input


class TestGame:
    def test_human_wins(self):
        output = []
        game = Game(
            2,
            FirstCellAI(),
            player1,
            input=scripted("x9", "A1", "A1", "B1", "A2"),
            output=output.append,
        )
        assert game.run() == player1
        text = [str(line) for line in output]
        assert any("not a valid entry" in line for line in text)
        assert any("already occupied" in line for line in text)
        assert "YOU HAVE WON THE GAME." in text
        assert "AI plays B1" in text

    def test_ai_wins_going_first(self):
        output = []
        game = Game(
            2,
            FirstCellAI(),
            player2,
            input=scripted("B1"),
            output=output.append,
        )
        assert game.run() == player1
        assert "AI has won." in output
        assert game.moves == {player1: 2, player2: 1}

    def test_quit(self):
        output = []
        game = Game(3, FirstCellAI(), input=scripted("-1"), output=output.append)
        assert game.run() == 0
        assert "You have quit the match." in output

    def test_end_of_input_quits(self):
        game = Game(3, FirstCellAI(), input=scripted(), output=lambda *a: None)
        assert game.run() == 0

    def test_monte_carlo_opponent(self):
        output = []
        game = Game(
            2,
            MonteCarlo(20, seed=1),
            player1,
            input=scripted("A1", "B1", "A2", "B2"),
            output=output.append,
        )
        won = game.run()
        assert won in (player1, player2)
        assert game.graph.moves <= 4

    @pytest.mark.parametrize("size", ["1", "12", "x"])
    def test_bad_board_size(self, size):
        with pytest.raises(SystemExit):
            main([size])


class TestStats:
    def test_random_move_is_empty(self):
        g = HexGraph(3)
        g.mark(0, 0, player1)
        rng = np.random.default_rng(0)
        for _ in range(20):
            assert g.is_empty(*random_move(g, rng))

    def test_play_game(self):
        ai = MonteCarlo(10, seed=2)
        won, moves, playouts = play_game(ai, 3, player2, np.random.default_rng(0))
        assert won in (player1, player2)
        assert 3 <= moves <= 9
        assert playouts > 0

    def test_main(self, capsys):
        wins = stats.main(["2", "2", "--simulations", "5", "--seed", "1", "--verbose"])
        assert 0 <= wins <= 2
        out = capsys.readouterr().out
        assert "rate =" in out
        assert "games/second" in out
