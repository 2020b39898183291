"""Unit tests for reachability and winner detection."""
import numpy as np
import pytest

from connectivity import reachable, winner
from hexgraph import HexGraph, empty, player1, player2


def fill(graph, cells, player):
    for r, c in cells:
        graph.mark(r, c, player)
    return graph


def random_full_board(size, rng):
    g = HexGraph(size)
    cells = g.empty_cells()
    for i, k in enumerate(rng.permutation(len(cells))):
        g.mark(*cells[k], player1 if i % 2 == 0 else player2)
    return g


class TestReachable:
    @pytest.mark.parametrize("player", [player1, player2])
    def test_reflexive(self, player):
        g = HexGraph(3)
        g.mark(1, 1, player1)
        for node in range(g.nodes):
            assert reachable(g, node, node, player)

    def test_empty_board(self):
        g = HexGraph(3)
        assert not reachable(g, g.north, g.south, player1)
        assert not reachable(g, g.west, g.east, player2)

    def test_opponent_stones_block(self):
        g = HexGraph(2)
        fill(g, [(0, 0), (1, 0)], player2)
        assert not reachable(g, g.north, g.south, player1)

    def test_path_through_own_stones_only(self):
        g = HexGraph(3)
        fill(g, [(0, 1), (1, 1)], player1)
        # (2, 1) is adjacent but empty
        assert not reachable(g, g.north, g.south, player1)
        g.mark(2, 0, player1)
        assert reachable(g, g.north, g.south, player1)

    def test_cells_reachable_from_edge(self):
        g = HexGraph(3)
        fill(g, [(1, 0), (1, 1)], player2)
        assert reachable(g, g.west, g.index(1, 1), player2)
        assert not reachable(g, g.west, g.index(1, 2), player2)


class TestWinner:
    def test_no_winner(self):
        g = HexGraph(3)
        assert winner(g, player1) == empty
        assert winner(g, player2) == empty

    def test_left_column_wins_before_board_is_full(self):
        g = fill(HexGraph(2), [(0, 0), (1, 0)], player1)
        assert not g.full()
        assert winner(g, player1) == player1
        assert winner(g, player2) == player1

    def test_row_wins_for_player2(self):
        g = fill(HexGraph(3), [(1, 0), (1, 1), (1, 2)], player2)
        assert winner(g, player1) == player2
        assert winner(g, player2) == player2

    def test_diagonal_is_not_connected(self):
        # (0, 0) and (1, 1) are not neighbors
        g = fill(HexGraph(2), [(0, 0), (1, 1)], player1)
        assert winner(g, player1) == empty

    def test_anti_diagonal_is_connected(self):
        g = fill(HexGraph(2), [(0, 1), (1, 0)], player1)
        assert winner(g, player1) == player1

    def test_single_cell_board(self):
        g = HexGraph(1)
        g.mark(0, 0, player2)
        assert winner(g, player1) == player2

    @pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 7])
    def test_full_board_has_exactly_one_winner(self, size):
        rng = np.random.default_rng(size)
        for _ in range(20):
            g = random_full_board(size, rng)
            one = reachable(g, g.north, g.south, player1)
            two = reachable(g, g.west, g.east, player2)
            assert one != two
            assert winner(g, player1) == winner(g, player2) != empty

    @pytest.mark.parametrize("last", [player1, player2])
    def test_connected_player_wins_whatever_the_last_cell(self, last):
        g = HexGraph(3)
        fill(g, [(0, 0), (1, 0), (2, 0), (0, 2), (1, 2)], player1)
        fill(g, [(0, 1), (1, 1), (2, 1)], player2)
        assert g.empty_cells() == [(2, 2)]
        assert winner(g, player2) == player1
        g.mark(2, 2, last)
        assert winner(g, player2) == player1
        assert winner(g, player1) == player1
