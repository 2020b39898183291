import numpy as np

empty = 0
player1 = 1  # X, connects North to South
player2 = 2  # O, connects West to East

signs = {empty: ".", player1: "X", player2: "O"}


def opponent(player: int) -> int:
    return 3 - player


class HexGraph:
    """The board as a graph of cells plus 4 virtual edge nodes"""

    def __init__(self, size: int):
        # bool is an int, but True is not a board size
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"board size must be a positive integer, got {size!r}")
        if size < 1:
            raise ValueError(f"board size must be a positive integer, got {size!r}")
        S = self.size = int(size)

        # room for every cell + 4 virtual cells
        self.nodes = S * S + 4
        self.marks = np.zeros(self.nodes, dtype=np.int8)
        self.adj: list[set[int]] = [set() for _ in range(self.nodes)]
        self.edges = 0
        self.moves = 0

        # virtual nodes
        self.west = WE = S * S
        self.east = EE = S * S + 1
        self.north = NE = S * S + 2
        self.south = SE = S * S + 3
        self.ends = {
            player1: (NE, SE),
            player2: (WE, EE),
        }

        self.marks[[NE, SE]] = player1
        self.marks[[WE, EE]] = player2
        for i in range(S):
            self.connect(NE, i)
            self.connect(SE, S * (S - 1) + i)
            self.connect(WE, i * S)
            self.connect(EE, i * S + S - 1)

    @property
    def V(self) -> int:
        """Number of real cells"""
        return self.size * self.size

    @property
    def E(self) -> int:
        return self.edges

    def index(self, r: int, c: int) -> int:
        return self.size * r + c

    def rc(self, index: int) -> tuple[int, int]:
        return index // self.size, index % self.size

    def start_node(self, player: int) -> int:
        return self.ends[player][0]

    def end_node(self, player: int) -> int:
        return self.ends[player][1]

    def connect(self, a: int, b: int):
        """Add the undirected edge a-b, once"""
        if b not in self.adj[a]:
            self.adj[a].add(b)
            self.adj[b].add(a)
            self.edges += 1

    def adjacent(self, a: int, b: int) -> bool:
        return b in self.adj[a]

    def neighbors(self, a: int) -> set[int]:
        return self.adj[a]

    def sign(self, a: int) -> int:
        return int(self.marks[a])

    def is_empty(self, r: int, c: int) -> bool:
        return bool(self.marks[self.index(r, c)] == empty)

    def mark(self, r: int, c: int, player: int):
        S = self.size
        index = self.index(r, c)
        assert 0 <= r < S and 0 <= c < S and self.marks[index] == empty
        self.marks[index] = player
        self.moves += 1
        # geometric neighbors, whatever their marks
        if r > 0:
            self.connect(index, index - S)  # up left
            if c < S - 1:
                self.connect(index, index - S + 1)  # up right
        if c > 0:
            self.connect(index, index - 1)  # left
            if r < S - 1:
                self.connect(index, index + S - 1)  # down left
        if c < S - 1:
            self.connect(index, index + 1)  # right
        if r < S - 1:
            self.connect(index, index + S)  # down right

    def empty_cells(self) -> list[tuple[int, int]]:
        return [self.rc(int(i)) for i in np.where(self.marks[: self.V] == empty)[0]]

    def full(self) -> bool:
        return self.moves == self.V

    def clone(self) -> "HexGraph":
        other = HexGraph.__new__(HexGraph)
        other.__dict__.update(self.__dict__)
        other.marks = self.marks.copy()
        other.adj = [set(n) for n in self.adj]
        other.ends = dict(self.ends)
        return other

    def __str__(self):
        S = self.size
        lines = []
        for r in range(S):
            index = r * S
            row = self.marks[index : index + S]
            lines.append(" " * r + " ".join(signs[int(m)] for m in row))
        return "\n".join(lines)

    def __repr__(self):
        return f"HexGraph(size={self.size}, moves={self.moves}, E={self.edges})"
