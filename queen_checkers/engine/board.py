from copy import deepcopy
from typing import List, Optional
from queen_checkers.engine.piece import Piece, BLUE, RED, QUEEN
from queen_checkers.engine.move import Pos


BoardArray = List[List[Optional[Piece]]]

EMPTY_LABEL = 'none'


class Board:
    SIZE = 8

    def __init__(self):
        # initialize empty board
        self.grid: BoardArray = [[None for _ in range(self.SIZE)] for _ in range(self.SIZE)]

    @classmethod
    def setup_start(cls):
        b = cls()
        # Blue pieces on rows 0..2, red pieces on rows 5..7, playable squares only.
        # The corner squares hold each player's queen.
        for r in range(3):
            for c in range(cls.SIZE):
                if cls.is_playable(r, c):
                    b.grid[r][c] = Piece(BLUE)
        for r in range(5, 8):
            for c in range(cls.SIZE):
                if cls.is_playable(r, c):
                    b.grid[r][c] = Piece(RED)
        b.grid[0][0] = Piece(BLUE, QUEEN)
        b.grid[cls.SIZE - 1][cls.SIZE - 1] = Piece(RED, QUEEN)
        return b

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        return (row + col) % 2 == 0

    @classmethod
    def in_bounds(cls, pos: Pos) -> bool:
        r, c = pos
        return 0 <= r < cls.SIZE and 0 <= c < cls.SIZE

    def tile_at(self, row: int, col: int) -> Optional[Pos]:
        """Return the square at (row, col), or None when it is off the board."""
        if self.in_bounds((row, col)):
            return (row, col)
        return None

    def all_tiles(self) -> List[Pos]:
        return [(r, c) for r in range(self.SIZE) for c in range(self.SIZE)]

    def get_piece(self, pos: Pos) -> Optional[Piece]:
        if self.in_bounds(pos):
            r, c = pos
            return self.grid[r][c]
        return None

    def set_piece(self, pos: Pos, piece: Optional[Piece]):
        if self.in_bounds(pos):
            r, c = pos
            self.grid[r][c] = piece
        else:
            raise IndexError("Position out of board")

    place = set_piece

    def is_empty(self, pos: Pos) -> bool:
        return self.get_piece(pos) is None

    def owned_by(self, player: str) -> List[Pos]:
        """Squares holding one of player's pieces, in row-major order."""
        return [pos for pos in self.all_tiles() if self.get_piece(pos) is not None
                and self.get_piece(pos).owner == player]

    def queen_of(self, player: str) -> Optional[Pos]:
        for pos in self.owned_by(player):
            if self.get_piece(pos).is_queen:
                return pos
        return None

    def clone(self) -> 'Board':
        newb = Board()
        newb.grid = deepcopy(self.grid)
        return newb

    def count_pieces(self, player: str) -> int:
        return len(self.owned_by(player))

    def has_pieces(self, player: str) -> bool:
        return any(p is not None and p.owner == player for row in self.grid for p in row)

    def label_at(self, pos: Pos) -> str:
        p = self.get_piece(pos)
        return p.label if p is not None else EMPTY_LABEL

    def render(self) -> str:
        lines = ["    C0   C1   C2   C3   C4   C5   C6   C7 "]
        for r in range(self.SIZE):
            cells = []
            for c in range(self.SIZE):
                p = self.grid[r][c]
                if p is None:
                    cells.append("[  ]")
                else:
                    cells.append(f"[{p.owner[0]}{p.kind[0]}]")
            lines.append(f"R{r} " + ",".join(cells))
        return '\n'.join(lines)

    def __repr__(self):
        rows = []
        for r in range(self.SIZE):
            row = []
            for c in range(self.SIZE):
                p = self.grid[r][c]
                if p is None:
                    row.append('.')
                else:
                    ch = 'b' if p.owner == BLUE else 'r'
                    row.append(ch.upper() if p.is_queen else ch)
            rows.append(''.join(row))
        return '\n'.join(rows)
