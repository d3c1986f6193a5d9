from dataclasses import dataclass

BLUE = 'blue'
RED = 'red'
PLAYERS = (BLUE, RED)

PAWN = 'pawn'
QUEEN = 'queen'


def opponent(player: str) -> str:
    return RED if player == BLUE else BLUE


@dataclass
class Piece:
    """Represents a checkers piece.
    owner: 'blue' (starts at the top, rows 0..2) or 'red' (rows 5..7)
    kind: 'pawn' or 'queen'
    """
    owner: str
    kind: str = PAWN

    @property
    def is_queen(self) -> bool:
        return self.kind == QUEEN

    def promote(self):
        self.kind = QUEEN

    @property
    def label(self) -> str:
        return f"{self.owner} {self.kind}"

    def __repr__(self):
        return f"Piece(owner={self.owner!r}, kind={self.kind!r})"
