from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from queen_checkers.engine.piece import Piece

Pos = Tuple[int, int]  # (row, col)
Path = Tuple[Pos, ...]


@dataclass
class Destination:
    """One legal landing square for the piece being moved.
    path: the squares visited, source first; jumped enemies sit between landings
    captures: squares of the enemy pieces removed when this destination is played
    """
    to: Pos
    captures: List[Pos]
    path: Path

    def is_capture(self):
        return bool(self.captures)

    def __repr__(self):
        return f"Destination({self.path[0]} -> {self.to}, captures={self.captures})"


@dataclass
class PendingMove:
    """The piece picked up this turn together with where it may go."""
    frm: Pos
    piece: 'Piece'
    paths: List[Path] = field(default_factory=list)
    destinations: List[Destination] = field(default_factory=list)

    def destination_to(self, pos: Pos) -> Optional[Destination]:
        # several paths may end on the same square; the first one found wins
        return next((d for d in self.destinations if d.to == pos), None)

    def targets(self) -> List[Pos]:
        seen: List[Pos] = []
        for d in self.destinations:
            if d.to not in seen:
                seen.append(d.to)
        return seen
