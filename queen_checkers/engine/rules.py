from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type
from queen_checkers.engine.board import Board
from queen_checkers.engine.move import Destination, Path, Pos
from queen_checkers.engine.paths import find_paths
from queen_checkers.engine.piece import BLUE


def winning_row(player: str) -> int:
    """The opponent's back rank: where player's queen has to arrive."""
    return Board.SIZE - 1 if player == BLUE else 0


def has_won(board: Board, player: str) -> bool:
    queen = board.queen_of(player)
    return queen is not None and queen[0] == winning_row(player)


def idle_pieces(board: Board, player: str) -> List[Pos]:
    """Squares of player's pieces on the row furthest from the opponent's edge.

    Those are the only pieces that may be promoted when the player lost its queen.
    """
    owned = board.owned_by(player)
    if not owned:
        return []
    rows = [r for r, _ in owned]
    furthest = min(rows) if player == BLUE else max(rows)
    return [pos for pos in owned if pos[0] == furthest]


def captures_for_path(board: Board, path: Path, player: str) -> List[Pos]:
    captures: List[Pos] = []
    for pos in path[1:-1]:
        p = board.get_piece(pos)
        if p is not None and p.owner != player and pos not in captures:
            captures.append(pos)
    return captures


class RuleVariant(ABC):
    """Decides which of the paths found for a piece are legal this turn, and
    which of the active player's pieces may be picked up at all."""

    name = ''

    @abstractmethod
    def keep_paths(self, paths: List[Path]) -> List[Path]:
        pass

    def reduce_destinations(self, board: Board, paths: List[Path], player: str) -> List[Destination]:
        return [Destination(path[-1], captures_for_path(board, path, player), path)
                for path in self.keep_paths(paths)]

    def destinations_for(self, board: Board, pos: Pos, player: str) -> List[Destination]:
        piece = board.get_piece(pos)
        if piece is None or piece.owner != player:
            return []
        return self.reduce_destinations(board, find_paths(board, pos, piece), player)

    @abstractmethod
    def is_selectable(self, board: Board, pos: Pos, player: str) -> bool:
        pass

    def selectable_squares(self, board: Board, player: str) -> List[Pos]:
        return [pos for pos in board.owned_by(player) if self.is_selectable(board, pos, player)]

    def __repr__(self):
        return f"{type(self).__name__}()"


class StrictRules(RuleVariant):
    """Single jumps only; capturing is never mandatory."""

    name = 'strict'

    def keep_paths(self, paths: List[Path]) -> List[Path]:
        return [p for p in paths if len(p) in (2, 3)]

    def is_selectable(self, board: Board, pos: Pos, player: str) -> bool:
        return bool(self.destinations_for(board, pos, player))


class ForcedRules(RuleVariant):
    """Jump chains allowed; a piece able to capture must capture.

    When any piece of the player can capture, only those pieces may be picked up.
    """

    name = 'forced'

    def keep_paths(self, paths: List[Path]) -> List[Path]:
        jumps = [p for p in paths if len(p) > 2]
        return jumps if jumps else list(paths)

    def is_selectable(self, board: Board, pos: Pos, player: str) -> bool:
        piece = board.get_piece(pos)
        if piece is None or piece.owner != player:
            return False
        with_captures: List[Pos] = []
        with_destinations: List[Pos] = []
        for frm in board.owned_by(player):
            destinations = self.destinations_for(board, frm, player)
            if any(d.is_capture() for d in destinations):
                with_captures.append(frm)
            if destinations:
                with_destinations.append(frm)
        if with_captures:
            return pos in with_captures
        return pos in with_destinations


VARIANTS: Dict[str, Type[RuleVariant]] = {
    StrictRules.name: StrictRules,
    ForcedRules.name: ForcedRules,
}


def get_variant(name: Optional[str]) -> RuleVariant:
    try:
        return VARIANTS[name]()
    except KeyError:
        raise ValueError(f"Unknown rule variant {name!r}; expected one of {sorted(VARIANTS)}") from None
