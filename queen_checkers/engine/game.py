"""Turn controller: turns clicks on the board into state changes and view updates."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from queen_checkers.engine.board import Board, EMPTY_LABEL
from queen_checkers.engine.move import PendingMove, Pos
from queen_checkers.engine.paths import find_paths
from queen_checkers.engine.piece import BLUE, opponent
from queen_checkers.engine.rules import RuleVariant, get_variant, has_won, idle_pieces

logger = logging.getLogger(__name__)

ACTIVE = 'active'
FINISHED = 'finished'


class Phase(Enum):
    QUEEN_SELECTION = 'queen_selection'
    FROM_SELECTION = 'from_selection'
    TO_SELECTION = 'to_selection'
    FINISHED = 'finished'


@dataclass
class TileUpdate:
    row: int
    col: int
    label: str


@dataclass
class Instruction:
    """What the view has to redraw after a click.
    tile_updates: only the squares whose occupant changed, in order
    """
    tile_updates: List[TileUpdate]
    active_player: str
    winner: Optional[str] = None


@dataclass
class GameState:
    board: Board = field(default_factory=Board.setup_start)
    active_player: str = BLUE
    winner: Optional[str] = None
    status: str = ACTIVE
    pending: Optional[PendingMove] = None


class Game:
    """One game of queen checkers played under a fixed rule variant.

    Each call to tile_clicked is handled to completion and returns an
    Instruction, or None when the click changed nothing.
    """

    def __init__(self, variant: Union[str, RuleVariant] = 'forced'):
        self.rules: RuleVariant = get_variant(variant) if isinstance(variant, str) else variant
        self.state = GameState()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def active_player(self) -> str:
        return self.state.active_player

    @property
    def winner(self) -> Optional[str]:
        return self.state.winner

    @property
    def pending(self) -> Optional[PendingMove]:
        return self.state.pending

    @property
    def phase(self) -> Phase:
        if self.state.status == FINISHED:
            return Phase.FINISHED
        if self.board.queen_of(self.active_player) is None:
            return Phase.QUEEN_SELECTION
        if self.state.pending is not None:
            return Phase.TO_SELECTION
        return Phase.FROM_SELECTION

    def restart(self) -> Instruction:
        self.state = GameState()
        logger.info("Game restarted with %s rules", self.rules.name)
        updates = [TileUpdate(r, c, self.board.label_at((r, c))) for r, c in self.board.all_tiles()]
        return Instruction(updates, self.active_player, None)

    def tile_clicked(self, row: int, col: int) -> Optional[Instruction]:
        pos = self.board.tile_at(row, col)
        if pos is None:
            return None
        phase = self.phase
        if phase == Phase.FINISHED:
            return None
        if phase == Phase.QUEEN_SELECTION:
            instruction = self._select_queen(pos)
        elif phase == Phase.FROM_SELECTION:
            instruction = self._select_from(pos)
        else:
            instruction = self._select_to(pos)
        if instruction is not None:
            logger.debug("Board after click on %s:\n%s", pos, self.board.render())
        return instruction

    def _instruction(self, updates: List[TileUpdate]) -> Instruction:
        return Instruction(updates, self.active_player, self.winner)

    def _finish(self, player: str):
        self.state.winner = player
        self.state.status = FINISHED
        logger.info("%s wins", player)

    def _select_queen(self, pos: Pos) -> Optional[Instruction]:
        player = self.active_player
        if pos not in idle_pieces(self.board, player):
            return None
        piece = self.board.get_piece(pos)
        piece.promote()
        logger.info("%s promoted a new queen on %s", player, pos)
        if has_won(self.board, player):
            self._finish(player)
        return self._instruction([TileUpdate(pos[0], pos[1], piece.label)])

    def _select_from(self, pos: Pos) -> Optional[Instruction]:
        player = self.active_player
        if not self.rules.is_selectable(self.board, pos, player):
            return None
        piece = self.board.get_piece(pos)
        paths = find_paths(self.board, pos, piece)
        destinations = self.rules.reduce_destinations(self.board, paths, player)
        self.state.pending = PendingMove(pos, piece, paths, destinations)
        logger.debug("%s picked up %s: %d paths, destinations %s",
                     player, pos, len(paths), self.state.pending.targets())
        return self._instruction([TileUpdate(pos[0], pos[1], EMPTY_LABEL)])

    def _select_to(self, pos: Pos) -> Optional[Instruction]:
        pending = self.state.pending
        if pos == pending.frm:
            self.state.pending = None
            logger.debug("%s put back the piece on %s", self.active_player, pos)
            return self._instruction([TileUpdate(pos[0], pos[1], pending.piece.label)])

        destination = pending.destination_to(pos)
        if destination is None:
            return None

        player = self.active_player
        for captured in destination.captures:
            self.board.place(captured, None)
        self.board.place(pending.frm, None)
        self.board.place(destination.to, pending.piece)
        self.state.pending = None
        logger.debug("%s moved %s -> %s along %s, captured %s",
                     player, pending.frm, destination.to, destination.path, destination.captures)

        if has_won(self.board, player):
            self._finish(player)
        elif self.board.has_pieces(opponent(player)):
            self.state.active_player = opponent(player)
        # an opponent without pieces keeps the turn with the same player; no win is declared

        updates = [TileUpdate(pos[0], pos[1], pending.piece.label)]
        updates.extend(TileUpdate(r, c, EMPTY_LABEL) for r, c in destination.captures)
        return self._instruction(updates)
