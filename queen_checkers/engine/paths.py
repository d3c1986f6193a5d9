from typing import List, Tuple
from queen_checkers.engine.board import Board
from queen_checkers.engine.move import Path, Pos
from queen_checkers.engine.piece import Piece, BLUE

Direction = Tuple[int, int]  # (row delta, col delta)

ALL_DIRECTIONS: List[Direction] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


def directions_for_piece(piece: Piece) -> List[Direction]:
    # Queens move along every diagonal; pawns only toward the opponent's edge
    if piece.is_queen:
        return ALL_DIRECTIONS
    if piece.owner == BLUE:
        return [(1, -1), (1, 1)]
    else:
        return [(-1, -1), (-1, 1)]


def _step(pos: Pos, direction: Direction) -> Pos:
    return (pos[0] + direction[0], pos[1] + direction[1])


def find_paths(board: Board, source: Pos, piece: Piece) -> List[Path]:
    """Return every path the piece standing on `source` can follow.

    The board is searched depth first and never modified. A path of two squares
    is a plain step; longer paths alternate jumped enemy squares and the empty
    squares landed on beyond them. Every path ends on an empty square, except a
    jump chain that closes back on `source`, which is recorded with `source` as
    its last entry.
    """
    directions = directions_for_piece(piece)
    results: List[Path] = []
    path: List[Pos] = [source]

    def visit(current: Pos):
        occupied = not board.is_empty(current)

        # first move: plain steps onto adjacent empty squares
        if len(path) == 1:
            for direction in directions:
                landing = _step(current, direction)
                if Board.in_bounds(landing) and board.is_empty(landing):
                    path.append(landing)
                    visit(landing)
                    path.pop()

        # standing on an enemy: land beyond it, in the direction we came from
        if occupied and len(path) > 1:
            came_from = path[-2]
            direction = (current[0] - came_from[0], current[1] - came_from[1])
            if direction in directions:
                landing = _step(current, direction)
                if landing == source and len(path) > 2:
                    results.append(tuple(path) + (source,))
                elif Board.in_bounds(landing) and board.is_empty(landing) and landing not in path:
                    path.append(landing)
                    visit(landing)
                    path.pop()

        # look for enemies from the source, or after having landed from a jump
        if (not occupied and len(path) > 2) or (current == source and len(path) == 1):
            for direction in directions:
                target = _step(current, direction)
                enemy = board.get_piece(target)
                if enemy is None or enemy.owner == piece.owner or target in path:
                    continue
                path.append(target)
                visit(target)
                path.pop()

        if not occupied:
            results.append(tuple(path))

    visit(source)
    return results
