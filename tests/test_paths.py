from queen_checkers.engine.board import Board
from queen_checkers.engine.paths import find_paths
from queen_checkers.engine.piece import Piece, BLUE, RED, QUEEN


def _paths_from(board, pos):
    return find_paths(board, pos, board.get_piece(pos))


def _cycle_board():
    # blue queen on (2,2) surrounded by four red pawns it can jump in a loop
    b = Board()
    b.place((2, 2), Piece(BLUE, QUEEN))
    for pos in [(3, 3), (3, 5), (1, 5), (1, 3)]:
        b.place(pos, Piece(RED))
    return b


def test_simple_step_from_start_position():
    b = Board.setup_start()
    assert _paths_from(b, (2, 0)) == [((2, 0), (3, 1))]
    assert _paths_from(b, (5, 1)) == [((5, 1), (4, 0)), ((5, 1), (4, 2))]


def test_pawn_only_moves_toward_the_opponent():
    b = Board()
    b.place((4, 4), Piece(BLUE))
    b.place((3, 3), Piece(RED))
    ends = {p[-1] for p in _paths_from(b, (4, 4))}
    assert ends == {(5, 3), (5, 5)}


def test_queen_steps_in_every_direction():
    b = Board()
    b.place((4, 4), Piece(RED, QUEEN))
    ends = {p[-1] for p in _paths_from(b, (4, 4))}
    assert ends == {(3, 3), (3, 5), (5, 3), (5, 5)}


def test_single_capture():
    b = Board()
    b.place((2, 0), Piece(BLUE))
    b.place((3, 1), Piece(RED))
    assert _paths_from(b, (2, 0)) == [((2, 0), (3, 1), (4, 2))]


def test_capture_needs_an_empty_landing():
    b = Board()
    b.place((2, 0), Piece(BLUE))
    b.place((3, 1), Piece(RED))
    b.place((4, 2), Piece(RED))
    assert _paths_from(b, (2, 0)) == []


def test_own_pieces_are_not_jumped():
    b = Board()
    b.place((2, 0), Piece(BLUE))
    b.place((3, 1), Piece(BLUE))
    assert _paths_from(b, (2, 0)) == []


def test_multi_jump_records_every_stop():
    b = Board()
    b.place((2, 2), Piece(BLUE))
    b.place((3, 3), Piece(RED))
    b.place((5, 5), Piece(RED))
    paths = _paths_from(b, (2, 2))
    assert paths == [
        ((2, 2), (3, 1)),
        ((2, 2), (3, 3), (4, 4), (5, 5), (6, 6)),
        ((2, 2), (3, 3), (4, 4)),
    ]


def test_jump_keeps_the_direction_of_travel():
    b = Board()
    b.place((4, 4), Piece(BLUE, QUEEN))
    b.place((5, 5), Piece(RED))
    b.place((6, 6), Piece(RED))
    paths = _paths_from(b, (4, 4))
    # (5,5) can only be jumped towards (6,6), which is taken
    assert all((5, 5) not in p for p in paths)
    assert len(paths) == 3


def test_queen_may_not_jump_back_over_a_captured_piece():
    b = Board()
    b.place((2, 2), Piece(BLUE, QUEEN))
    b.place((3, 3), Piece(RED))
    paths = _paths_from(b, (2, 2))
    assert ((2, 2), (3, 3), (4, 4)) in paths
    assert all(len(p) <= 3 for p in paths)


def test_cyclic_jump_chain_returns_to_source():
    b = _cycle_board()
    paths = _paths_from(b, (2, 2))
    loop = ((2, 2), (3, 3), (4, 4), (3, 5), (2, 6), (1, 5), (0, 4), (1, 3), (2, 2))
    reverse = ((2, 2), (1, 3), (0, 4), (1, 5), (2, 6), (3, 5), (4, 4), (3, 3), (2, 2))
    closed = [p for p in paths if p[-1] == (2, 2)]
    assert sorted(closed) == sorted([loop, reverse])


def test_paths_start_at_source_and_end_on_empty_squares():
    for board, source in [(_cycle_board(), (2, 2)), (Board.setup_start(), (2, 2))]:
        for path in _paths_from(board, source):
            assert path[0] == source
            if path[-1] == source:
                assert len(path) > 3
                assert len(set(path)) == len(path) - 1
            else:
                assert board.is_empty(path[-1])
                assert len(set(path)) == len(path)


def test_find_paths_leaves_the_board_alone():
    b = _cycle_board()
    before = repr(b)
    _paths_from(b, (2, 2))
    assert repr(b) == before
