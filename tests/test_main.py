import io

import pytest
from queen_checkers.engine.game import Game
from queen_checkers.main import parse_args, run_text, main, UsageError


def test_parse_args_defaults():
    assert parse_args([]) == ('forced', False, 80, False)


def test_parse_args_options():
    argv = ['--variant', 'Strict', '--text', '--square-size', '64', '--debug']
    assert parse_args(argv) == ('strict', True, 64, True)


@pytest.mark.parametrize('argv', [
    ['--variant'],
    ['--variant', 'giveaway'],
    ['--square-size', 'big'],
    ['--square-size', '0'],
])
def test_parse_args_rejects_bad_values(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_main_reports_usage_errors(capsys):
    assert main(['--variant', 'giveaway']) == 2
    assert 'unknown variant' in capsys.readouterr().err


def test_text_front_end_plays_clicks():
    stdin = io.StringIO("2 0\nfoo\n3,1\n4 4\nq\n2 2\n")
    stdout = io.StringIO()
    game = Game('strict')
    run_text(game, stdin=stdin, stdout=stdout)
    out = stdout.getvalue()
    assert 'Picked up (2, 0); destinations: [(3, 1)]' in out
    assert "Enter 'row col'" in out
    assert 'red to play' in out
    assert 'Nothing to do there' in out
    # input after 'q' is never read
    assert game.board.get_piece((2, 2)) is not None
    assert game.active_player == 'red'
