"""Entry point for queen checkers
Run: python -m queen_checkers.main [--variant <strict|forced>] [--text] [--square-size <n>] [--debug]
Options:
--variant        : rule variant; 'strict' (single jumps, optional captures) or 'forced' (default)
--text           : play in the terminal instead of the pygame window
--square-size    : size in pixels of one board square (pygame window only)
--debug          : log every selection, move and the board after each click
"""

import logging
import sys
from typing import IO, Tuple

from queen_checkers.engine.game import Game
from queen_checkers.engine.rules import VARIANTS

logger = logging.getLogger(__name__)


class UsageError(Exception):
    pass


def _value_after(argv, flag: str) -> str:
    idx = argv.index(flag)
    if idx + 1 < len(argv):
        return argv[idx + 1]
    raise UsageError(f"{flag} provided but no value given")


def parse_args(argv) -> Tuple[str, bool, int, bool]:
    variant = 'forced'
    text_mode = '--text' in argv
    square_size = 80
    debug = '--debug' in argv

    if '--variant' in argv:
        variant = _value_after(argv, '--variant').lower()
        if variant not in VARIANTS:
            raise UsageError(f"unknown variant {variant!r}; choose from {', '.join(sorted(VARIANTS))}")

    if '--square-size' in argv:
        raw = _value_after(argv, '--square-size')
        try:
            square_size = int(raw)
        except ValueError:
            raise UsageError(f"--square-size expects an integer, got {raw!r}") from None
        if square_size <= 0:
            raise UsageError("--square-size must be positive")

    return variant, text_mode, square_size, debug


def run_text(game: Game, stdin: IO[str] = sys.stdin, stdout: IO[str] = sys.stdout) -> None:
    """Console front end: 'row col' clicks a square, 'r' restarts, 'q' quits."""
    game.restart()
    print(game.board.render(), file=stdout)
    print(f"{game.active_player} to play ({game.rules.name} rules)", file=stdout)
    for line in stdin:
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd in ('q', 'quit'):
            break
        if cmd in ('r', 'restart'):
            game.restart()
        else:
            try:
                row, col = (int(v) for v in cmd.replace(',', ' ').split())
            except ValueError:
                print("Enter 'row col', 'r' to restart or 'q' to quit", file=stdout)
                continue
            instruction = game.tile_clicked(row, col)
            if instruction is None:
                print("Nothing to do there", file=stdout)
                continue
        print(game.board.render(), file=stdout)
        if game.pending is not None:
            print(f"Picked up {game.pending.frm}; destinations: {game.pending.targets()}", file=stdout)
        if game.winner is not None:
            print(f"{game.winner} wins!", file=stdout)
        else:
            print(f"{game.active_player} to play ({game.phase.value.replace('_', ' ')})", file=stdout)


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    try:
        variant, text_mode, square_size, debug = parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(__doc__, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = Game(variant)
    if text_mode:
        run_text(game)
        return 0

    try:
        from queen_checkers.ui import PygameUI
        PygameUI(game, square_size=square_size).run()
    except Exception as e:
        logger.error("Error running UI: %s", e)
        logger.error("If this is an ImportError for pygame, install it with: python -m pip install pygame")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
