import argparse
import logging
from collections.abc import Sequence

from tic_tac_toe.board import DEFAULT_BOARD_SIZE
from tic_tac_toe.exception import SessionClosedError
from tic_tac_toe.game_state import GameState
from tic_tac_toe.player import Player
from tic_tac_toe.ui import DEFAULT_SYMBOLS
from tic_tac_toe.ui_terminal import Console, TerminalUi, ask_players
from tic_tac_toe.version import VERSION


def main(argv: Sequence[str] | None = None) -> None:
    parser, args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    names: tuple[str | None, str | None] = (args.names[0], args.names[1]) if args.names else (None, None)
    symbols: tuple[str | None, str | None] = (args.symbols[0], args.symbols[1]) if args.symbols else (None, None)
    if symbols[0] is not None and symbols[0] == symbols[1]:
        parser.error("--symbols must differ")

    match args.ui:
        case "terminal":
            console = Console()
            try:
                players = ask_players(console, names, symbols)
            except SessionClosedError:
                return
            TerminalUi(GameState(players, args.size), console).run()
        case "pygame":
            from tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            players = (
                Player(names[0] or "Player 1", symbols[0] or DEFAULT_SYMBOLS[0]),
                Player(names[1] or "Player 2", symbols[1] or DEFAULT_SYMBOLS[1]),
            )
            PygameUi(GameState(players, args.size)).run()
        case _:
            parser.error(f"Invalid choice for --ui: {args.ui}")


def _board_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError as e:
        msg = f"not an integer: {value!r}"
        raise argparse.ArgumentTypeError(msg) from e
    if size < 1:
        msg = f"must be at least 1, got {size}"
        raise argparse.ArgumentTypeError(msg)
    return size


def _parse_args(argv: Sequence[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Two-player Tic-Tac-Toe on an N×N board.")

    parser.add_argument("--ui", choices=("terminal", "pygame"), default="terminal")
    parser.add_argument("--size", type=_board_size, default=DEFAULT_BOARD_SIZE)
    parser.add_argument("--names", nargs=2, metavar=("PLAYER1", "PLAYER2"))
    parser.add_argument("--symbols", nargs=2, metavar=("SYMBOL1", "SYMBOL2"))
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    args = parser.parse_args(argv)
    return parser, args


if __name__ == "__main__":
    main()
