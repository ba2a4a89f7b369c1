import logging
import re
from collections.abc import Callable
from typing import Final

from tic_tac_toe.exception import SessionClosedError
from tic_tac_toe.game_state import GameState
from tic_tac_toe.player import Player
from tic_tac_toe.ui import DEFAULT_SYMBOLS, Ui

logger = logging.getLogger(__name__)

_CLEAR_SCREEN: Final = "\033[2J\033[H"
_REPLAY_ANSWERS: Final = ("y", "n", "")
_LEADING_INT: Final = re.compile(r"[+-]?\d+")

type ReadFn = Callable[[], str]
type WriteFn = Callable[[str], None]


class Console:
    """Line-based terminal I/O. Input and output are injectable so sessions can be scripted."""

    def __init__(self, read: ReadFn | None = None, write: WriteFn | None = None, *, clear_screen: bool = True) -> None:
        self._read = read or input
        self._write = write or print
        self._clear_screen = clear_screen

    def write(self, text: str) -> None:
        self._write(text)

    def read(self) -> str:
        try:
            return self._read().strip()
        except (KeyboardInterrupt, EOFError) as e:
            raise SessionClosedError from e

    def clear(self) -> None:
        if self._clear_screen:
            self._write(_CLEAR_SCREEN)


def ask_players(
    console: Console,
    names: tuple[str | None, str | None] = (None, None),
    symbols: tuple[str | None, str | None] = (None, None),
) -> tuple[Player, Player]:
    """Build both players, prompting for any name or symbol not given up front."""
    players: list[Player] = []
    for idx in range(2):
        name = names[idx] or _ask_name(console, idx + 1)
        taken = {player.symbol for player in players}
        symbol = symbols[idx] or _ask_symbol(console, DEFAULT_SYMBOLS[idx], taken)
        players.append(Player(name, symbol))
    return players[0], players[1]


def _ask_name(console: Console, player_number: int) -> str:
    console.clear()
    name = ""
    while not name:
        console.write(f"Player {player_number}, what's your name?")
        name = console.read().capitalize()
    return name


def _ask_symbol(console: Console, default_symbol: str, taken: set[str]) -> str:
    while True:
        console.write(f"Choose your token: (press enter for default: {default_symbol})")
        symbol = console.read() or default_symbol
        if symbol not in taken:
            return symbol
        console.write(f"{symbol} is already taken.")


class TerminalUi(Ui):
    def __init__(self, game_state: GameState, console: Console | None = None) -> None:
        super().__init__(game_state)
        self._console = console or Console()
        self._header = ""

    def run(self) -> None:
        super().run()
        try:
            while self._running:
                self._play_session()
                if not self._ask_replay():
                    self._stop()
        except SessionClosedError:
            logger.debug("Input closed, stopping terminal session")
            self._stop()

    def _play_session(self) -> None:
        self._game_state.reset()
        self._render_board()
        while not self._game_state.is_game_over():
            self._apply_move(self._ask_move())

    def _ask_move(self) -> int:
        max_move = self._game_state.board.size**2
        self._console.write(f"{self._game_state.current_player().name}, make a move (1 - {max_move})")
        match = _LEADING_INT.match(self._console.read())
        return int(match.group()) if match else 0

    def _ask_replay(self) -> bool:
        answer = None
        while answer not in _REPLAY_ANSWERS:
            self._console.write("Play again? [Y/n]")
            answer = self._console.read().lower()
        return answer != "n"

    def _render_board(self) -> None:
        self._console.clear()
        self._console.write(self._header)
        self._console.write(self._game_state.board.render())
        self._header = ""

    def _show_end_message(self, message: str) -> None:
        self._console.write(message)

    def _on_input_error(self, exception: Exception) -> None:
        self._header = str(exception)
        self._render_board()
