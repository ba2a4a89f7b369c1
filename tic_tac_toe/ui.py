from abc import ABC, abstractmethod
from typing import Final

from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.game_state import GameState

DEFAULT_SYMBOLS: Final = ("X", "O")


class Ui(ABC):
    def __init__(self, game_state: GameState) -> None:
        self._game_state = game_state
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def game_state(self) -> GameState:
        return self._game_state

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _apply_move(self, pos: object) -> bool:
        # Illegal input is rejected here so it never reaches make_move, which would consume the turn.
        if self._game_state.is_game_over():
            self._on_input_error(InvalidMoveError("The game is over."))
            return False
        if not self._game_state.is_legal_move(pos):
            self._on_input_error(InvalidMoveError("This move is illegal."))
            return False
        self._game_state.make_move(pos)
        self.on_board_updated()
        return True

    def on_board_updated(self) -> None:
        if not self._running:
            return
        self._render_board()
        if self._game_state.is_game_over():
            self._show_end_message(self._end_message())

    def _end_message(self) -> str:
        winner = self._game_state.winner()
        return f"{winner.name} won!" if winner else "It's a draw!"

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
