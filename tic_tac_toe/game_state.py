import logging
from collections.abc import Sequence
from enum import Enum, auto

from tic_tac_toe.board import DEFAULT_BOARD_SIZE, Board
from tic_tac_toe.player import Player

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()


class GameState:
    """Drives one board and two players through a session.

    `turn` counts calls to `make_move` since the last reset, whether or not they placed a symbol, so an
    illegal position passes the turn to the other player. Front-ends that want to re-prompt instead must
    check `is_legal_move` first and stop calling `make_move` once `is_game_over` is true.
    """

    def __init__(self, players: Sequence[Player], size: int = DEFAULT_BOARD_SIZE) -> None:
        if len(players) != 2:  # noqa: PLR2004
            msg = f"A game needs exactly two players, got {len(players)}."
            raise ValueError(msg)
        self._board = Board(size)
        self._players: tuple[Player, Player] = (players[0], players[1])
        self._turn = 0

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def turn(self) -> int:
        return self._turn

    def current_player(self) -> Player:
        return self._players[self._turn % 2]

    def is_legal_move(self, pos: object) -> bool:
        return self._board.is_legal(pos)

    def make_move(self, pos: object) -> None:
        player = self.current_player()
        if self._board.is_legal(pos):
            logger.debug("Turn %d: %s places %r at %r", self._turn, player.name, player.symbol, pos)
        else:
            logger.info("Turn %d: illegal position %r from %s, turn passes", self._turn, pos, player.name)
        self._board.place_symbol(pos, player.symbol)
        self._turn += 1

    def is_game_over(self) -> bool:
        return self._turn == self._board.size**2 or any(
            self._board.has_win(player.symbol) for player in self._players
        )

    def winner(self) -> Player | None:
        """Return the first player, in seating order, holding a complete line."""
        return next((player for player in self._players if self._board.has_win(player.symbol)), None)

    def status(self) -> GameStatus:
        if self.winner() is not None:
            return GameStatus.WON
        if self.is_game_over():
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    def reset(self) -> None:
        logger.debug("Resetting game after %d turns", self._turn)
        self._board.reset()
        self._turn = 0
