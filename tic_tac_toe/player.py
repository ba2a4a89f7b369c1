from dataclasses import dataclass

from tic_tac_toe.board import Symbol


@dataclass(frozen=True, slots=True)
class Player:
    """A named participant and the symbol they place on the board.

    Neither a non-empty name nor distinct symbols are enforced here; front-ends check that when
    building players.
    """

    name: str
    symbol: Symbol
