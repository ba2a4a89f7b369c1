from typing import Final, cast

DEFAULT_BOARD_SIZE: Final = 3
type Symbol = str
type Cell = Symbol | None

_PADDING: Final = " " * 4
_CELL_WIDTH: Final = 3


class Board:
    """Square grid of cells addressed by 1-based positions, read left to right and top to bottom."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            msg = f"Board size must be a positive integer, got {size!r}."
            raise ValueError(msg)
        self._size = size
        self._cells: list[Cell] = [None] * size**2

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def is_legal(self, pos: object) -> bool:
        """Check that `pos` is an integer in [1, size²] pointing at an empty cell. Never raises."""
        if isinstance(pos, bool) or not isinstance(pos, int):
            return False
        return 1 <= pos <= self._size**2 and self._cells[pos - 1] is None

    def place_symbol(self, pos: object, symbol: Symbol) -> None:
        """Place `symbol` at `pos`. Illegal positions are silently ignored."""
        if self.is_legal(pos):
            self._cells[cast("int", pos) - 1] = symbol

    def has_win(self, symbol: Symbol | None) -> bool:
        if symbol is None:
            return False
        return any(all(cell is not None and cell == symbol for cell in line) for line in self.lines())

    def reset(self) -> None:
        self._cells = [None] * self._size**2

    # -----------------------------
    # Lines
    # -----------------------------

    def row(self, row_idx: int) -> list[Cell]:
        start = self._size * row_idx
        return self._cells[start : start + self._size]

    def column(self, col_idx: int) -> list[Cell]:
        return self._cells[col_idx :: self._size]

    def first_diagonal(self) -> list[Cell]:
        return self._cells[:: self._size + 1]

    def second_diagonal(self) -> list[Cell]:
        return [self._cells[i * self._size + (self._size - 1 - i)] for i in range(self._size)]

    def lines(self) -> list[list[Cell]]:
        lines = [self.first_diagonal(), self.second_diagonal()]
        for idx in range(self._size):
            lines.append(self.row(idx))
            lines.append(self.column(idx))
        return lines

    # -----------------------------
    # Rendering
    # -----------------------------

    def render(self) -> str:
        """Draw the board as text. Empty cells show their position number as a keypad hint."""
        separator = f"{_PADDING}{'+'.join(['-' * _CELL_WIDTH] * self._size)}\n"
        rows = separator.join(f"{_PADDING}{self._format_row(row_idx)}" for row_idx in range(self._size))
        return f"\n{rows}\n"

    def _format_row(self, row_idx: int) -> str:
        fields = []
        for col_idx, cell in enumerate(self.row(row_idx)):
            text = cell if cell is not None else str(self._size * row_idx + col_idx + 1)
            fields.append(f"{text:^{_CELL_WIDTH}}")
        return "|".join(fields) + "\n"

    def __str__(self) -> str:
        return self.render()
