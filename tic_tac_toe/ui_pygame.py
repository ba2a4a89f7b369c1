from typing import Final

import pygame

from tic_tac_toe.game_state import GameState
from tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    HINT_COLOR: Final = (63, 63, 63)
    FIRST_PLAYER_COLOR: Final = (191, 63, 63)
    SECOND_PLAYER_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_state: GameState) -> None:
        super().__init__(game_state)
        self._cell_size = self.WINDOW_SIZE // game_state.board.size
        self._message = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))

        self._font = pygame.font.SysFont(None, max(24, self._cell_size * 3 // 4))
        self._hint_font = pygame.font.SysFont(None, max(16, self._cell_size // 4))
        self._small_font = pygame.font.SysFont(None, 48)
        self._click_font = pygame.font.SysFont(None, 24)

        super().run()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN:
                    if self._message:
                        self._play_again()
                    else:
                        self._on_click(event.pos)

    def _play_again(self) -> None:
        self._game_state.reset()
        self._message = ""

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        size = self._game_state.board.size
        col = x // self._cell_size
        row = y // self._cell_size
        if not (0 <= row < size) or not (0 <= col < size):
            return
        self._apply_move(row * size + col + 1)

    def _title(self) -> str:
        if self._message:
            return self.TITLE
        return f"{self.TITLE} - {self._game_state.current_player().name}"

    def _render(self) -> None:
        pygame.display.set_caption(self._title())
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_end_message()
        pygame.display.flip()

    def _render_board(self) -> None:
        # The board is redrawn every frame.
        pass

    def _show_end_message(self, message: str) -> None:
        self._message = message

    def _on_input_error(self, _exception: Exception) -> None:
        pass

    def _draw_grid(self) -> None:
        for i in range(1, self._game_state.board.size):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self._cell_size),
                (self.WINDOW_SIZE, i * self._cell_size),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self._cell_size, 0),
                (i * self._cell_size, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        size = self._game_state.board.size
        first_symbol = self._game_state.players[0].symbol
        for index, value in enumerate(self._game_state.board.cells):
            row, col = divmod(index, size)
            center = (col * self._cell_size + self._cell_size // 2, row * self._cell_size + self._cell_size // 2)
            if value is None:
                text = self._hint_font.render(str(index + 1), True, self.HINT_COLOR)  # noqa: FBT003
            else:
                color = self.FIRST_PLAYER_COLOR if value == first_symbol else self.SECOND_PLAYER_COLOR
                text = self._font.render(value, True, color)  # noqa: FBT003
            self._screen.blit(text, text.get_rect(center=center))

    def _draw_end_message(self) -> None:
        if not self._message:
            return
        main_text = self._small_font.render(self._message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._click_font.render("Click anywhere to play again", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 - 20))
        click_rect = click_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)
