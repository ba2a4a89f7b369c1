import pytest

from tic_tac_toe.game_state import GameState, GameStatus
from tic_tac_toe.player import Player

ANN = Player("Ann", "X")
BO = Player("Bo", "O")


@pytest.fixture
def game_state() -> GameState:
    return GameState((ANN, BO))


def play(game_state: GameState, *moves: object) -> None:
    for move in moves:
        game_state.make_move(move)


# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Test creating a game."""

    def test_starts_with_empty_default_board(self, game_state: GameState) -> None:
        assert game_state.board.size == 3
        assert game_state.board.cells == (None,) * 9
        assert game_state.turn == 0
        assert game_state.players == (ANN, BO)

    def test_custom_board_size(self) -> None:
        assert GameState([ANN, BO], size=4).board.size == 4

    @pytest.mark.parametrize("players", [(), (ANN,), (ANN, BO, ANN)])
    def test_requires_two_players(self, players: tuple[Player, ...]) -> None:
        with pytest.raises(ValueError, match="exactly two players"):
            GameState(players)


class TestPlayer:
    """Test the player value type."""

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ANN.name = "Eve"  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Player("Ann", "X") == ANN


# ============================================================================
# Turns
# ============================================================================


class TestTurnAlternation:
    """Test which player moves next."""

    def test_first_player_opens(self, game_state: GameState) -> None:
        assert game_state.current_player() is ANN

    def test_players_alternate(self, game_state: GameState) -> None:
        game_state.make_move(1)
        assert game_state.current_player() is BO
        game_state.make_move(2)
        assert game_state.current_player() is ANN
        assert game_state.board.cells[:2] == ("X", "O")

    def test_is_legal_move_follows_the_board(self, game_state: GameState) -> None:
        assert game_state.is_legal_move(5)
        game_state.make_move(5)
        assert not game_state.is_legal_move(5)
        assert not game_state.is_legal_move(0)
        assert not game_state.is_legal_move(None)


class TestIllegalMoveConsumesTurn:
    """An illegal position still counts as a turn and passes play to the other player."""

    def test_zero_on_empty_board(self, game_state: GameState) -> None:
        game_state.make_move(0)
        assert game_state.turn == 1
        assert game_state.board.cells == (None,) * 9
        assert game_state.current_player() is BO

    def test_occupied_cell(self, game_state: GameState) -> None:
        play(game_state, 5, 5)
        assert game_state.turn == 2
        assert game_state.board.cells.count("O") == 0
        assert game_state.current_player() is ANN

    def test_nine_illegal_moves_end_the_game(self, game_state: GameState) -> None:
        play(game_state, *([0] * 9))
        assert game_state.is_game_over()
        assert game_state.winner() is None
        assert game_state.status() is GameStatus.DRAWN


# ============================================================================
# Game over
# ============================================================================


class TestGameOver:
    """Test win and draw detection through the game state."""

    def test_column_win(self, game_state: GameState) -> None:
        play(game_state, 1, 2, 4, 5)
        assert not game_state.is_game_over()
        assert not game_state.board.has_win("X")
        assert game_state.winner() is None
        assert game_state.status() is GameStatus.IN_PROGRESS

        game_state.make_move(7)

        assert game_state.is_game_over()
        assert game_state.winner() is ANN
        assert game_state.status() is GameStatus.WON

    def test_second_player_can_win(self, game_state: GameState) -> None:
        play(game_state, 1, 3, 2, 5, 9, 7)
        assert game_state.is_game_over()
        assert game_state.winner() is BO

    def test_draw(self, game_state: GameState) -> None:
        moves = (1, 2, 3, 5, 4, 7, 6, 9, 8)
        for count, move in enumerate(moves, start=1):
            game_state.make_move(move)
            assert game_state.is_game_over() == (count == len(moves))

        assert game_state.turn == 9
        assert not game_state.board.has_win("X")
        assert not game_state.board.has_win("O")
        assert game_state.winner() is None
        assert game_state.status() is GameStatus.DRAWN

    def test_win_on_last_move_is_not_a_draw(self, game_state: GameState) -> None:
        play(game_state, 1, 2, 3, 4, 5, 6, 8, 7, 9)
        assert game_state.turn == 9
        assert game_state.winner() is ANN
        assert game_state.status() is GameStatus.WON

    def test_duplicate_symbols_report_first_player(self) -> None:
        twin = Player("Twin", "X")
        game_state = GameState((ANN, twin))
        play(game_state, 1, 2, 3)
        assert game_state.winner() is ANN

    def test_single_cell_board(self) -> None:
        game_state = GameState((ANN, BO), size=1)
        game_state.make_move(1)
        assert game_state.is_game_over()
        assert game_state.winner() is ANN


# ============================================================================
# Reset
# ============================================================================


class TestReset:
    """Test restarting a session with the same players."""

    def test_clears_board_and_turns(self, game_state: GameState) -> None:
        play(game_state, 1, 2, 4, 5, 7)
        assert game_state.is_game_over()

        game_state.reset()

        assert game_state.turn == 0
        assert game_state.board.cells == (None,) * 9
        assert game_state.board.size == 3
        assert game_state.players == (ANN, BO)
        assert game_state.current_player() is ANN
        assert not game_state.is_game_over()
        assert game_state.status() is GameStatus.IN_PROGRESS
