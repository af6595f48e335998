"""
Tests for the game logic around the board:
game state, move validation and win checking.
"""

import pytest

from logic import GameConfig, __version__
from logic.axes import AxisOrientation, Position
from logic.errors import GameOver, OccupiedCell, OutOfBounds
from logic.game_state import GameState
from logic.move_validator import MoveValidator
from logic.symbol import Symbol
from logic.win_checker import WinChecker


def play(game, *cells):
    """Play a sequence of (column, row) moves, updating the result after each."""
    checker = WinChecker()
    for cell in cells:
        game.make_move(Position(*cell))
        checker.update_game_state(game)
    return game


# ==================== CONFIG ====================

def test_config_defaults():
    assert GameConfig.BOARD_SIZE == 3
    assert GameConfig.TURN_DELAY_SECONDS > 0
    assert GameConfig.LOG_LEVEL == "WARNING"
    assert __version__


# ==================== GAME STATE ====================

class TestGameState:

    def test_initial_state(self):
        game = GameState()
        assert game.current_player == Symbol.X
        assert game.board.size == 3
        assert game.moves == []
        assert not game.is_game_over

    def test_first_player_and_size(self):
        game = GameState(size=4, first_player=Symbol.O)
        assert game.current_player == Symbol.O
        assert len(game.get_empty_cells()) == 16

    def test_make_move_switches_turn(self):
        game = GameState()
        move = game.make_move(Position(1, 1))

        assert move.symbol == Symbol.X
        assert move.move_number == 0
        assert game.board.get(1, 1) == Symbol.X
        assert game.current_player == Symbol.O

        game.make_move(Position(0, 0))
        assert game.moves[1].symbol == Symbol.O
        assert game.current_player == Symbol.X

    def test_occupied_cell_keeps_turn(self):
        game = GameState()
        game.make_move(Position(1, 1))

        with pytest.raises(OccupiedCell):
            game.make_move(Position(1, 1))

        assert game.current_player == Symbol.O
        assert len(game.moves) == 1

    def test_off_board_move(self):
        with pytest.raises(OutOfBounds):
            GameState().make_move(Position(3, 0))

    def test_no_moves_after_game_over(self):
        game = play(GameState(), (0, 0), (0, 1), (1, 0), (1, 1), (2, 0))
        assert game.is_game_over

        with pytest.raises(GameOver):
            game.make_move(Position(2, 2))

    def test_copy_is_independent(self):
        game = play(GameState(), (0, 0))
        copy = game.copy()
        copy.make_move(Position(1, 1))

        assert game.board.get(1, 1) == Symbol.EMPTY
        assert len(game.moves) == 1
        assert game.current_player == Symbol.O

    def test_render_strikes_through_winner(self):
        game = play(GameState(), (0, 0), (0, 1), (1, 0), (1, 1), (2, 0))
        assert game.render().split("\n")[0] == "| ─ | ─ | ─ |"

    def test_render_without_winner(self):
        game = play(GameState(), (0, 0))
        assert game.render() == game.board.render()


# ==================== WIN CHECKER ====================

class TestWinChecker:

    def test_no_winner_yet(self):
        game = play(GameState(), (0, 0), (1, 1))
        checker = WinChecker()
        assert checker.check_winner(game) is None
        assert not checker.check_draw(game)
        assert checker.get_winning_axis(game) is None

    def test_winner(self):
        game = play(GameState(), (0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2))
        checker = WinChecker()

        assert checker.check_winner(game) == Symbol.O
        assert game.winner == Symbol.O
        assert game.is_game_over
        assert not game.is_draw
        assert checker.get_winning_axis(game).orientation == AxisOrientation.VERTICAL

    def test_draw(self):
        # X O X / X O O / O X X
        game = play(
            GameState(),
            (0, 0), (1, 0), (2, 0), (1, 1), (0, 1),
            (2, 1), (1, 2), (0, 2), (2, 2)
        )
        checker = WinChecker()

        assert game.board.is_full()
        assert checker.check_winner(game) is None
        assert checker.check_draw(game)
        assert game.is_draw
        assert game.is_game_over
        assert game.winner is None


# ==================== MOVE VALIDATOR ====================

class TestMoveValidator:

    def test_valid_move(self):
        result = MoveValidator().parse_move(GameState(), "6")
        assert result.is_valid
        assert result.error_message is None
        assert result.position == Position(2, 1)

    @pytest.mark.parametrize("text", ["", "abc", "0", "10", "-1", "2.5"])
    def test_bad_input(self, text):
        result = MoveValidator().parse_move(GameState(), text)
        assert not result.is_valid
        assert result.error_message == "Please enter a number between 1 and 9."
        assert result.position is None

    def test_accepts_surrounding_whitespace(self):
        assert MoveValidator().parse_move(GameState(), " 1 \n").position == (0, 0)

    def test_occupied(self):
        game = play(GameState(), (0, 0))
        result = MoveValidator().parse_move(game, "1")
        assert not result.is_valid
        assert result.error_message == "Position already marked."

    def test_game_over(self):
        game = play(GameState(), (0, 0), (0, 1), (1, 0), (1, 1), (2, 0))
        result = MoveValidator().parse_move(game, "9")
        assert not result.is_valid
        assert result.error_message == "Game is already over!"

    def test_valid_moves(self):
        validator = MoveValidator()
        game = play(GameState(), (0, 0), (2, 2))
        assert len(validator.get_valid_moves(game)) == 7

        play(game, (0, 1), (2, 1), (0, 2))
        assert validator.get_valid_moves(game) == []

    def test_larger_board_range(self):
        result = MoveValidator().parse_move(GameState(size=4), "16")
        assert result.position == Position(3, 3)
