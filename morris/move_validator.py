"""
Move validator for Three Men's Morris.
Validates placements, selections and moves against the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass
from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Three Men's Morris inputs.

    Rules:
    1. Nothing is allowed once the game has a winner
    2. A piece can only be placed on an empty cell, at most 3 per player
    3. Once all 3 are placed, a player selects one of their own pieces
    4. A selected piece can only move to an empty cell
    """

    def check_bounds(self, row: int, col: int):
        """
        Raise ValueError for coordinates outside the board.
        These are caller bugs, not game input.
        """
        size = GameConfig.BOARD_SIZE
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"Invalid position ({row}, {col}). Must be 0-{size - 1}.")

    def validate_placement(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate placing a new piece.

        Args:
            game_state: Current game state.
            row: Row to place piece (0-2).
            col: Column to place piece (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not game_state.is_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {game_state.cell(row, col).value}"
            )

        if not game_state.active.has_pieces_left:
            return ValidationResult(
                is_valid=False,
                error_message=f"{game_state.current_player.value} has no more pieces to place!"
            )

        return ValidationResult(is_valid=True)

    def validate_selection(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """Validate choosing the piece on (row, col) to move."""
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not game_state.owns(row, col):
            piece = game_state.cell(row, col)
            holder = "empty" if piece is None else f"held by {piece.value}"
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is {holder}, not a {game_state.current_player.value} piece"
            )

        return ValidationResult(is_valid=True)

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """Validate moving the selected piece to (row, col)."""
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.selected_cell is None:
            return ValidationResult(
                is_valid=False,
                error_message="No piece selected!"
            )

        if not game_state.is_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is not empty"
            )

        return ValidationResult(is_valid=True)

    def get_valid_targets(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get the cells the current player can usefully click next.

        - Placing: every empty cell
        - Moving with nothing selected: the player's own pieces
        - Moving with a piece selected: every empty cell

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) positions.
        """
        if game_state.is_game_over:
            return []

        if game_state.selected_cell is None and not game_state.active.has_pieces_left:
            return game_state.get_cells_of(game_state.current_player)

        return game_state.get_empty_cells()
