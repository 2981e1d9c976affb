"""
Win checker for Three Men's Morris.
Checks if a player has three pieces in a row.
"""

from typing import Optional, List, Tuple
from .config import GameConfig
from .game_state import GameState, Symbol, Cell


class WinChecker:
    """
    Checks for win conditions.

    Win condition: 3 pieces of the same symbol in a row
    (horizontally, vertically, or diagonally).
    There is no draw: a game only ends with a winner or a reset.
    """

    # All possible winning lines, in scan order
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, game_state: GameState) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The symbol of the first winning line found, or None.
        """
        line = self.get_winning_line(game_state)
        if line is None:
            return None
        row, col = line[0]
        return game_state.board[row][col]

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(game_state.board, line) is not None:
                return line
        return None

    def _check_line(
        self,
        board: List[List[Cell]],
        line: List[Tuple[int, int]]
    ) -> Optional[Symbol]:
        """
        Check if a single line has a winner.

        Returns:
            The symbol if all 3 cells hold it, None otherwise.
        """
        first_row, first_col = line[0]
        first = board[first_row][first_col]
        if first is None:
            return None  # Empty cell, no winner on this line

        for row, col in line[1:]:
            if board[row][col] != first:
                return None
        return first

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Record the winner and the win message on the game state.
        The message is left alone when nobody has won.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.message = GameConfig.WIN_MESSAGE.format(symbol=winner.value)

        return game_state
