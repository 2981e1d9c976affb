"""
Game session for Three Men's Morris.
Routes cell clicks to placement, selection or movement and keeps the turn order.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Symbol, Phase, Cell, Coord
from .move_validator import MoveValidator
from .win_checker import WinChecker


class Action(Enum):
    """What a cell click did."""
    PLACE = "place"
    SELECT = "select"
    MOVE = "move"
    NONE = "none"


@dataclass
class ActionResult:
    """
    Outcome of a cell click.
    Ignored clicks have accepted=False and leave the game untouched.
    """
    accepted: bool
    action: Action = Action.NONE
    error_message: Optional[str] = None


class GameSession:
    """
    A single game of Three Men's Morris.

    Game flow:
    1. X and O take turns placing pieces on empty cells (3 each)
    2. A player with 3 pieces placed selects one of their pieces...
    3. ...and moves it to any empty cell (or selects another own piece)
    4. The first player with three in a row wins; further clicks are ignored
    5. reset_game() starts over with X to move

    The presentation layer only forwards (row, col) clicks and reads the
    observable state; it owns no game logic.
    """

    def __init__(self, debug: Optional[bool] = None):
        """
        Initialize the session.

        Args:
            debug: Print why inputs are ignored (default: GameConfig.DEBUG_MODE).
        """
        self.debug = GameConfig.DEBUG_MODE if debug is None else debug
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.state = GameState()

    # ==================== INPUT ====================

    def handle_cell_selected(self, row: int, col: int) -> ActionResult:
        """
        Handle a click on a cell.

        Routing order matters: a selection in progress always goes to the
        movement handler, even when both players have placed all pieces.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            ActionResult describing what happened.

        Raises:
            ValueError: If (row, col) is off the board.
        """
        self.validator.check_bounds(row, col)

        if self.state.winner is not None:
            return self._ignore("Game is already over!")

        if self.state.selected_cell is not None:
            return self._handle_move(row, col)

        if not self.state.active.has_pieces_left:
            return self._select_piece(row, col)

        return self._handle_place(row, col)

    def reset_game(self):
        """Start a new game: empty board, no pieces placed, X to move."""
        self.state = GameState()
        if self.debug:
            print("Game reset! X to move.")

    # ==================== HANDLERS ====================

    def _handle_place(self, row: int, col: int) -> ActionResult:
        result = self.validator.validate_placement(self.state, row, col)
        if not result.is_valid:
            return self._ignore(result.error_message)

        self.state.place_piece(row, col)
        self._finish_turn()
        return ActionResult(accepted=True, action=Action.PLACE)

    def _select_piece(self, row: int, col: int) -> ActionResult:
        result = self.validator.validate_selection(self.state, row, col)
        if not result.is_valid:
            return self._ignore(result.error_message)

        self.state.selected_cell = (row, col)
        return ActionResult(accepted=True, action=Action.SELECT)

    def _handle_move(self, row: int, col: int) -> ActionResult:
        selected = self.state.selected_cell

        # Another one of our own pieces: switch the selection
        if self.state.owns(row, col) and (row, col) != selected:
            self.state.selected_cell = (row, col)
            return ActionResult(accepted=True, action=Action.SELECT)

        result = self.validator.validate_move(self.state, row, col)
        if not result.is_valid:
            return self._ignore(result.error_message)

        self.state.move_piece(selected, (row, col))
        self.state.selected_cell = None
        self._finish_turn()
        return ActionResult(accepted=True, action=Action.MOVE)

    def _finish_turn(self):
        """Check for a winner and pass the turn if there is none."""
        self.win_checker.update_game_state(self.state)
        if self.state.winner is None:
            self.state.switch_player()

    def _ignore(self, reason: str) -> ActionResult:
        if self.debug:
            print(f"Ignored: {reason}")
        return ActionResult(accepted=False, error_message=reason)

    # ==================== OBSERVABLE STATE ====================

    @property
    def board(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only snapshot of the board."""
        return tuple(tuple(row) for row in self.state.board)

    @property
    def current_player(self) -> Symbol:
        return self.state.current_player

    @property
    def winner(self) -> Optional[Symbol]:
        return self.state.winner

    @property
    def message(self) -> str:
        return self.state.message

    @property
    def selected_cell(self) -> Optional[Coord]:
        return self.state.selected_cell

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def winning_line(self) -> Optional[List[Coord]]:
        """The completed line, for highlighting (None while nobody has won)."""
        if self.state.winner is None:
            return None
        return self.win_checker.get_winning_line(self.state)

    def pieces_placed(self, symbol: Symbol) -> int:
        return self.state.pieces_placed(symbol)

    def valid_targets(self) -> List[Coord]:
        """Cells that would be accepted as the next click."""
        targets = self.validator.get_valid_targets(self.state)
        if self.state.selected_cell is not None:
            # Switching to another own piece is accepted as well
            own = [
                cell for cell in self.state.get_cells_of(self.state.current_player)
                if cell != self.state.selected_cell
            ]
            targets = sorted(targets + own)
        return targets

    def render(self) -> str:
        return self.state.render()
