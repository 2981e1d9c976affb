"""
Game state management for Three Men's Morris.
Tracks the board, the two players, whose turn it is and the selected piece.
"""

from enum import Enum
from typing import Optional, List, Tuple, Dict
from dataclasses import dataclass, field

from .config import GameConfig


class Symbol(Enum):
    """The two player symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the opposite symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


class Phase(Enum):
    """Phase of the active player's turn (derived, never stored)."""
    PLACING = "placing"
    MOVING = "moving"
    WON = "won"


# A cell is empty (None) or holds a player's symbol
Cell = Optional[Symbol]
Coord = Tuple[int, int]


def empty_board() -> List[List[Cell]]:
    """Build a fresh, empty board."""
    size = GameConfig.BOARD_SIZE
    return [[None for _ in range(size)] for _ in range(size)]


class Player:
    """
    A player record: its symbol and how many pieces it has placed.

    The symbol is fixed at creation; only the placed count changes.
    """

    def __init__(self, symbol: Symbol, placed: int = 0):
        self._symbol = symbol
        self.placed = placed

    @property
    def symbol(self) -> Symbol:
        return self._symbol

    @property
    def has_pieces_left(self) -> bool:
        """True while the player is still in the placement phase."""
        return self.placed < GameConfig.PIECES_PER_PLAYER

    def __repr__(self) -> str:
        return f"Player(symbol={self._symbol.value}, placed={self.placed})"


def _new_players() -> Dict[Symbol, Player]:
    return {symbol: Player(symbol) for symbol in Symbol}


@dataclass
class GameState:
    """
    The complete state of a Three Men's Morris game.

    Tracks:
    - The 3x3 board (None means empty, otherwise a Symbol)
    - Both player records, keyed by symbol
    - The active player (a symbol tag, the record is looked up by it)
    - The winner and the user-facing message
    - The selected cell while a piece is being moved

    The methods here are mutation primitives only. The rules (when a
    placement or a move is allowed, when to switch turns) live in
    GameSession.
    """

    board: List[List[Cell]] = field(default_factory=empty_board)

    players: Dict[Symbol, Player] = field(default_factory=_new_players)

    # Current player's turn
    current_player: Symbol = Symbol(GameConfig.FIRST_PLAYER)

    # Game result
    winner: Optional[Symbol] = None
    message: str = ""

    # Piece chosen to be relocated (movement phase only)
    selected_cell: Optional[Coord] = None

    @property
    def active(self) -> Player:
        """The record of the player whose turn it is."""
        return self.players[self.current_player]

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    @property
    def phase(self) -> Phase:
        """
        Derive the phase the same way the dispatcher routes input:
        winner first, then a selection in progress, then the placed count.
        """
        if self.winner is not None:
            return Phase.WON
        if self.selected_cell is not None:
            return Phase.MOVING
        if not self.active.has_pieces_left:
            return Phase.MOVING
        return Phase.PLACING

    def pieces_placed(self, symbol: Symbol) -> int:
        """How many pieces a player has placed so far (0-3)."""
        return self.players[symbol].placed

    def cell(self, row: int, col: int) -> Cell:
        return self.board[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.board[row][col] is None

    def owns(self, row: int, col: int) -> bool:
        """True if the cell holds the active player's symbol."""
        return self.board[row][col] == self.current_player

    def place_piece(self, row: int, col: int):
        """Put the active player's symbol on a cell and count it."""
        self.board[row][col] = self.current_player
        self.active.placed += 1

    def move_piece(self, source: Coord, target: Coord):
        """Relocate the piece on source to target. Placed counts stay as they are."""
        src_row, src_col = source
        dst_row, dst_col = target
        self.board[dst_row][dst_col] = self.current_player
        self.board[src_row][src_col] = None

    def switch_player(self):
        self.current_player = self.current_player.opposite()

    def get_empty_cells(self) -> List[Coord]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.board[row][col] is None:
                    empty.append((row, col))
        return empty

    def get_cells_of(self, symbol: Symbol) -> List[Coord]:
        """Get the cells holding the given player's pieces."""
        cells = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.board[row][col] == symbol:
                    cells.append((row, col))
        return cells

    def render(self) -> str:
        """Render the board as text, marking the selected piece with '*'."""
        lines = ["    0  1  2"]
        for row in range(GameConfig.BOARD_SIZE):
            row_str = f"{row} "
            for col in range(GameConfig.BOARD_SIZE):
                piece = self.board[row][col]
                char = piece.value if piece else GameConfig.EMPTY_CELL_CHAR
                marker = GameConfig.SELECTED_MARKER if self.selected_cell == (row, col) else " "
                row_str += f" {char}{marker}"
            lines.append(row_str.rstrip())

        x_placed = self.pieces_placed(Symbol.X)
        o_placed = self.pieces_placed(Symbol.O)
        total = GameConfig.PIECES_PER_PLAYER
        lines.append("")
        lines.append(f"X: {x_placed}/{total}  O: {o_placed}/{total}")

        if self.winner:
            lines.append(self.message)
        else:
            lines.append(f"Current turn: {self.current_player.value} ({self.phase.value})")
        return "\n".join(lines)
