"""
Rules engine for Three Men's Morris.
Handles game state, placement/movement rules, and win detection.
"""

from .config import GameConfig
from .game_state import GameState, Player, Symbol, Phase
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .session import GameSession, ActionResult, Action
