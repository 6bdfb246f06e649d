"""
Logic module for TicTacToe.
Handles board snapshots, move history, and win detection.
"""

from .config import GameConfig
from .board import Board, Move, Player
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WinResult, WINNING_LINES, evaluate
