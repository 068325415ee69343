"""
Mark-first Minesweeper rules engine.

Provides the board, per-cell annotations, the game session that applies
the mark/commit actions, and a Gymnasium environment around it.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, CellClue, InvalidConfiguration
from .session import ActionOutcome, ActionResult, GameSession, GameStatus
from .environment import MinesweeperEnv, render_observation

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "CellClue",
    "InvalidConfiguration",
    "ActionOutcome",
    "ActionResult",
    "GameSession",
    "GameStatus",
    "MinesweeperEnv",
    "render_observation",
]
