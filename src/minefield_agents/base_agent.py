"""
Base agent interface for mark-first Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Actions follow MinesweeperEnv: the first width * height indices toggle
    a mark, the next width * height commit a cell.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Flat action index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int, bool]:
        """Convert flat action index to (row, col, is_commit)."""
        commit = action >= self.total_cells
        cell = action - self.total_cells if commit else action
        return cell // self.board_width, cell % self.board_width, commit

    def position_to_action(self, row: int, col: int, commit: bool) -> int:
        """Convert (row, col) and action kind to flat action index."""
        cell = row * self.board_width + col
        return cell + self.total_cells if commit else cell

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        flat_obs = observation.flatten()
        # Unopened cells are -1..-3 and can be re-marked; only marked
        # cells (-2, -3) can be committed.
        can_mark = (flat_obs <= -1) & (flat_obs >= -3)
        can_commit = (flat_obs == -2) | (flat_obs == -3)
        return np.concatenate([can_mark, can_commit])

    def reset(self) -> None:
        """Reset agent state for new episode."""

    def update(
        self,
        observation: np.ndarray,
        action: int,
        reward: float,
        next_observation: np.ndarray,
        done: bool,
    ) -> None:
        """
        Update agent with experience (for learning agents).

        Args:
            observation: State before action.
            action: Action taken.
            reward: Reward received.
            next_observation: State after action.
            done: Whether episode ended.
        """
