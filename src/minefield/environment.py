"""
Gymnasium environment wrapper for mark-first Minesweeper.

Lets automated players drive a GameSession through the standard RL
interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import CellState
from .session import (
    ActionOutcome,
    GameSession,
    OBS_MARKED_MINE,
    OBS_MARKED_SAFE,
    OBS_MINE,
    OBS_NO_MARK,
)


REWARDS = {
    ActionOutcome.REVEALED: 1.0,
    ActionOutcome.GAME_LOST: -10.0,
    ActionOutcome.MARKED: 0.0,
    ActionOutcome.IGNORED: -0.1,
}

_GLYPHS = {
    OBS_NO_MARK: ".",
    OBS_MARKED_SAFE: "?",
    OBS_MARKED_MINE: "F",
    OBS_MINE: "*",
    0: " ",
}


def render_observation(obs: np.ndarray) -> str:
    """Render an observation array as an ASCII grid."""
    lines = []
    for row in obs:
        lines.append(" ".join(_GLYPHS.get(int(val), str(int(val))) for val in row))
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for mark-first Minesweeper.

    Observation:
        2D array where:
        - -1 = no mark
        - -2 = marked safe
        - -3 = marked mine
        - -4 = revealed mine (lost on a safe guess)
        - 0-9 = revealed cell with neighbor count (including itself)

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height toggles the mark on cell
        (i // width, i % width); action i >= width * height commits
        cell i - width * height.

    Rewards:
        - +1 for a revealed cell
        - -10 for losing the game
        - 0 for toggling a mark
        - -0.1 for an ignored action

    The episode ends when the game is lost or every cell is revealed.
    There is no win.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session = self._new_session(seed=None)

        self.observation_space = spaces.Box(
            low=OBS_MINE,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        self._num_cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def _new_session(self, seed: Optional[int]) -> GameSession:
        return GameSession(
            self.config.width,
            self.config.height,
            self.config.num_mines,
            seed=seed,
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.session = self._new_session(seed=seed)
        self._steps = 0

        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action.

        Args:
            action: Flat action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        commit, row, col = self.decode_action(action)
        self._steps += 1

        if commit:
            result = self.session.commit(row, col)
        else:
            result = self.session.toggle_mark(row, col)

        reward = REWARDS[result.outcome]
        terminated = (
            self.session.is_lost or self.session.unopened_count == 0
        )

        info = self._get_info()
        info["outcome"] = result.outcome.name

        return self.session.get_observation(), reward, terminated, False, info

    def decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_commit, row, col)."""
        action = int(action)
        commit = action >= self._num_cells
        cell = action - self._num_cells if commit else action
        return commit, cell // self.config.width, cell % self.config.width

    def encode_action(self, row: int, col: int, commit: bool) -> int:
        """Convert a cell position and action kind to a flat action index."""
        cell = row * self.config.width + col
        return cell + self._num_cells if commit else cell

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self._num_cells - self.session.unopened_count,
            "unopened": self.session.unopened_count,
            "game_status": self.session.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_observation(self.session.get_observation())
        if self.render_mode == "human":
            print(render_observation(self.session.get_observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would not be ignored.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.session.is_in_progress:
            return mask

        for row in range(self.config.height):
            for col in range(self.config.width):
                state = self.session.cell_state(row, col)
                if state == CellState.REVEALED:
                    continue
                mask[self.encode_action(row, col, commit=False)] = True
                if state != CellState.NO_MARK:
                    mask[self.encode_action(row, col, commit=True)] = True
        return mask
