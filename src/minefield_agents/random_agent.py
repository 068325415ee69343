"""
Random guessing agent for mark-first Minesweeper.

Picks an unopened cell at random, then either commits its current mark or
cycles the mark further.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that guesses blindly.

    Each turn it draws one unopened cell uniformly. A marked cell is
    committed with probability commit_probability, otherwise its mark is
    cycled; an unmarked cell can only be marked. Since marks cycle safe
    then mine, a marked cell is committed as safe or as mine depending on
    how many times it was toggled.

    Attributes:
        commit_probability: Chance of committing a marked cell.
        marks_made: Mark toggles chosen this episode.
        commits_made: Commits chosen this episode.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
        commit_probability: float = 0.5,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
            commit_probability: Chance of committing a marked cell
                instead of cycling its mark.
        """
        super().__init__(board_height, board_width)
        if not 0.0 <= commit_probability <= 1.0:
            raise ValueError("commit_probability must be in [0, 1]")
        self.commit_probability = commit_probability
        self.rng = np.random.default_rng(seed)
        self.marks_made = 0
        self.commits_made = 0

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick a random unopened cell and decide whether to commit it.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Mark or commit action for the chosen cell, or 0 when no cell
            is left.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        unopened = np.flatnonzero(valid_actions[: self.total_cells])
        if len(unopened) == 0:
            return 0

        cell = int(self.rng.choice(unopened))
        row, col = divmod(cell, self.board_width)
        can_commit = bool(valid_actions[self.total_cells + cell])

        if can_commit and self.rng.random() < self.commit_probability:
            self.commits_made += 1
            return self.position_to_action(row, col, commit=True)

        self.marks_made += 1
        return self.position_to_action(row, col, commit=False)

    def reset(self) -> None:
        """Clear the per-episode counters."""
        self.marks_made = 0
        self.commits_made = 0
