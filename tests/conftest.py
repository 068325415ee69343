"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a generated 9x9 board with 10 mines."""
    board = Board(BoardConfig(), seed=1234)
    board.generate()
    return board


@pytest.fixture
def fixed_board() -> Board:
    """
    Create a 3x3 board with mines in two corners.

        * . .
        . . .
        . . *
    """
    return Board.from_layout(
        BoardConfig(3, 3, 2),
        [1, 0, 0,
         0, 0, 0,
         0, 0, 1],
    )


@pytest.fixture
def empty_board() -> Board:
    """Create a 3x3 board with no mines."""
    board = Board(BoardConfig(3, 3, 0))
    board.generate()
    return board


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def fixed_session(fixed_board: Board) -> GameSession:
    """Create a session over the fixed two-mine board."""
    return GameSession.from_board(fixed_board)


@pytest.fixture
def empty_session() -> GameSession:
    """Create a 3x3 session with no mines."""
    return GameSession(3, 3, 0)


@pytest.fixture
def single_mine_session() -> GameSession:
    """Create a 1x1 session whose only cell is a mine."""
    return GameSession(1, 1, 1)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def unmarked_cell() -> Cell:
    """Create an unmarked cell."""
    return Cell()


@pytest.fixture
def safe_marked_cell() -> Cell:
    """Create a cell marked safe."""
    cell = Cell()
    cell.toggle_mark()
    return cell


@pytest.fixture
def mine_marked_cell() -> Cell:
    """Create a cell marked as a mine."""
    cell = Cell()
    cell.toggle_mark()
    cell.toggle_mark()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
