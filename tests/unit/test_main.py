"""
Tests for the command-line entry point.

The script is run in a subprocess from the repository root, the way a user
runs it from a checkout.
"""
import subprocess
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).parent.parent.parent


def run_main(*args: str) -> subprocess.CompletedProcess:
    """Run main.py with the given arguments from the repository root."""
    return subprocess.run(
        [sys.executable, "main.py", *args],
        cwd=ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestClues:
    """Test the reveal-all diagnostic command."""

    def test_runs_from_checkout(self) -> None:
        """Script imports its packages without being installed."""
        result = run_main("clues", "--width", "3", "--height", "3", "--mines", "0")
        assert result.returncode == 0, result.stderr
        lines = result.stdout.strip().split("\n")
        assert lines[0] == "Board: 3x3 with 0 mines"
        assert lines[1:] == ["0 0 0"] * 3

    def test_fully_mined_board(self) -> None:
        """Every cell of a fully mined board is shown as a mine."""
        result = run_main("clues", "--width", "2", "--height", "1", "--mines", "2")
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip().split("\n")[1] == "* *"

    def test_invalid_configuration_exits_with_error(self) -> None:
        """Bad board parameters are reported as a usage error."""
        result = run_main("clues", "--width", "2", "--height", "2", "--mines", "5")
        assert result.returncode == 2
        assert "Too many mines" in result.stderr


class TestSimulate:
    """Test the random agent simulation command."""

    @pytest.mark.parametrize("games", ["1", "3"])
    def test_prints_results(self, games: str) -> None:
        """Simulation reports aggregate results."""
        result = run_main(
            "simulate", "--width", "3", "--height", "3", "--mines", "2",
            "--seed", "0", "--games", games,
        )
        assert result.returncode == 0, result.stderr
        assert f"Results over {games} games:" in result.stdout
        assert "Loss rate:" in result.stdout

    def test_zero_games_rejected(self) -> None:
        """At least one game is required."""
        result = run_main("simulate", "--games", "0")
        assert result.returncode == 2
        assert "--games must be positive" in result.stderr
