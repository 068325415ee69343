#!/usr/bin/env python3
"""
Mark-first Minesweeper - Main entry point.

Usage:
    python main.py clues [--width W] [--height H] [--mines N] [--seed S]
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py simulate [--games N]
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path so the script runs from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (
    ActionOutcome,
    BoardConfig,
    GameSession,
    InvalidConfiguration,
    MinesweeperEnv,
    render_observation,
)
from minefield_agents import RandomAgent


logger = logging.getLogger(__name__)


def clues(args: argparse.Namespace) -> None:
    """Print every mine and neighbor count of a freshly generated board."""
    session = GameSession(args.width, args.height, args.mines, seed=args.seed)

    grid = [["" for _ in range(args.width)] for _ in range(args.height)]
    for clue in session.reveal_all():
        grid[clue.row][clue.col] = "*" if clue.is_mine else str(clue.neighbor_count)

    print(f"Board: {args.width}x{args.height} with {args.mines} mines")
    for row in grid:
        print(" ".join(row))


def play(args: argparse.Namespace) -> None:
    """Play a game in the terminal."""
    session = GameSession(args.width, args.height, args.mines, seed=args.seed)

    print("Commands: m ROW COL (cycle mark), c ROW COL (commit), q (quit)")
    print("Marks: ? = safe, F = mine\n")
    print(render_observation(session.get_observation()))

    while session.is_in_progress and session.unopened_count > 0:
        try:
            line = input("> ").split()
        except EOFError:
            break
        if not line:
            continue
        if line[0] == "q":
            break
        if len(line) != 3 or line[0] not in ("m", "c"):
            print("Expected: m ROW COL or c ROW COL")
            continue
        try:
            row, col = int(line[1]), int(line[2])
        except ValueError:
            print("ROW and COL must be integers")
            continue

        if line[0] == "m":
            result = session.toggle_mark(row, col)
        else:
            result = session.commit(row, col)

        if result.outcome == ActionOutcome.IGNORED:
            print(f"Nothing to do at ({row}, {col})")
            continue

        print(render_observation(session.get_observation()))

    if session.is_lost:
        print("\n*** LOST (wrong guess) ***")
    elif session.unopened_count == 0:
        print("\n*** Board cleared ***")


def simulate(args: argparse.Namespace) -> None:
    """Run the random agent and print aggregate results."""
    config = BoardConfig(args.width, args.height, args.mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.height, config.width, seed=args.seed)

    losses = 0
    total_steps = 0
    total_revealed = 0

    print(f"Simulating {args.games} games of the random agent...")
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        agent.reset()
        done = False

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            next_obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            agent.update(obs, action, reward, next_obs, done)
            obs = next_obs

        if info["game_status"] == "LOST":
            losses += 1
        total_steps += info["steps"]
        total_revealed += info["revealed"]
        logger.debug("Game %d finished: %s", game + 1, info)

        if args.render:
            print(f"\n=== Game {game + 1}/{args.games} ({info['game_status']}) ===")
            print(env.render())

    print(f"Results over {args.games} games:")
    print(f"  Loss rate: {losses / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board configuration flags shared by all commands."""
    parser.add_argument("--width", type=int, default=9, help="Number of columns")
    parser.add_argument("--height", type=int, default=9, help="Number of rows")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Mark-first Minesweeper - play, inspect and simulate"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    clues_parser = subparsers.add_parser(
        "clues", help="Show every mine and neighbor count"
    )
    add_board_arguments(clues_parser)

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Run the random agent"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--render", action="store_true", help="Print each final board"
    )

    args = parser.parse_args()
    if args.command == "simulate" and args.games < 1:
        parser.error("--games must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    commands = {"clues": clues, "play": play, "simulate": simulate}
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        command(args)
    except InvalidConfiguration as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
