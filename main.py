#!/usr/bin/env python3
"""
Diamond Miners - Main entry point.

Usage:
    python main.py play
    python main.py evaluate [--agent {random,explorer}] [--games N]
    python main.py compare
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from diamond_miners import GameState, GridConfig, DisplayBuffer, UP, DOWN, LEFT, RIGHT
from agents import RandomAgent, ExplorerAgent
from evaluation import Evaluator


MOVE_KEYS = {"w": UP, "s": DOWN, "d": RIGHT, "a": LEFT}
TURN_KEYS = {"i": UP, "k": DOWN, "l": RIGHT, "j": LEFT}

HELP = "wasd: move  ijkl: turn  b: break  f: blink  q: quit"


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    config = GridConfig()
    display = DisplayBuffer(config.width, config.height)
    game = GameState(config, display)
    game.initialize()

    print(HELP)
    while not game.is_game_over():
        print()
        print(display.to_ansi())
        try:
            command = input("> ").strip().lower()
        except EOFError:
            break

        if command == "q":
            break
        if command in MOVE_KEYS:
            if not game.move(*MOVE_KEYS[command]):
                print("Blocked.")
        elif command in TURN_KEYS:
            game.turn(*TURN_KEYS[command])
        elif command == "b":
            if not game.break_facing():
                print("Nothing to break.")
        elif command == "f":
            game.toggle_facing_blink()
        else:
            print(HELP)

    discovered = game.grid.count_discovered()
    print(f"\nDiscovered {discovered}/{game.grid.total_cells} squares, "
          f"broke {game.walls_broken} walls.")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    if args.agent == "random":
        agent = RandomAgent(seed=args.seed)
        name = "Random"
    elif args.agent == "explorer":
        agent = ExplorerAgent()
        name = "Explorer"
    else:
        print(f"Unknown agent: {args.agent}")
        return

    evaluator = Evaluator(num_episodes=args.games, max_steps=args.steps)

    print(f"\nEvaluating {name} over {args.games} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {name}:")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg discovered: {results['avg_discovered']:.1f} squares "
          f"({results['discovered_fraction']:.1%})")
    print(f"  Avg walls broken: {results['avg_walls_broken']:.1f}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    agents = {
        "Random": RandomAgent(seed=args.seed),
        "Explorer": ExplorerAgent(),
    }

    evaluator = Evaluator(num_episodes=args.games, max_steps=args.steps)
    results = evaluator.compare(agents)

    print("\n" + "=" * 56)
    print("Agent Comparison Results")
    print("=" * 56)
    print(f"{'Agent':<12} {'Reward':>10} {'Discovered':>12} {'Walls Broken':>14}")
    print("-" * 56)

    for name, metrics in results.items():
        print(
            f"{name:<12} {metrics['avg_reward']:>10.2f} "
            f"{metrics['discovered_fraction']:>12.1%} "
            f"{metrics['avg_walls_broken']:>14.1f}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Diamond Miners - Play or watch agents explore"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("play", help="Play in the terminal")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--agent",
        choices=["random", "explorer"],
        default="explorer",
        help="Agent to evaluate",
    )

    compare_parser = subparsers.add_parser("compare", help="Compare all agents")

    for sub in (eval_parser, compare_parser):
        sub.add_argument(
            "--games", type=positive_int, default=20, help="Number of games to play"
        )
        sub.add_argument(
            "--steps", type=positive_int, default=200, help="Steps per game"
        )
        sub.add_argument(
            "--seed", type=int, default=None, help="Seed for the random agent"
        )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
