#!/usr/bin/env python3
"""Watch the Explorer agent play Diamond Miners."""
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from diamond_miners import DiamondMinersEnv
from agents import ExplorerAgent


ACTION_NAMES = [
    "move up", "move down", "move right", "move left",
    "turn up", "turn down", "turn right", "turn left",
    "break",
]


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.2, steps: int = 150, blink_every: int = 2):
    """Run one demo game with visualization."""
    env = DiamondMinersEnv(render_mode="ansi", max_steps=steps)
    agent = ExplorerAgent()

    obs, info = env.reset()
    agent.reset()

    clear_screen()
    print("=== Diamond Miners ===\n")
    print(env.render())
    time.sleep(delay)

    done = False
    step = 0

    while not done:
        valid_actions = env.get_action_mask()
        action = agent.select_action(obs, valid_actions)

        obs, reward, terminated, truncated, info = env.step(action)
        done = terminated or truncated
        step += 1
        if step % blink_every == 0:
            env.game.toggle_facing_blink()

        clear_screen()
        print(f"=== Step {step}/{steps} | Last action: {ACTION_NAMES[action]} ===")
        print(f"Discovered: {info['discovered']}/{info['total_cells']} | "
              f"Walls broken: {info['walls_broken']}\n")
        print(env.render())

        time.sleep(delay)

    print(f"\n=== Final: {info['discovered']}/{info['total_cells']} squares discovered ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.2, help="Delay between actions")
    parser.add_argument("--steps", type=int, default=150, help="Number of steps")
    args = parser.parse_args()

    demo(delay=args.delay, steps=args.steps)
