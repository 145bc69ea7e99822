#!/usr/bin/env python3
"""Watch a random player play Minesweeper."""
import time
import os

import numpy as np

from src.minefield.environment import MinesweeperEnv
from src.minefield.board import BoardConfig


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9,
         difficulty: str = "easy", seed: int = None):
    """Run demo games with visualization."""
    config = BoardConfig(width=size, height=size, difficulty=difficulty)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)

    print(f"Board: {size}x{size} ({difficulty})")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = env.board.is_finished
        step = 0

        while not done:
            valid_actions = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_actions))
            x, y = action % size, action // size

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())
            time.sleep(delay)

        if info.get("game_state") == "WON":
            wins += 1
            print(f"\n*** WIN! ***")
        else:
            print(f"\n*** LOST (hit mine) ***")

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default="easy")
    parser.add_argument("--seed", type=int, default=None, help="Seed for boards and moves")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size,
         difficulty=args.difficulty, seed=args.seed)
