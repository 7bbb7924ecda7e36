from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

import gymnasium as gym

import block_puzzle_quiz.env  # noqa: F401  # ensure registration


LOGGER = logging.getLogger(__name__)


def run_random(steps: int = 200, seed: Optional[int] = None) -> float:
    rng = random.Random(seed)
    env = gym.make("BlockPuzzleQuiz-8x8-v0")
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    episodes = 0
    for _ in range(steps):
        # Prefer valid actions if available
        valid = info.get("valid_actions", [])
        if valid:
            action = rng.choice(valid)
        else:
            action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            episodes += 1
            LOGGER.info("Episode %d finished with score %d", episodes, info["score"])
            obs, info = env.reset()
    env.close()
    LOGGER.info("Random agent total reward: %.2f over %d finished episodes", total_reward, episodes)
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser(description="Roll out a random agent over valid placements.")
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO, WARNING).")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
