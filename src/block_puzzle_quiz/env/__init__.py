"""Gymnasium environment for Block Puzzle Quiz."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="BlockPuzzleQuiz-8x8-v0",
    entry_point="block_puzzle_quiz.env.block_puzzle_env:BlockPuzzleQuizEnv",
)

__all__ = ["BlockPuzzleQuiz-8x8-v0"]
