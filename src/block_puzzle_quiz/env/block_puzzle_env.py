from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from block_puzzle_quiz.game import GameConfig, GameEngine, ScoringRules, ShapeFamily


def compute_action_mask(engine: GameEngine) -> np.ndarray:
    size = engine.grid.size
    k = engine.pieces.capacity
    mask = np.zeros((k, size, size), dtype=np.bool_)
    for slot in range(k):
        for row, col in engine.pieces.legal_anchors(engine.grid, slot):
            mask[slot, row, col] = True
    return mask


def valid_actions(engine: GameEngine) -> List[Tuple[int, int, int]]:
    """List of (slot, row, col) placements that would succeed"""
    return [tuple(int(v) for v in idx) for idx in np.argwhere(compute_action_mask(engine))]


class BlockPuzzleQuizEnv(gym.Env):
    """Headless placement environment.

    Actions are (slot, row, col); the reward is the score the placement
    earns. Animations are run to completion after every step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        render_mode: Optional[str] = None,
        invalid_action_penalty: float = -1.0,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.engine = GameEngine(config, rules)
        self.render_mode = render_mode
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.max_episode_steps = int(max_episode_steps)

        size = self.engine.config.grid_size
        k = self.engine.config.pieces_per_set

        # Observation: grid (0/1) and family index per slot (-1 for empty)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=1, shape=(size, size), dtype=np.int8),
                "pieces": spaces.Box(low=-1, high=len(ShapeFamily) - 1, shape=(k,), dtype=np.int8),
                "pieces_remaining": spaces.Discrete(k + 1),
            }
        )
        self.action_space = spaces.MultiDiscrete((k, size, size))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        pieces = np.full((self.engine.pieces.capacity,), -1, dtype=np.int8)
        for slot in self.engine.pieces.slots:
            if slot.piece is not None:
                pieces[slot.index] = int(slot.piece.family)
        return {
            "grid": self.engine.grid.cells.astype(np.int8),
            "pieces": pieces,
            "pieces_remaining": len(self.engine.pieces),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": compute_action_mask(self.engine),
            "valid_actions": valid_actions(self.engine),
            "score": self.engine.score.total,
            "placements": self.engine.session.placements,
            "steps": self._steps,
        }

    def get_action_mask(self) -> np.ndarray:
        return compute_action_mask(self.engine).reshape(-1)

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.engine.restart(seed)
        self.engine.scheduler.run_all()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        slot, row, col = map(int, action)
        result = self.engine.attempt_placement(slot, row, col)
        self.engine.scheduler.run_all()
        self._steps += 1

        reward = float(result.score_gained) if result.success else self.invalid_action_penalty
        terminated = self.engine.game_over
        truncated = not terminated and self._steps >= self.max_episode_steps

        info = self._get_info()
        info["success"] = result.success
        info["lines_cleared"] = result.lines_cleared
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.engine.grid.cells
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                color = (70, 200, 120) if grid[y, x] else (30, 30, 36)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
