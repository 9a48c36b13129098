# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS, GameConfig
from src.game.highscore import MemoryHighScoreStore
from src.game.render import draw_scene
from src.game.session import GameSession, SessionState
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH


class RunnerEnv(gym.Env):
    """
    Dino runner Gymnasium environment (vector observations).
    - One simulation step = one display frame of the game.
    - Agent acts every `frame_skip` frames (default 4).
    - Observation: shape (6,), float32, see build_observation.
    - Reward: score gained during the decision step (continuous + obstacle bonus);
      the terminating step returns -1.0 instead, dropping any bonus earned in it.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 config: Optional[GameConfig] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.config = config or GameConfig()

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.session: Optional[GameSession] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # With a seed the spawner is fully reproducible; without one it randomizes itself.
        spawn_seed = int(seed) if seed is not None else None
        self.session = GameSession(self.config, store=MemoryHighScoreStore(),
                                   width=WIDTH, height=HEIGHT, seed=spawn_seed)
        self.session.start(0.0)
        self.timestep = 0
        self.current_seed = self.session.obstacles.seed

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": 0.0}
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None, "Call reset() before step()"
        s = self.session

        if int(action) == 1 and s.running:
            s.player.jump(self.config.jump_strength)

        score_before = s.score
        for _ in range(self.frame_skip):
            s.step()
            if not s.running:
                break

        terminated = s.state is SessionState.GAME_OVER
        reward = float(s.score - score_before)
        if terminated:
            reward = -1.0

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        obs = self._get_obs()
        info = {
            "score": float(s.score),
            "display_score": s.display_score,
            "speed": float(s.speed),
            "frames": s.frames,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "obstacles_spawned": s.obstacles.spawned,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        s = self.session
        return build_observation(s.player, s.obstacles, s.speed, self.config, view_width=s.width)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None

        if self.render_mode == "human":
            if self.screen is None:
                pygame.init()
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Dino Runner — Gym Env")
                self.clock = pygame.time.Clock()
            # Pump the queue so the OS doesn't think we're hung
            pygame.event.pump()
            draw_scene(self.screen, self.session)
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata["render_fps"])
            return None

        # rgb_array: off-screen surface, no window
        if self.screen is None:
            self.screen = pygame.Surface((WIDTH, HEIGHT))
        draw_scene(self.screen, self.session)
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
                pygame.quit()
            self.screen = None
            self.clock = None
