# src/env/observations.py
from __future__ import annotations
from typing import Iterable, List, Optional
import numpy as np

from src.game.config import GameConfig, WIDTH

OBS_SIZE = 6
# [y_norm, vy_norm, speed_norm, gap1_norm, gap2_norm, airborne]
OBS_LOW = np.array([0.0, -1.0, 0.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)

def _clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return lo if x < lo else (hi if x > hi else x)

def apex_height(config: GameConfig) -> float:
    """Peak jump height (px) for the configured impulse/gravity, continuous approximation."""
    g = max(1e-6, float(config.gravity))
    return (config.jump_strength ** 2) / (2.0 * g)

def _gap_norm(player_right: float, obstacle_x: Optional[float], view_width: float) -> float:
    """Distance to an obstacle's left edge, scaled by the view width; 1.0 = nothing ahead."""
    if obstacle_x is None:
        return 1.0
    return _clamp((obstacle_x - player_right) / max(1.0, view_width))

def build_observation(
    player,
    obstacles: Iterable,
    speed: float,
    config: Optional[GameConfig] = None,
    view_width: float = WIDTH,
) -> np.ndarray:
    """
    Fixed (6,) float32 vector:
      [ y_norm, vy_norm, speed_norm, gap1_norm, gap2_norm, airborne ]
    - y_norm     : height above ground / apex height, in [0,1]
    - vy_norm    : vy / |jump_strength|, in [-1,1] (negative = rising)
    - speed_norm : position of speed between initial and max, in [0,1]
    - gap*_norm  : two nearest obstacles still ahead of the player's back edge;
                   0 when already overlapping in x, 1.0 sentinel when absent
    - airborne   : 0.0 / 1.0
    """
    cfg = config or GameConfig()

    y_norm = _clamp(float(player.y) / max(1.0, apex_height(cfg)))
    vy_norm = _clamp(float(player.vy) / max(1e-6, abs(cfg.jump_strength)), -1.0, 1.0)
    span = cfg.max_speed - cfg.initial_speed
    speed_norm = _clamp((float(speed) - cfg.initial_speed) / span) if span > 0 else 1.0

    player_right = float(player.x) + float(player.width)
    ahead: List[float] = [float(o.x) for o in obstacles if o.x + o.width > player.x]
    ahead.sort()
    g1 = _gap_norm(player_right, ahead[0] if len(ahead) > 0 else None, view_width)
    g2 = _gap_norm(player_right, ahead[1] if len(ahead) > 1 else None, view_width)

    airborne = 1.0 if (player.is_jumping or player.y > 0) else 0.0

    return np.asarray([y_norm, vy_norm, speed_norm, g1, g2, airborne], dtype=np.float32)
