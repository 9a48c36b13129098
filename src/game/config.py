from __future__ import annotations
from dataclasses import dataclass

# --- Display ---
WIDTH = 1200
HEIGHT = 600
FPS = 60

# --- World / Physics (per-frame units) ---
GRAVITY = 0.6               # added to vy each frame (px/frame^2)
JUMP_STRENGTH = -12.0       # jump impulse, negative = upward
INITIAL_SPEED = 6.0         # obstacle scroll speed (px/frame)
SPEED_INCREMENT = 0.005     # speed ramp per frame
MAX_SPEED = 12.0
GROUND_HEIGHT = 100         # height of the ground band at the bottom of the screen

# --- Player ---
PLAYER_X = 100
PLAYER_W = 50
PLAYER_H = 50

# --- Obstacles ---
OBSTACLE_W = 30
OBSTACLE_H = 60
SPAWN_MIN_DISTANCE = 400
SPAWN_MAX_DISTANCE = 700

# --- Scoring ---
OBSTACLE_BONUS = 10
SCORE_PER_FRAME = 0.1

# --- Persistence ---
HIGHSCORE_KEY = "dinoHighScore"
HIGHSCORE_FILE = "highscore.json"

# --- Colors (RGB) ---
COLOR_SKY_TOP = (135, 206, 235)
COLOR_SKY_MID = (224, 246, 255)
COLOR_GROUND = (194, 178, 128)
COLOR_GROUND_LINE = (139, 115, 85)
COLOR_PLAYER = (26, 115, 232)
COLOR_OBSTACLE = (83, 83, 83)
COLOR_FG = (32, 33, 36)
COLOR_PANEL = (255, 255, 255)


@dataclass(frozen=True)
class GameConfig:
    """Tunables for one process. Defaults mirror the module constants."""
    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH
    initial_speed: float = INITIAL_SPEED
    speed_increment: float = SPEED_INCREMENT
    max_speed: float = MAX_SPEED
    ground_height: int = GROUND_HEIGHT

    player_x: int = PLAYER_X
    player_w: int = PLAYER_W
    player_h: int = PLAYER_H

    obstacle_w: int = OBSTACLE_W
    obstacle_h: int = OBSTACLE_H
    spawn_min_distance: float = SPAWN_MIN_DISTANCE
    spawn_max_distance: float = SPAWN_MAX_DISTANCE

    obstacle_bonus: float = OBSTACLE_BONUS
    score_per_frame: float = SCORE_PER_FRAME

    def __post_init__(self):
        if self.spawn_max_distance < self.spawn_min_distance:
            raise ValueError("spawn_max_distance must be >= spawn_min_distance")
        if self.max_speed < self.initial_speed:
            raise ValueError("max_speed must be >= initial_speed")
