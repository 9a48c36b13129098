# src/game/session.py
from __future__ import annotations
import enum
import math
from typing import Optional
from .config import GameConfig, WIDTH, HEIGHT
from .player import Player
from .obstacles import ObstacleField


class SessionState(enum.Enum):
    IDLE = "idle"            # before the first start
    RUNNING = "running"
    GAME_OVER = "game_over"  # terminal for the session, waits for a restart


class GameSession:
    """
    Simulation context: owns every piece of mutable game state.
    Input handling and the frame loop consult `state` directly.
    """

    def __init__(self,
                 config: Optional[GameConfig] = None,
                 store=None,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 seed: int | None = None):
        self.config = config or GameConfig()
        self.store = store
        self.width = int(width)
        self.height = int(height)

        cfg = self.config
        self.player = Player(x=float(cfg.player_x), width=cfg.player_w, height=cfg.player_h)
        self.obstacles = ObstacleField(seed,
                                       min_distance=cfg.spawn_min_distance,
                                       max_distance=cfg.spawn_max_distance,
                                       obstacle_w=cfg.obstacle_w,
                                       obstacle_h=cfg.obstacle_h)

        self.state = SessionState.IDLE
        self.paused = False
        self.score = 0.0
        self.speed = float(cfg.initial_speed)
        self.high_score = int(store.load()) if store is not None else 0
        self.last_frame_time = 0.0
        self.last_dt_ms = 0.0
        self.frames = 0
        self.final_score: Optional[int] = None

    # -------------------- Derived --------------------

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def ground_y(self) -> float:
        return self.height - self.config.ground_height

    @property
    def display_score(self) -> int:
        return math.floor(self.score)

    # -------------------- Transitions --------------------

    def start(self, now_ms: float = 0.0):
        """Idle/GameOver -> Running. Resets every per-session value."""
        self.state = SessionState.RUNNING
        self.paused = False
        self.score = 0.0
        self.speed = float(self.config.initial_speed)
        self.obstacles.clear()
        self.player.reset()
        self.frames = 0
        self.final_score = None
        self.last_frame_time = float(now_ms)
        self.last_dt_ms = 0.0

    def handle_jump(self, now_ms: float = 0.0) -> bool:
        """
        Shared action for the jump key and pointer click.
        Starts a session from Idle/GameOver (returns True), jumps while Running.
        """
        if self.state is SessionState.RUNNING:
            self.player.jump(self.config.jump_strength)
            return False
        self.start(now_ms)
        return True

    def game_over(self):
        """Running -> GameOver; persists a strictly higher score."""
        if self.state is not SessionState.RUNNING:
            return
        self.state = SessionState.GAME_OVER
        final = self.display_score
        self.final_score = final
        if final > self.high_score:
            self.high_score = final
            if self.store is not None:
                self.store.save(final)

    def resize(self, width: int, height: int):
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    # -------------------- Simulation --------------------

    def step(self) -> bool:
        """
        Advance one frame. Returns True if the frame ended the session.
        Order: physics, scroll, collisions, removal bonus, spawn, score, speed.
        """
        if self.state is not SessionState.RUNNING:
            return False
        cfg = self.config

        self.player.update_physics(cfg.gravity)
        self.obstacles.advance(self.speed)

        collided = self.obstacles.any_collision(self.player)
        if collided:
            self.game_over()

        removed = self.obstacles.remove_off_screen()
        self.score += cfg.obstacle_bonus * removed

        self.obstacles.maybe_spawn(self.width)

        if self.state is SessionState.RUNNING:
            self.score += cfg.score_per_frame

        if self.speed < cfg.max_speed:
            self.speed = min(cfg.max_speed, self.speed + cfg.speed_increment)

        self.frames += 1
        return collided

    def advance_clock(self, timestamp_ms: float) -> float:
        """Record the frame timestamp; returns elapsed ms since the previous frame."""
        dt = float(timestamp_ms) - self.last_frame_time
        self.last_frame_time = float(timestamp_ms)
        self.last_dt_ms = dt
        return dt
