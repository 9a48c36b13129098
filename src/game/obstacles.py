# src/game/obstacles.py
from __future__ import annotations
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Optional
from .config import OBSTACLE_W, OBSTACLE_H, SPAWN_MIN_DISTANCE, SPAWN_MAX_DISTANCE
from .player import Player

@dataclass
class Obstacle:
    """Ground-standing block; x is its left edge in screen space."""
    x: float
    width: int = OBSTACLE_W
    height: int = OBSTACLE_H

    @property
    def right(self) -> float:
        return self.x + self.width

    def advance(self, speed: float):
        self.x -= speed

    def is_off_screen(self) -> bool:
        return self.right < 0

    def collides_with(self, player: Player) -> bool:
        """
        Strict AABB overlap. Vertical bands are heights above the ground line:
        obstacle [0, height], player [y, y + player.height]. Touching edges do not collide.
        """
        return (
            player.x < self.right and
            player.x + player.width > self.x and
            player.y < self.height and
            player.y + player.height > 0
        )


class ObstacleField:
    """
    Active obstacles, oldest first. Obstacles only move left at a shared speed,
    so removal always happens at the front.
    """
    def __init__(self, seed: int | None = None,
                 min_distance: float = SPAWN_MIN_DISTANCE,
                 max_distance: float = SPAWN_MAX_DISTANCE,
                 obstacle_w: int = OBSTACLE_W,
                 obstacle_h: int = OBSTACLE_H):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.min_distance = float(min_distance)
        self.max_distance = float(max_distance)
        self.obstacle_w = obstacle_w
        self.obstacle_h = obstacle_h
        self.obstacles: Deque[Obstacle] = deque()
        self.spawned = 0

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def clear(self):
        self.obstacles.clear()

    def advance(self, speed: float):
        for obstacle in self.obstacles:
            obstacle.advance(speed)

    def any_collision(self, player: Player) -> bool:
        # every obstacle is tested; ending a session is idempotent
        hit = False
        for obstacle in self.obstacles:
            if obstacle.collides_with(player):
                hit = True
        return hit

    def remove_off_screen(self) -> int:
        """Pop obstacles from the front while fully past the left edge. Returns count removed."""
        removed = 0
        while self.obstacles and self.obstacles[0].is_off_screen():
            self.obstacles.popleft()
            removed += 1
        return removed

    def maybe_spawn(self, view_width: float) -> Optional[Obstacle]:
        """
        Spawn at view_width + U[min, max) once the newest obstacle has moved
        further left than view_width - min_distance (or when the field is empty).
        """
        last = self.obstacles[-1] if self.obstacles else None
        if last is not None and last.x >= view_width - self.min_distance:
            return None

        distance = self.min_distance + self.rng.random() * (self.max_distance - self.min_distance)
        obstacle = Obstacle(x=view_width + distance, width=self.obstacle_w, height=self.obstacle_h)
        self.obstacles.append(obstacle)
        self.spawned += 1
        return obstacle
