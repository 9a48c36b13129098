# src/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Tuple
from .config import PLAYER_X, PLAYER_W, PLAYER_H, GRAVITY, JUMP_STRENGTH

@dataclass
class Player:
    """
    Runner character, fixed on x; the world scrolls left.
    - y is the offset of the feet ABOVE the ground line (y >= 0)
    - vy follows screen convention: negative = moving up
    - at rest: y == 0, vy == 0, is_jumping == False
    """
    x: float = float(PLAYER_X)
    y: float = 0.0
    vy: float = 0.0
    width: int = PLAYER_W
    height: int = PLAYER_H
    is_jumping: bool = False

    @property
    def grounded(self) -> bool:
        return (not self.is_jumping) and self.y == 0

    def reset(self):
        self.y = 0.0
        self.vy = 0.0
        self.is_jumping = False

    def jump(self, jump_strength: float = JUMP_STRENGTH) -> bool:
        """Start a jump only from the ground. Returns True if performed."""
        if self.grounded:
            self.vy = float(jump_strength)
            self.is_jumping = True
            return True
        return False

    def update_physics(self, gravity: float = GRAVITY):
        """One frame of vertical kinematics; lands exactly on the ground line."""
        if self.is_jumping or self.y > 0:
            self.vy += gravity
            self.y -= self.vy

            if self.y <= 0:
                self.y = 0.0
                self.vy = 0.0
                self.is_jumping = False

    def bounds(self, ground_y: float) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) in screen space for a given ground line."""
        bottom = ground_y - self.y
        return self.x, bottom - self.height, self.x + self.width, bottom

    def rect(self, ground_y: float) -> pygame.Rect:
        left, top, _, _ = self.bounds(ground_y)
        return pygame.Rect(int(left), int(top), self.width, self.height)
