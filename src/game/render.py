# src/game/render.py
from __future__ import annotations
from typing import Optional, Sequence, Tuple
import pygame
from .config import (
    COLOR_SKY_TOP, COLOR_SKY_MID, COLOR_GROUND, COLOR_GROUND_LINE,
    COLOR_PLAYER, COLOR_OBSTACLE, COLOR_FG, COLOR_PANEL
)
from .session import GameSession, SessionState

Color = Tuple[int, int, int]
SKY_STOPS: Sequence[Tuple[float, Color]] = (
    (0.0, COLOR_SKY_TOP),
    (0.6, COLOR_SKY_MID),
    (1.0, COLOR_GROUND),
)


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(int(round(a[i] + (b[i] - a[i]) * t)) for i in range(3))  # type: ignore[return-value]


def gradient_color(t: float, stops: Sequence[Tuple[float, Color]] = SKY_STOPS) -> Color:
    """Color at t in [0,1] along piecewise-linear stops."""
    t = 0.0 if t < 0.0 else (1.0 if t > 1.0 else t)
    for (t0, c0), (t1, c1) in zip(stops, stops[1:]):
        if t <= t1:
            span = max(1e-8, t1 - t0)
            return _lerp_color(c0, c1, (t - t0) / span)
    return stops[-1][1]


def draw_background(surf: pygame.Surface):
    w, h = surf.get_size()
    denom = max(1, h - 1)
    for y in range(h):
        pygame.draw.line(surf, gradient_color(y / denom), (0, y), (w, y))


def draw_ground(surf: pygame.Surface, ground_y: float, ground_height: int):
    w = surf.get_width()
    gy = int(ground_y)
    pygame.draw.rect(surf, COLOR_GROUND, pygame.Rect(0, gy, w, ground_height))
    pygame.draw.line(surf, COLOR_GROUND_LINE, (0, gy), (w, gy), 3)


def draw_obstacles(surf: pygame.Surface, session: GameSession):
    gy = session.ground_y
    for ob in session.obstacles:
        rect = pygame.Rect(int(ob.x), int(gy - ob.height), ob.width, ob.height)
        pygame.draw.rect(surf, COLOR_OBSTACLE, rect)


def draw_player(surf: pygame.Surface, session: GameSession):
    pygame.draw.rect(surf, COLOR_PLAYER, session.player.rect(session.ground_y))


def draw_scene(surf: pygame.Surface, session: GameSession):
    """World only (no text): background, ground, obstacles, player."""
    surf.fill((0, 0, 0))
    draw_background(surf)
    draw_ground(surf, session.ground_y, session.config.ground_height)
    draw_obstacles(surf, session)
    draw_player(surf, session)


class Renderer:
    """Scene + HUD + start/game-over overlays onto one surface."""

    def __init__(self, surf: pygame.Surface, font: Optional[pygame.font.Font] = None,
                 big_font: Optional[pygame.font.Font] = None):
        self.surf = surf
        self.font = font or pygame.font.SysFont("jetbrainsmono", 18)
        self.big_font = big_font or pygame.font.SysFont("jetbrainsmono", 36, bold=True)

    def __call__(self, session: GameSession):
        self.draw(session)

    def draw(self, session: GameSession):
        draw_scene(self.surf, session)
        self._draw_hud(session)
        if session.state is SessionState.IDLE:
            self._draw_panel("DINO RUNNER", "SPACE / click to start")
        elif session.state is SessionState.GAME_OVER:
            self._draw_panel("GAME OVER", f"Score: {session.final_score}   SPACE / click to restart")

    def _draw_hud(self, session: GameSession):
        score = session.final_score if session.final_score is not None else session.display_score
        hud = f"Score: {score}   Best: {session.high_score}"
        txt = self.font.render(hud, True, COLOR_FG)
        self.surf.blit(txt, (self.surf.get_width() - txt.get_width() - 16, 12))

    def _draw_panel(self, title: str, subtitle: str):
        w, h = self.surf.get_size()
        t1 = self.big_font.render(title, True, COLOR_FG)
        t2 = self.font.render(subtitle, True, COLOR_FG)
        panel_w = max(t1.get_width(), t2.get_width()) + 48
        panel_h = t1.get_height() + t2.get_height() + 40
        panel = pygame.Rect((w - panel_w) // 2, (h - panel_h) // 2, panel_w, panel_h)
        pygame.draw.rect(self.surf, COLOR_PANEL, panel, border_radius=10)
        pygame.draw.rect(self.surf, COLOR_GROUND_LINE, panel, width=2, border_radius=10)
        self.surf.blit(t1, (panel.centerx - t1.get_width() // 2, panel.top + 14))
        self.surf.blit(t2, (panel.centerx - t2.get_width() // 2, panel.top + 20 + t1.get_height()))
