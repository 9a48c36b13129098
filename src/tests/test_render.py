# src/tests/test_render.py
import pygame
from src.game.config import COLOR_SKY_TOP, COLOR_GROUND, COLOR_PLAYER, COLOR_OBSTACLE
from src.game.obstacles import Obstacle
from src.game.render import gradient_color, draw_scene
from src.game.session import GameSession

def test_gradient_endpoints():
    assert gradient_color(0.0) == COLOR_SKY_TOP
    assert gradient_color(1.0) == COLOR_GROUND
    assert gradient_color(-3.0) == COLOR_SKY_TOP and gradient_color(7.0) == COLOR_GROUND, "t is clamped"

def test_scene_without_display():
    """Headless draw onto a plain Surface: player and obstacle land where the session says."""
    s = GameSession(width=400, height=300, seed=1)
    s.start()
    s.obstacles.obstacles.append(Obstacle(x=250.0))
    surf = pygame.Surface((s.width, s.height))
    draw_scene(surf, s)

    gy = int(s.ground_y)
    p = s.player
    assert tuple(surf.get_at((int(p.x) + 5, gy - 5)))[:3] == COLOR_PLAYER, "Player stands on the ground line"
    assert tuple(surf.get_at((255, gy - 30)))[:3] == COLOR_OBSTACLE, "Obstacle rises from the ground line"
    assert tuple(surf.get_at((5, s.height - 5)))[:3] == COLOR_GROUND, "Ground band fills the bottom"

def main():
    test_gradient_endpoints()
    test_scene_without_display()
    print("✓ Render tests passed")

if __name__ == "__main__":
    main()
