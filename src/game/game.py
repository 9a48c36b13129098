# src/game/game.py
import sys, argparse
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE
from .config import WIDTH, HEIGHT, FPS, HIGHSCORE_FILE, GameConfig
from .highscore import HighScoreStore
from .loop import FrameScheduler, GameLoop
from .render import Renderer
from .session import GameSession

JUMP_KEYS = (K_SPACE, K_UP)

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Dino runner: jump over obstacles, survive as long as you can.")
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle spawner seed. Omit for a random layout each launch.")
    p.add_argument("--highscore-file", type=str, default=HIGHSCORE_FILE,
                   help="JSON file holding the persisted high score.")
    p.add_argument("--fps", type=int, default=FPS, help="Display refresh cap.")
    args = p.parse_args(argv)
    if args.fps <= 0:
        p.error("--fps must be positive")
    return args

def run(argv=None):
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption("Dino Runner")
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    store = HighScoreStore(args.highscore_file)
    session = GameSession(GameConfig(), store=store, width=WIDTH, height=HEIGHT, seed=args.seed)
    renderer = Renderer(screen)
    scheduler = FrameScheduler()
    loop = GameLoop(session, scheduler, render=renderer)

    print(f"✓ Dino Runner ready (seed={session.obstacles.seed}, best={session.high_score})")
    renderer(session)  # idle screen

    while True:
        clock.tick(args.fps)
        now_ms = float(pygame.time.get_ticks())

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in JUMP_KEYS:
                    loop.handle_jump(now_ms)
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                loop.handle_jump(now_ms)
            if event.type == pygame.VIDEORESIZE:
                renderer.surf = pygame.display.get_surface()
                loop.on_resize(event.w, event.h)

        was_running = session.running
        scheduler.run_pending(now_ms)
        if was_running and not session.running:
            print(f"Game over: score={session.final_score} best={session.high_score}")

        pygame.display.flip()

if __name__ == "__main__":
    run()
