# src/tests/test_runner_env.py
"""
Quick tests for RunnerEnv (Gymnasium environment).

Usage (from repo root):
  python -m pytest src/tests/test_runner_env.py
  python -m src.tests.test_runner_env
  python -m src.tests.test_runner_env --render
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from src.env.runner_env import RunnerEnv
from src.game.config import HEIGHT, WIDTH

FRAME_SKIP = 4
SEED = 123
STEPS = 300


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RunnerEnv(frame_skip=FRAME_SKIP)
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_smoke():
    """Short random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = RunnerEnv(frame_skip=FRAME_SKIP)
    try:
        obs, info = env.reset(seed=SEED)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == SEED

        for t in range(STEPS):
            a = env.action_space.sample()
            obs, r, term, trunc, info = env.step(a)
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_noop_policy_eventually_dies():
    env = RunnerEnv(frame_skip=FRAME_SKIP, time_limit_seconds=None)
    try:
        env.reset(seed=SEED)
        term = False
        r = 0.0
        for _ in range(2000):
            _, r, term, trunc, info = env.step(0)
            assert not trunc
            if term:
                break
        assert term, "Standing still must hit an obstacle"
        assert r == -1.0, "Death step is penalized"
        assert info["display_score"] >= 0
    finally:
        env.close()


def test_time_limit_truncates():
    env = RunnerEnv(frame_skip=FRAME_SKIP, time_limit_seconds=1.0)
    try:
        env.reset(seed=SEED)
        steps = 0
        while True:
            _, _, term, trunc, _ = env.step(0)
            steps += 1
            if term or trunc:
                break
        assert trunc and not term, "Obstacles cannot reach the player within one second"
        assert steps == 60 // FRAME_SKIP
    finally:
        env.close()


def test_determinism():
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RunnerEnv(frame_skip=FRAME_SKIP)
        traj: List[Tuple[np.ndarray, float, bool, bool]] = []
        try:
            env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.randint(0, 2)) for _ in range(STEPS)]

    t1 = rollout(SEED, action_seq)
    t2 = rollout(SEED, action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.allclose(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_rgb_array_render():
    env = RunnerEnv(render_mode="rgb_array", frame_skip=FRAME_SKIP)
    try:
        env.reset(seed=SEED)
        env.step(1)
        frame = env.render()
        assert isinstance(frame, np.ndarray) and frame.shape == (HEIGHT, WIDTH, 3), "Frame shape mismatch"
        assert frame.dtype == np.uint8
    finally:
        env.close()


def render_demo(steps: int, seed: int, frame_skip: int) -> None:
    """Open a window and run a short NOOP demo to eyeball scrolling and collisions."""
    env = RunnerEnv(render_mode="human", frame_skip=frame_skip)
    try:
        env.reset(seed=seed)
        for _ in range(steps):
            _, _, term, trunc, _ = env.step(0)
            if term or trunc:
                break
    finally:
        env.close()
    print("✓ Render demo finished")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=SEED, help="Episode seed for the render demo")
    ap.add_argument("--frame-skip", type=int, default=FRAME_SKIP, help="Sim frames per decision step")
    ap.add_argument("--render", action="store_true", help="Run a short visual demo")
    args = ap.parse_args()

    try:
        test_api_check(); print("✓ API check ok")
        test_smoke(); print("✓ Smoke test ok")
        test_noop_policy_eventually_dies(); print("✓ NOOP death ok")
        test_time_limit_truncates(); print("✓ Truncation ok")
        test_determinism(); print("✓ Determinism ok")
        test_rgb_array_render(); print("✓ rgb_array ok")
        if args.render:
            render_demo(steps=600, seed=args.seed, frame_skip=args.frame_skip)
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
