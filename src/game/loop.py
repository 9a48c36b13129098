# src/game/loop.py
from __future__ import annotations
from typing import Callable, List, Optional
from .session import GameSession

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    "Run this on the next frame" queue. The host calls run_pending() once per
    display refresh; callbacks requested while running wait for the following frame.
    """

    def __init__(self):
        self._pending: List[FrameCallback] = []

    def request(self, callback: FrameCallback):
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_pending(self, timestamp_ms: float) -> int:
        batch, self._pending = self._pending, []
        for callback in batch:
            callback(timestamp_ms)
        return len(batch)


class GameLoop:
    """Frame driver: step then render, re-requesting itself while the session runs."""

    def __init__(self,
                 session: GameSession,
                 scheduler: FrameScheduler,
                 render: Optional[Callable[[GameSession], None]] = None):
        self.session = session
        self.scheduler = scheduler
        self.render = render
        self.ticks = 0
        self._frame_requested = False

    def _request_frame(self):
        # at most one frame chain: a restart reuses a frame still queued from the last session
        if not self._frame_requested:
            self._frame_requested = True
            self.scheduler.request(self.tick)

    def begin(self, now_ms: float):
        """Start a fresh session and request its first frame."""
        self.session.start(now_ms)
        self._request_frame()

    def handle_jump(self, now_ms: float):
        """Input entry point: jump while running, otherwise begin a session."""
        if self.session.running:
            self.session.handle_jump(now_ms)
        else:
            self.begin(now_ms)

    def tick(self, timestamp_ms: float):
        self._frame_requested = False
        # stale frames after game over land here and do nothing
        if not self.session.running:
            return

        self.session.advance_clock(timestamp_ms)
        self.session.step()
        if self.render is not None:
            self.render(self.session)
        self.ticks += 1

        self._request_frame()

    def on_resize(self, width: int, height: int):
        self.session.resize(width, height)
        if not self.session.running and self.render is not None:
            self.render(self.session)
