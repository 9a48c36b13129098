# src/game/highscore.py
from __future__ import annotations
import json
from pathlib import Path
from .config import HIGHSCORE_KEY, HIGHSCORE_FILE


class HighScoreStore:
    """Single named integer in a JSON file, e.g. {"dinoHighScore": 55}."""

    def __init__(self, path: str | Path = HIGHSCORE_FILE, key: str = HIGHSCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        """Stored value, or 0 when the file or key is missing or the file is unreadable."""
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return int(data.get(self.key, 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            print(f"[WARN] ignoring unreadable high score file {self.path}: {e}")
            return 0

    def save(self, value: int):
        data = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except ValueError:
                data = {}
            if not isinstance(data, dict):
                data = {}
        data[self.key] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class MemoryHighScoreStore:
    """Same interface, nothing touches disk (tests, agent env)."""

    def __init__(self, value: int = 0):
        self.value = int(value)
        self.writes = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int):
        self.value = int(value)
        self.writes += 1
