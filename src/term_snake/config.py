"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a game session.

    Supports JSON serialization so a setup can be replayed with the same
    seed.
    """

    start_x: int = 10
    start_y: int = 10
    initial_length: int = 3
    tick_interval: float = 0.1
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.initial_length < 2:
            raise ValueError("initial_length must be at least 2.")
        if self.start_x < 1 or self.start_y < 1:
            raise ValueError("start position must lie inside the border.")
        if self.start_x - self.initial_length + 1 < 1:
            raise ValueError("initial snake body must lie inside the border.")
        if self.tick_interval < 0:
            raise ValueError("tick_interval must be non-negative.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file.

        Unreadable files and unknown keys are reported as ``ValueError``.
        """
        try:
            raw = json.loads(Path(path).read_text())
        except OSError as exc:
            raise ValueError(f"Cannot read config {path}: {exc}") from exc
        try:
            return cls(**raw)
        except TypeError as exc:
            raise ValueError(f"Invalid config {path}: {exc}") from exc
