from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass
class GenerationSettings:
    """Dungeon size and seed.

    The defaults reproduce the classic 21x21 board with 50 rooms. Values can
    be overridden from the environment (prefix ``ZB_``).
    """

    width: int = 21
    height: int = 21
    target_room_count: int = 50
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.target_room_count <= 0:
            raise ValueError("target_room_count must be positive")
        if self.width % 2 == 0 or self.height % 2 == 0:
            logger.warning(
                "Even board dimensions %dx%d have no unique center; start will be at %s",
                self.width,
                self.height,
                (self.height // 2, self.width // 2),
            )

    @staticmethod
    def env_overrides(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        mapping = {
            "ZB_WIDTH": "width",
            "ZB_HEIGHT": "height",
            "ZB_ROOMS": "target_room_count",
            "ZB_SEED": "seed",
        }
        out: Dict[str, Any] = {}
        for env_key, field_name in mapping.items():
            raw = env.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                out[field_name] = int(raw)
            except ValueError:
                logger.error("Invalid env for %s=%r; ignoring", env_key, raw)
        return out

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GenerationSettings":
        return cls(**cls.env_overrides(env))
