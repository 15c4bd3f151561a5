"""8-bit RGB colour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

_CHANNELS = ("red", "green", "blue")


@dataclass
class Color:
    """An RGB colour with channels in 0..255."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _CHANNELS:
            value = int(value)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {value}")
        super().__setattr__(name, value)

    @staticmethod
    def white() -> Color:
        return Color(255, 255, 255)

    def to_floats(self) -> np.ndarray:
        """Channels scaled to 0..1."""
        return np.array([self.red, self.green, self.blue], dtype=np.float64) / 255.0

    def to_padded_floats(self) -> np.ndarray:
        """Channels scaled to 0..1 followed by a zero fourth component."""
        return np.append(self.to_floats(), 0.0)

    def to_number(self) -> int:
        """Pack as red in the low byte, then green, then blue."""
        return self.red | (self.green << 8) | (self.blue << 16)