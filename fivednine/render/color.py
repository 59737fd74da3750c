"""8-bit RGB colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ColorRGB:
    """An RGB colour with 0-255 channels."""

    r: int
    g: int
    b: int

    BLACK: ClassVar["ColorRGB"]
    WHITE: ClassVar["ColorRGB"]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")

    def normalized(self) -> tuple[float, float, float]:
        """Channels scaled to the 0.0-1.0 range."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)


ColorRGB.BLACK = ColorRGB(0x00, 0x00, 0x00)
ColorRGB.WHITE = ColorRGB(0xFF, 0xFF, 0xFF)