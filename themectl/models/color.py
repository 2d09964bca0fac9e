"""RGBA color model for theme styles."""

import re
from typing import Any

from pydantic import BaseModel, Field, model_validator

_HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class Color(BaseModel):
    """An 8-bit per channel RGBA color."""

    r: int = Field(..., ge=0, le=255, description="Red channel")
    g: int = Field(..., ge=0, le=255, description="Green channel")
    b: int = Field(..., ge=0, le=255, description="Blue channel")
    a: int = Field(default=0xFF, ge=0, le=255, description="Alpha channel")

    @model_validator(mode="before")
    @classmethod
    def parse_hex_string(cls, data: Any) -> Any:
        """Accept ``#RGB``, ``#RGBA``, ``#RRGGBB`` and ``#RRGGBBAA`` strings."""
        if isinstance(data, str):
            return cls._channels_from_hex(data)
        return data

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Build a color from a hex string such as ``#4f5b66``."""
        return cls(**cls._channels_from_hex(value))

    @staticmethod
    def _channels_from_hex(value: str) -> dict:
        text = value.strip()
        match = _HEX_COLOR_RE.match(text)
        if not match:
            raise ValueError(f"Invalid color {value!r}: expected #RGB, #RGBA, #RRGGBB or #RRGGBBAA")

        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)

        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        if len(channels) == 3:
            channels.append(0xFF)
        r, g, b, a = channels
        return {"r": r, "g": g, "b": b, "a": a}

    def to_hex(self) -> str:
        """Render as ``#rrggbb``, or ``#rrggbbaa`` when not fully opaque."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 0xFF:
            text += f"{self.a:02x}"
        return text

    def __str__(self) -> str:
        return self.to_hex()

    class Config:
        """Pydantic configuration."""
        frozen = True
