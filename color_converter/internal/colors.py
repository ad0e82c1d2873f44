from dataclasses import dataclass
from collections.abc import Mapping
import math
import numbers
import re


HEX_COLOR_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")


class ColorConversionError(ValueError):
    pass


class InvalidFormat(ColorConversionError):
    def __init__(self, message: str = "Invalid hex color"):
        super().__init__(message)


class InvalidRgb(ColorConversionError):
    def __init__(self, message: str = "Invalid RGB components. Each must be an integer between 0 and 255"):
        super().__init__(message)


def _channel(value) -> int:
    # bool is an int subclass but never a channel
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidRgb()
    if not math.isfinite(value) or value != int(value):
        raise InvalidRgb()
    value = int(value)
    if value < 0 or value > 255:
        raise InvalidRgb()
    return value


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    def __post_init__(self):
        object.__setattr__(self, "r", _channel(self.r))
        object.__setattr__(self, "g", _channel(self.g))
        object.__setattr__(self, "b", _channel(self.b))

    def __str__(self):
        return f"RgbColor({self.r}, {self.g}, {self.b}, {self.hex})"

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "RgbColor":
        try:
            return cls(mapping["r"], mapping["g"], mapping["b"])
        except (KeyError, TypeError):
            raise InvalidRgb() from None


def hex_to_rgb(hex_color: str) -> RgbColor:
    """Parse ``RRGGBB`` or ``#RRGGBB`` (any case) into an RgbColor.

    Raises InvalidFormat unless the whole string matches.
    """
    if not isinstance(hex_color, str) or not HEX_COLOR_PATTERN.fullmatch(hex_color):
        raise InvalidFormat()

    clean_hex = hex_color.removeprefix("#")
    return RgbColor(
        int(clean_hex[0:2], base=16),
        int(clean_hex[2:4], base=16),
        int(clean_hex[4:6], base=16),
    )


def rgb_to_hex(r, g, b) -> str:
    """Format three channels as ``#RRGGBB``. Raises InvalidRgb on any bad channel."""
    return RgbColor(r, g, b).hex


def rgb_color_to_hex(color) -> str:
    """Same as rgb_to_hex, for any record exposing ``r``, ``g`` and ``b``."""
    try:
        r, g, b = color.r, color.g, color.b
    except AttributeError:
        raise InvalidRgb() from None
    return rgb_to_hex(r, g, b)
