"""
Color notation conversions.

Supported notations:

- hex: ``#rrggbb`` or ``#rrggbbaa``
- rgb: ``rgb(r, g, b)`` or ``rgb(r, g, b, a)`` with integer channels 0-255
- hsl: ``hsl(Hdeg, S%, L%)`` or ``hsl(Hdeg, S%, L%, alpha)`` with alpha 0-1
- cmyk: ``cmyk(C%, M%, Y%, K%)`` (accepted by the color code converter only)

Hex output is lower-case. Channel values are rounded to the nearest integer.
"""

from __future__ import annotations

import colorsys
import re
from abc import abstractmethod
from dataclasses import dataclass

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory

_HEX_COLOR = re.compile(r"#([0-9A-Fa-f]{6})([0-9A-Fa-f]{2})?")
_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def _functional_args(text: str, prefix: str, counts: tuple[int, ...]) -> list[str]:
    """Split ``prefix(a, b, c)`` into its trimmed arguments."""
    body = text.strip()
    if not body.lower().startswith(prefix + "(") or not body.endswith(")"):
        raise InvalidInputError(f"Invalid {prefix.upper()} format. Must look like {prefix}(...)")
    parts = [part.strip() for part in body[len(prefix) + 1 : -1].split(",")]
    if len(parts) not in counts:
        raise InvalidInputError(f"Invalid {prefix.upper()} format: expected {' or '.join(map(str, counts))} values")
    return parts


def _number(part: str, suffix: str = "") -> float:
    if suffix and part.lower().endswith(suffix):
        part = part[: -len(suffix)].strip()
    if not _NUMBER.fullmatch(part):
        raise InvalidInputError(f"Invalid color value: '{part}'")
    return float(part)


@dataclass(frozen=True)
class Color:
    """
    An sRGB color with an optional alpha channel.

    Parameters
    ----------
    r, g, b : int
        Channels in 0-255.
    a : int or None
        Alpha in 0-255, or None when the source had no alpha.
    """

    r: int
    g: int
    b: int
    a: int | None = None

    @classmethod
    def from_hex(cls, text: str) -> Color:
        match = _HEX_COLOR.fullmatch(text.strip())
        if not match:
            raise InvalidInputError("Invalid hex color. Expected #rrggbb or #rrggbbaa")
        rgb, alpha = match.groups()
        r, g, b = (int(rgb[i : i + 2], 16) for i in (0, 2, 4))
        return cls(r, g, b, int(alpha, 16) if alpha else None)

    @classmethod
    def from_rgb(cls, text: str) -> Color:
        parts = _functional_args(text, "rgb", (3, 4))
        values = []
        for part in parts:
            if not part.isdigit() or int(part) > 255:
                raise InvalidInputError(f"Invalid RGB value: '{part}' (expected an integer 0-255)")
            values.append(int(part))
        return cls(*values)

    @classmethod
    def from_hsl(cls, text: str) -> Color:
        parts = _functional_args(text, "hsl", (3, 4))
        hue = _number(parts[0], "deg")
        saturation = min(max(_number(parts[1], "%") / 100.0, 0.0), 1.0)
        lightness = min(max(_number(parts[2], "%") / 100.0, 0.0), 1.0)
        r, g, b = colorsys.hls_to_rgb((hue / 360.0) % 1.0, lightness, saturation)
        alpha = _channel(_number(parts[3])) if len(parts) == 4 else None
        return cls(_channel(r), _channel(g), _channel(b), alpha)

    @classmethod
    def from_cmyk(cls, text: str) -> Color:
        parts = _functional_args(text, "cmyk", (4, 5))
        c, m, y, k = (min(max(_number(part, "%") / 100.0, 0.0), 1.0) for part in parts[:4])
        alpha = _channel(_number(parts[4])) if len(parts) == 5 else None
        return cls(
            _channel((1 - c) * (1 - k)),
            _channel((1 - m) * (1 - k)),
            _channel((1 - y) * (1 - k)),
            alpha,
        )

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse any supported notation, dispatching on its prefix."""
        body = text.strip().lower()
        if body.startswith("#"):
            return cls.from_hex(body)
        for prefix, parser in (("rgb(", cls.from_rgb), ("hsl(", cls.from_hsl), ("cmyk(", cls.from_cmyk)):
            if body.startswith(prefix):
                return parser(body)
        raise InvalidInputError("Unsupported color format. Use #hex, rgb(), hsl() or cmyk()")

    def to_hex(self) -> str:
        alpha = f"{self.a:02x}" if self.a is not None else ""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{alpha}"

    def to_rgb(self) -> str:
        channels = [self.r, self.g, self.b] + ([self.a] if self.a is not None else [])
        return f"rgb({','.join(map(str, channels))})"

    def to_hsl(self) -> str:
        hue, lightness, saturation = colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)
        text = f"hsl({hue * 360:.0f}deg,{saturation * 100:.0f}%,{lightness * 100:.0f}%"
        if self.a is not None:
            text += f",{self.a / 255:.2f}"
        return text + ")"

    def to_cmyk(self) -> str:
        r, g, b = self.r / 255, self.g / 255, self.b / 255
        k = 1 - max(r, g, b)
        if k >= 1.0:
            c = m = y = 0.0
        else:
            c, m, y = ((1 - channel - k) / (1 - k) for channel in (r, g, b))
        text = f"cmyk({c * 100:.0f}%,{m * 100:.0f}%,{y * 100:.0f}%,{k * 100:.0f}%"
        if self.a is not None:
            text += f",{self.a / 255:.2f}"
        return text + ")"


class _ColorConversion(Transformer):
    """Parse one notation (checked by prefix) and render another."""

    category = TransformerCategory.COLOR
    source_prefix: str
    source_label: str

    def transform(self, text: str) -> str:
        if not text.strip().lower().startswith(self.source_prefix):
            raise InvalidInputError(
                f"Invalid {self.source_label} color format. Must start with {self.source_prefix}"
            )
        return self.render(Color.parse(text))

    @abstractmethod
    def render(self, color: Color) -> str:
        """Format the parsed color in the target notation."""


class HexToRgb(_ColorConversion):
    id = "hextorgb"
    name = "Hex to RGB"
    description = "Convert a hex color code to RGB format"
    default_test_input = "#FF0000"
    source_prefix, source_label = "#", "hex"

    def render(self, color: Color) -> str:
        return color.to_rgb()


class RgbToHex(_ColorConversion):
    id = "rgbtohex"
    name = "RGB to Hex"
    description = "Convert an RGB color to hex format"
    default_test_input = "rgb(255, 0, 0)"
    source_prefix, source_label = "rgb(", "RGB"

    def render(self, color: Color) -> str:
        return color.to_hex()


class HexToHsl(_ColorConversion):
    id = "hextohsl"
    name = "Hex to HSL"
    description = "Convert a hex color code to HSL format"
    default_test_input = "#00FF00"
    source_prefix, source_label = "#", "hex"

    def render(self, color: Color) -> str:
        return color.to_hsl()


class HslToHex(_ColorConversion):
    id = "hsltohex"
    name = "HSL to Hex"
    description = "Convert an HSL color to hex format"
    default_test_input = "hsl(120deg, 100%, 50%)"
    source_prefix, source_label = "hsl(", "HSL"

    def render(self, color: Color) -> str:
        return color.to_hex()


class RgbToHsl(_ColorConversion):
    id = "rgbtohsl"
    name = "RGB to HSL"
    description = "Convert an RGB color to HSL format"
    default_test_input = "rgb(0, 0, 255)"
    source_prefix, source_label = "rgb(", "RGB"

    def render(self, color: Color) -> str:
        return color.to_hsl()


class HslToRgb(_ColorConversion):
    id = "hsltorgb"
    name = "HSL to RGB"
    description = "Convert an HSL color to RGB format"
    default_test_input = "hsl(240deg, 100%, 50%)"
    source_prefix, source_label = "hsl(", "HSL"

    def render(self, color: Color) -> str:
        return color.to_rgb()


class ColorCodeConvert(Transformer):
    id = "colorcodeconvert"
    name = "Color Code Converter"
    description = "Show a color in HEX, RGB, HSL and CMYK notation"
    category = TransformerCategory.OTHER
    default_test_input = "#FF0000"

    def transform(self, text: str) -> str:
        color = Color.parse(text)
        return "\n".join(
            (
                f"HEX: {color.to_hex()}",
                f"RGB: {color.to_rgb()}",
                f"HSL: {color.to_hsl()}",
                f"CMYK: {color.to_cmyk()}",
            )
        )
