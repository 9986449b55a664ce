"""ARGB color value type."""

import string
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional, Union

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from argbcolor.exceptions import ColorFormatError

if TYPE_CHECKING:
    from argbcolor.colors import NamedColorTable


class Color(BaseModel):
    """An immutable 32-bit ARGB color.

    Four 8-bit channels (alpha, red, green, blue). The model is frozen so
    colors are hashable and can be used as dict keys; "changing" a channel
    means building a new Color.

    As a pydantic field type, a Color also accepts a color string (parsed
    with `Color.parse`) or a packed integer (`Color.from_uint32`), and
    serializes to its `#aarrggbb` string.

    Example:
        >>> Color.parse("#80ff0000")
        Color(a=128, r=255, g=0, b=0)
        >>> str(Color.from_rgb(255, 128, 0))
        '#ffff8000'
    """

    model_config = ConfigDict(frozen=True)

    a: int = Field(ge=0, le=255, description="Alpha (0-255)")
    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @model_validator(mode="before")
    @classmethod
    def coerce_color(cls, data: Any) -> Any:
        """Accept color strings and packed integers wherever a Color is expected."""
        if isinstance(data, str):
            return cls.parse(data)._channels()
        if isinstance(data, int) and not isinstance(data, bool):
            return cls.from_uint32(data)._channels()
        return data

    @model_serializer
    def serialize_color(self) -> str:
        """Serialize to the canonical '#aarrggbb' string."""
        return self.to_hex()

    def _channels(self) -> dict[str, int]:
        return {"a": self.a, "r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
        """Create a color from alpha, red, green and blue components."""
        return cls(a=a, r=r, g=g, b=b)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a fully opaque color from red, green and blue components."""
        return cls(a=0xFF, r=r, g=g, b=b)

    @classmethod
    def from_uint32(cls, value: int) -> "Color":
        """
        Create a color from a packed 32-bit integer.

        Byte layout, most significant first: alpha, red, green, blue.
        Bits above the low 32 are ignored.

        Example:
            >>> Color.from_uint32(0xFF336699)
            Color(a=255, r=51, g=102, b=153)
        """
        return cls(
            a=(value >> 24) & 0xFF,
            r=(value >> 16) & 0xFF,
            g=(value >> 8) & 0xFF,
            b=value & 0xFF,
        )

    @classmethod
    def from_vector4(
        cls, value: Union[Sequence[float], npt.ArrayLike], normalized: bool
    ) -> "Color":
        """
        Create a color from a 4-component vector ordered (X=red, Y=green, Z=blue, W=alpha).

        Components are float32. Normalized vectors (0.0-1.0) are scaled by 255
        first. Every component is then truncated toward zero and narrowed to
        8 bits by wrapping modulo 256, so out-of-range input wraps rather than
        clamps (256.0 -> 0, -1.0 -> 255).

        Args:
            value: Any 4-element sequence or numpy array
            normalized: True if components are 0.0-1.0, False if they are 0-255

        Raises:
            ValueError: If the vector does not have exactly 4 components
        """
        lanes = np.asarray(value, dtype=np.float32)
        if lanes.shape != (4,):
            raise ValueError(f"Expected a 4-component vector, got shape {lanes.shape}")

        if normalized:
            lanes = lanes * np.float32(255)

        # NaN, inf and values beyond int64 cast to an unspecified integer
        with np.errstate(invalid="ignore"):
            truncated = np.trunc(lanes).astype(np.int64)

        x, y, z, w = (int(lane) & 0xFF for lane in truncated)
        return cls(a=w, r=x, g=y, b=z)

    @classmethod
    def parse(cls, s: str, table: Optional["NamedColorTable"] = None) -> "Color":
        """
        Parse a color string.

        Accepted forms:
            - '#RRGGBB': alpha is forced to 0xFF
            - '#AARRGGBB': all four channels
            - a color name, matched case-insensitively against `table`
              (the built-in named colors when omitted)

        Raises:
            ColorFormatError: If the string has the wrong length, contains
                non-hex digits, or names no known color
        """
        if not isinstance(s, str):
            raise TypeError(f"Color string must be str, not {type(s).__name__}")

        if s.startswith("#"):
            if len(s) == 7:
                alpha_mask = 0xFF000000
            elif len(s) == 9:
                alpha_mask = 0
            else:
                raise ColorFormatError(s, f"Expected 7 or 9 characters, got {len(s)}")

            digits = s[1:]
            if not all(ch in string.hexdigits for ch in digits):
                raise ColorFormatError(s, f"'{digits}' is not a hexadecimal number")

            return cls.from_uint32(int(digits, 16) | alpha_mask)

        if table is None:
            from argbcolor.colors import DEFAULT_TABLE

            table = DEFAULT_TABLE

        color = table.lookup(s)
        if color is None:
            raise ColorFormatError(s, "Unknown color name")
        return color

    @classmethod
    def transparent(cls) -> "Color":
        """Create fully transparent white (the 'Transparent' named color)."""
        return cls(a=0, r=0xFF, g=0xFF, b=0xFF)

    def with_alpha(self, a: int) -> "Color":
        """Return a copy of this color with a different alpha."""
        return Color(a=a, r=self.r, g=self.g, b=self.b)

    def to_uint32(self) -> int:
        """Pack into a 32-bit integer (alpha in the most significant byte)."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_vector4(self, normalized: bool) -> npt.NDArray[np.float32]:
        """
        Convert to a float32 vector ordered (red, green, blue, alpha).

        Args:
            normalized: True for 0.0-1.0 components, False for 0-255
        """
        vector = np.array([self.r, self.g, self.b, self.a], dtype=np.float32)
        if normalized:
            vector /= np.float32(255)
        return vector

    def to_argb_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (a, r, g, b) tuple."""
        return (self.a, self.r, self.g, self.b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to (r, g, b) tuple, dropping alpha."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to the canonical '#aarrggbb' string (lowercase, zero-padded).

        Example:
            >>> Color.from_rgb(255, 0, 0).to_hex()
            '#ffff0000'
        """
        return f"#{self.to_uint32():08x}"

    def __str__(self) -> str:
        return self.to_hex()
