"""Named Colors - Static Name to Color Table.

This module provides the table used by `Color.parse` to resolve color names
such as ``"Red"`` or ``"cornflowerblue"``. The table is a plain dict built
once at import time.

## Lookup Rules

Names are matched case-insensitively: the input is uppercased and compared
against the uppercased canonical names. Canonical names are PascalCase, the
same spelling used by CSS and XAML (``"AliceBlue"``, ``"LightGoldenrodYellow"``).

Example:
    ```python
    from argbcolor.colors import DEFAULT_TABLE

    DEFAULT_TABLE.lookup("red")           # Color(a=255, r=255, g=0, b=0)
    DEFAULT_TABLE["CornflowerBlue"]       # Color(a=255, r=100, g=149, b=237)
    DEFAULT_TABLE.lookup("NotAColor")     # None
    ```

## Custom Tables

A table can be extended with user-defined names. Entries from the extension
replace built-in entries of the same name, regardless of case:

    ```python
    table = DEFAULT_TABLE.merged({"Brand": Color.from_rgb(0x11, 0x22, 0x33)})
    Color.parse("brand", table=table)
    ```

`AppConfig.color_table()` builds exactly this from the user's palette.

## Aliases

Some colors have more than one name (``Aqua``/``Cyan``, ``Fuchsia``/``Magenta``).
`name_of` returns the first canonical name in table order.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Optional

from argbcolor.models.color import Color

logger = logging.getLogger(__name__)


NAMED_COLORS: dict[str, Color] = {
    "AliceBlue": Color.from_uint32(0xFFF0F8FF),
    "AntiqueWhite": Color.from_uint32(0xFFFAEBD7),
    "Aqua": Color.from_uint32(0xFF00FFFF),
    "Aquamarine": Color.from_uint32(0xFF7FFFD4),
    "Azure": Color.from_uint32(0xFFF0FFFF),
    "Beige": Color.from_uint32(0xFFF5F5DC),
    "Bisque": Color.from_uint32(0xFFFFE4C4),
    "Black": Color.from_uint32(0xFF000000),
    "BlanchedAlmond": Color.from_uint32(0xFFFFEBCD),
    "Blue": Color.from_uint32(0xFF0000FF),
    "BlueViolet": Color.from_uint32(0xFF8A2BE2),
    "Brown": Color.from_uint32(0xFFA52A2A),
    "BurlyWood": Color.from_uint32(0xFFDEB887),
    "CadetBlue": Color.from_uint32(0xFF5F9EA0),
    "Chartreuse": Color.from_uint32(0xFF7FFF00),
    "Chocolate": Color.from_uint32(0xFFD2691E),
    "Coral": Color.from_uint32(0xFFFF7F50),
    "CornflowerBlue": Color.from_uint32(0xFF6495ED),
    "Cornsilk": Color.from_uint32(0xFFFFF8DC),
    "Crimson": Color.from_uint32(0xFFDC143C),
    "Cyan": Color.from_uint32(0xFF00FFFF),
    "DarkBlue": Color.from_uint32(0xFF00008B),
    "DarkCyan": Color.from_uint32(0xFF008B8B),
    "DarkGoldenrod": Color.from_uint32(0xFFB8860B),
    "DarkGray": Color.from_uint32(0xFFA9A9A9),
    "DarkGreen": Color.from_uint32(0xFF006400),
    "DarkKhaki": Color.from_uint32(0xFFBDB76B),
    "DarkMagenta": Color.from_uint32(0xFF8B008B),
    "DarkOliveGreen": Color.from_uint32(0xFF556B2F),
    "DarkOrange": Color.from_uint32(0xFFFF8C00),
    "DarkOrchid": Color.from_uint32(0xFF9932CC),
    "DarkRed": Color.from_uint32(0xFF8B0000),
    "DarkSalmon": Color.from_uint32(0xFFE9967A),
    "DarkSeaGreen": Color.from_uint32(0xFF8FBC8F),
    "DarkSlateBlue": Color.from_uint32(0xFF483D8B),
    "DarkSlateGray": Color.from_uint32(0xFF2F4F4F),
    "DarkTurquoise": Color.from_uint32(0xFF00CED1),
    "DarkViolet": Color.from_uint32(0xFF9400D3),
    "DeepPink": Color.from_uint32(0xFFFF1493),
    "DeepSkyBlue": Color.from_uint32(0xFF00BFFF),
    "DimGray": Color.from_uint32(0xFF696969),
    "DodgerBlue": Color.from_uint32(0xFF1E90FF),
    "Firebrick": Color.from_uint32(0xFFB22222),
    "FloralWhite": Color.from_uint32(0xFFFFFAF0),
    "ForestGreen": Color.from_uint32(0xFF228B22),
    "Fuchsia": Color.from_uint32(0xFFFF00FF),
    "Gainsboro": Color.from_uint32(0xFFDCDCDC),
    "GhostWhite": Color.from_uint32(0xFFF8F8FF),
    "Gold": Color.from_uint32(0xFFFFD700),
    "Goldenrod": Color.from_uint32(0xFFDAA520),
    "Gray": Color.from_uint32(0xFF808080),
    "Green": Color.from_uint32(0xFF008000),
    "GreenYellow": Color.from_uint32(0xFFADFF2F),
    "Honeydew": Color.from_uint32(0xFFF0FFF0),
    "HotPink": Color.from_uint32(0xFFFF69B4),
    "IndianRed": Color.from_uint32(0xFFCD5C5C),
    "Indigo": Color.from_uint32(0xFF4B0082),
    "Ivory": Color.from_uint32(0xFFFFFFF0),
    "Khaki": Color.from_uint32(0xFFF0E68C),
    "Lavender": Color.from_uint32(0xFFE6E6FA),
    "LavenderBlush": Color.from_uint32(0xFFFFF0F5),
    "LawnGreen": Color.from_uint32(0xFF7CFC00),
    "LemonChiffon": Color.from_uint32(0xFFFFFACD),
    "LightBlue": Color.from_uint32(0xFFADD8E6),
    "LightCoral": Color.from_uint32(0xFFF08080),
    "LightCyan": Color.from_uint32(0xFFE0FFFF),
    "LightGoldenrodYellow": Color.from_uint32(0xFFFAFAD2),
    "LightGray": Color.from_uint32(0xFFD3D3D3),
    "LightGreen": Color.from_uint32(0xFF90EE90),
    "LightPink": Color.from_uint32(0xFFFFB6C1),
    "LightSalmon": Color.from_uint32(0xFFFFA07A),
    "LightSeaGreen": Color.from_uint32(0xFF20B2AA),
    "LightSkyBlue": Color.from_uint32(0xFF87CEFA),
    "LightSlateGray": Color.from_uint32(0xFF778899),
    "LightSteelBlue": Color.from_uint32(0xFFB0C4DE),
    "LightYellow": Color.from_uint32(0xFFFFFFE0),
    "Lime": Color.from_uint32(0xFF00FF00),
    "LimeGreen": Color.from_uint32(0xFF32CD32),
    "Linen": Color.from_uint32(0xFFFAF0E6),
    "Magenta": Color.from_uint32(0xFFFF00FF),
    "Maroon": Color.from_uint32(0xFF800000),
    "MediumAquamarine": Color.from_uint32(0xFF66CDAA),
    "MediumBlue": Color.from_uint32(0xFF0000CD),
    "MediumOrchid": Color.from_uint32(0xFFBA55D3),
    "MediumPurple": Color.from_uint32(0xFF9370DB),
    "MediumSeaGreen": Color.from_uint32(0xFF3CB371),
    "MediumSlateBlue": Color.from_uint32(0xFF7B68EE),
    "MediumSpringGreen": Color.from_uint32(0xFF00FA9A),
    "MediumTurquoise": Color.from_uint32(0xFF48D1CC),
    "MediumVioletRed": Color.from_uint32(0xFFC71585),
    "MidnightBlue": Color.from_uint32(0xFF191970),
    "MintCream": Color.from_uint32(0xFFF5FFFA),
    "MistyRose": Color.from_uint32(0xFFFFE4E1),
    "Moccasin": Color.from_uint32(0xFFFFE4B5),
    "NavajoWhite": Color.from_uint32(0xFFFFDEAD),
    "Navy": Color.from_uint32(0xFF000080),
    "OldLace": Color.from_uint32(0xFFFDF5E6),
    "Olive": Color.from_uint32(0xFF808000),
    "OliveDrab": Color.from_uint32(0xFF6B8E23),
    "Orange": Color.from_uint32(0xFFFFA500),
    "OrangeRed": Color.from_uint32(0xFFFF4500),
    "Orchid": Color.from_uint32(0xFFDA70D6),
    "PaleGoldenrod": Color.from_uint32(0xFFEEE8AA),
    "PaleGreen": Color.from_uint32(0xFF98FB98),
    "PaleTurquoise": Color.from_uint32(0xFFAFEEEE),
    "PaleVioletRed": Color.from_uint32(0xFFDB7093),
    "PapayaWhip": Color.from_uint32(0xFFFFEFD5),
    "PeachPuff": Color.from_uint32(0xFFFFDAB9),
    "Peru": Color.from_uint32(0xFFCD853F),
    "Pink": Color.from_uint32(0xFFFFC0CB),
    "Plum": Color.from_uint32(0xFFDDA0DD),
    "PowderBlue": Color.from_uint32(0xFFB0E0E6),
    "Purple": Color.from_uint32(0xFF800080),
    "Red": Color.from_uint32(0xFFFF0000),
    "RosyBrown": Color.from_uint32(0xFFBC8F8F),
    "RoyalBlue": Color.from_uint32(0xFF4169E1),
    "SaddleBrown": Color.from_uint32(0xFF8B4513),
    "Salmon": Color.from_uint32(0xFFFA8072),
    "SandyBrown": Color.from_uint32(0xFFF4A460),
    "SeaGreen": Color.from_uint32(0xFF2E8B57),
    "SeaShell": Color.from_uint32(0xFFFFF5EE),
    "Sienna": Color.from_uint32(0xFFA0522D),
    "Silver": Color.from_uint32(0xFFC0C0C0),
    "SkyBlue": Color.from_uint32(0xFF87CEEB),
    "SlateBlue": Color.from_uint32(0xFF6A5ACD),
    "SlateGray": Color.from_uint32(0xFF708090),
    "Snow": Color.from_uint32(0xFFFFFAFA),
    "SpringGreen": Color.from_uint32(0xFF00FF7F),
    "SteelBlue": Color.from_uint32(0xFF4682B4),
    "Tan": Color.from_uint32(0xFFD2B48C),
    "Teal": Color.from_uint32(0xFF008080),
    "Thistle": Color.from_uint32(0xFFD8BFD8),
    "Tomato": Color.from_uint32(0xFFFF6347),
    "Transparent": Color.from_uint32(0x00FFFFFF),
    "Turquoise": Color.from_uint32(0xFF40E0D0),
    "Violet": Color.from_uint32(0xFFEE82EE),
    "Wheat": Color.from_uint32(0xFFF5DEB3),
    "White": Color.from_uint32(0xFFFFFFFF),
    "WhiteSmoke": Color.from_uint32(0xFFF5F5F5),
    "Yellow": Color.from_uint32(0xFFFFFF00),
    "YellowGreen": Color.from_uint32(0xFF9ACD32),
}
"""Built-in named colors (CSS/XAML names plus Transparent)."""


class NamedColorTable(Mapping[str, Color]):
    """Case-insensitive, read-only mapping from color names to colors.

    Iteration yields canonical names in insertion order. When two names
    differ only by case, the later one wins.
    """

    def __init__(self, colors: Mapping[str, Color]):
        index: dict[str, tuple[str, Color]] = {}
        for name, color in colors.items():
            if not name or name.startswith("#"):
                raise ValueError(f"Invalid color name: {name!r}")
            index[name.upper()] = (name, color)

        self._index = index

    def lookup(self, name: str) -> Optional[Color]:
        """Return the color for `name` (any case), or None if unknown."""
        entry = self._index.get(name.upper())
        return entry[1] if entry is not None else None

    def __getitem__(self, name: str) -> Color:
        color = self.lookup(name)
        if color is None:
            raise KeyError(name)
        return color

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._index

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def names(self) -> list[str]:
        """Canonical names in table order."""
        return list(self)

    def name_of(self, color: Color) -> Optional[str]:
        """Return the first canonical name whose color equals `color`."""
        for name, candidate in self._index.values():
            if candidate == color:
                return name
        return None

    def merged(self, extra: Mapping[str, Color]) -> "NamedColorTable":
        """
        Build a new table with `extra` layered over this one.

        Args:
            extra: Additional names; these override existing names of any case

        Returns:
            A new NamedColorTable (this table is not modified)
        """
        overridden = {name.upper() for name in extra}
        combined = {
            name: color for name, color in self._index.values() if name.upper() not in overridden
        }
        combined.update(extra)

        if extra:
            logger.debug(f"Merged {len(extra)} custom color name(s) into table of {len(self)}")
        return NamedColorTable(combined)


DEFAULT_TABLE = NamedColorTable(NAMED_COLORS)


__all__ = ["DEFAULT_TABLE", "NAMED_COLORS", "NamedColorTable"]
