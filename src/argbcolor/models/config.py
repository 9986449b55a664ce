"""Application configuration model."""

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, field_validator

from .color import Color

if TYPE_CHECKING:
    from argbcolor.colors import NamedColorTable


DEFAULT_CONFIG_PATH = Path.home() / ".argbcolor" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # User-defined color names, layered over the built-in table
    palette: dict[str, Color] = Field(
        default_factory=dict,
        description=(
            "Custom named colors, e.g. {\"Brand\": \"#ff112233\"}. "
            "Names are case-insensitive and override built-in names."
        ),
    )

    # CLI defaults
    output_format: Literal["hex", "uint32", "channels"] = Field(
        default="hex", description="Default output format for 'argbcolor parse'"
    )

    @field_validator("palette")
    @classmethod
    def validate_palette_names(cls, palette: dict[str, Color]) -> dict[str, Color]:
        """Reject names that could never be looked up by Color.parse."""
        for name in palette:
            if not name or name.startswith("#"):
                raise ValueError(f"Color name must be non-empty and not start with '#': {name!r}")
        return palette

    def color_table(self) -> "NamedColorTable":
        """Built-in named colors merged with this config's palette."""
        from argbcolor.colors import DEFAULT_TABLE

        return DEFAULT_TABLE.merged(self.palette)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.argbcolor/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        from argbcolor.utils.persistence import PydanticPersistence

        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (keeps a .bak of the previous file)."""
        from argbcolor.utils.persistence import PydanticPersistence

        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
