"""Application configuration model.

Only the command line reads this; the library itself takes everything it
needs as explicit arguments.
"""

from pathlib import Path

from pydantic import BaseModel, Field

from huekit.utils.persistence import PydanticPersistence

from .enums import ColorFormat, WcagLevel, WcagSize

DEFAULT_CONFIG_PATH = Path.home() / ".huekit" / "config.json"


class AppConfig(BaseModel):
    """Defaults applied by the huekit command line."""

    # Output
    output_format: ColorFormat | None = Field(
        default=None,
        description="Format for printed colors (None = each color's own format)",
    )

    # Readability
    wcag_level: WcagLevel = Field(default=WcagLevel.AA, description="WCAG2 level for checks")
    wcag_size: WcagSize = Field(default=WcagSize.SMALL, description="Text size for checks")
    include_fallback_colors: bool = Field(
        default=True,
        description="Let 'readable' fall back to white or black",
    )

    # Schemes
    analogous_results: int = Field(default=6, ge=1, description="Colors in an analogous scheme")
    analogous_slices: int = Field(default=30, ge=1, description="Hue wheel slices for analogous")
    monochromatic_results: int = Field(
        default=6, ge=1, description="Colors in a monochromatic scheme"
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return defaults if the file is missing.

        Args:
            path: Path to config file. If None, uses ~/.huekit/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file, keeping a .bak of the previous one."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
