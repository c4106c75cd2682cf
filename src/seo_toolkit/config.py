from dotenv import load_dotenv
from dataclasses import dataclass, field
from typing import Tuple
from pathlib import Path
import json
import os

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")

    # Origin shown in the search result preview when no site URL is given
    SITE_ORIGIN = os.getenv("SITE_ORIGIN", "https://site.com")

    # Icon generation
    THEME_COLOR = os.getenv("THEME_COLOR", "#ffffff")
    ICON_OUTPUT_DIR = os.getenv("ICON_OUTPUT_DIR", "icons")


settings = Settings()


@dataclass
class ToolkitThresholds:
    """Configurable thresholds for the authoring tools."""

    # Title length bands (characters)
    title_min: int = 30
    title_max: int = 60
    title_long_max: int = 70

    # Meta description length bands (characters)
    description_min: int = 120
    description_max: int = 165
    description_long_max: int = 180

    # WCAG contrast ratios
    contrast_aa_normal: float = 4.5
    contrast_aa_large: float = 3.0
    contrast_aaa_normal: float = 7.0
    contrast_aaa_large: float = 4.5

    # Square icon sizes in pixels
    icon_sizes: Tuple[int, ...] = field(default=(16, 32, 180))

    @classmethod
    def from_env(cls) -> "ToolkitThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with SEO_TOOLKIT_
        e.g., SEO_TOOLKIT_TITLE_MAX=65

        Returns:
            ToolkitThresholds with values from environment
        """
        thresholds = cls()
        prefix = "SEO_TOOLKIT_"

        for field_name in thresholds.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                field_type = thresholds.__dataclass_fields__[field_name].type
                try:
                    if field_type == int:
                        setattr(thresholds, field_name, int(env_value))
                    elif field_type == float:
                        setattr(thresholds, field_name, float(env_value))
                    elif field_name == 'icon_sizes':
                        sizes = tuple(int(s) for s in env_value.split(',') if s.strip())
                        if sizes:
                            thresholds.icon_sizes = sizes
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "ToolkitThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            ToolkitThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                value = threshold_config[field_name]
                if field_name == 'icon_sizes':
                    value = tuple(value)
                setattr(thresholds, field_name, value)

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary.

        Returns:
            Dictionary of all threshold values
        """
        return {
            field_name: (
                list(getattr(self, field_name))
                if field_name == 'icon_sizes'
                else getattr(self, field_name)
            )
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current thresholds to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds, overridable with SEO_TOOLKIT_* environment variables
default_thresholds = ToolkitThresholds.from_env()
