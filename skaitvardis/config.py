"""Converter and normalizer configuration using Pydantic."""

import json
import logging
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skaitvardis.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConverterConfig(BaseModel):
    """Number converter configuration."""

    model_config = ConfigDict(frozen=True)

    # Drop "vienas" before scales that do not speak a count of one
    elide_count_of_one: bool = False


class NormalizerConfig(BaseModel):
    """Text normalization configuration."""

    convert_numbers: bool = True
    remove_extra_spaces: bool = True
    lowercase: bool = False
    custom_replacements: dict[str, str] = Field(default_factory=dict)

    converter: ConverterConfig = Field(default_factory=ConverterConfig)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path) -> Self:
        """Load configuration from JSON file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Malformed config file {path}: {e}") from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

        logger.debug(f"Loaded configuration from {path}")
        return config


def load_config(path: str | Path) -> NormalizerConfig:
    """Convenience function to load configuration.

    Args:
        path: Path to config JSON file.

    Returns:
        NormalizerConfig instance.
    """
    return NormalizerConfig.load(Path(path))
