"""Lithuanian text normalization with number-to-text conversion."""

import logging
import re
from typing import Self

from skaitvardis.config import NormalizerConfig
from skaitvardis.converter import NumberConverter
from skaitvardis.exceptions import TextNormalizationError

logger = logging.getLogger(__name__)


class LithuanianTextNormalizer:
    """Text normalizer for Lithuanian text.

    Expands standalone integers into words and cleans up whitespace.
    Decimals such as ``3.14`` are left untouched.
    """

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        """Initialize normalizer.

        Args:
            config: Normalization configuration.
        """
        self.config = config or NormalizerConfig()
        self.converter = NumberConverter(self.config.converter)

        # A sign directly after a word character is a separator ("10-20")
        self._number_pattern = re.compile(r"(?<![\w.,])(-?)([0-9]+)(?!\w|[.,][0-9])")
        self._whitespace_pattern = re.compile(r"\s+")

    def normalize(self, text: str) -> str:
        """Normalize Lithuanian text.

        Args:
            text: Input text to normalize.

        Returns:
            Normalized text.

        Raises:
            TextNormalizationError: If a number cannot be converted.
        """
        for pattern, replacement in self.config.custom_replacements.items():
            text = text.replace(pattern, replacement)

        if self.config.convert_numbers:
            text = self._convert_all_numbers(text)

        if self.config.lowercase:
            text = text.lower()

        if self.config.remove_extra_spaces:
            text = self._whitespace_pattern.sub(" ", text).strip()

        return text

    def _convert_all_numbers(self, text: str) -> str:
        """Convert all integer tokens to words."""
        count = 0

        def replace(match: re.Match[str]) -> str:
            nonlocal count
            try:
                number = int(match.group(1) + match.group(2))
                words = self.converter.convert(number)
            except ValueError as e:
                raise TextNormalizationError(
                    f"Failed to convert number {match.group(0)}: {e}"
                ) from e
            count += 1
            return words

        text = self._number_pattern.sub(replace, text)
        logger.debug(f"Expanded {count} number(s)")
        return text

    @classmethod
    def from_config(cls, config_dict: dict) -> Self:
        """Create normalizer from configuration dictionary."""
        config = NormalizerConfig.model_validate(config_dict)
        return cls(config=config)


def normalize_text(text: str, convert_numbers: bool = True) -> str:
    """Convenience function for text normalization.

    Args:
        text: Input text.
        convert_numbers: Whether to convert numbers to words.

    Returns:
        Normalized text.
    """
    config = NormalizerConfig(convert_numbers=convert_numbers)
    normalizer = LithuanianTextNormalizer(config)
    return normalizer.normalize(text)
