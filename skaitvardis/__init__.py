"""skaitvardis: Lithuanian words for signed 64-bit integers."""

from skaitvardis.config import ConverterConfig, NormalizerConfig
from skaitvardis.converter import NumberConverter, to_words
from skaitvardis.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    SkaitvardisError,
    TextNormalizationError,
)
from skaitvardis.scale import SCALES, Scale

__version__ = "0.1.0"
__all__ = [
    "to_words",
    "NumberConverter",
    "ConverterConfig",
    "NormalizerConfig",
    "Scale",
    "SCALES",
    "SkaitvardisError",
    "InvalidArgumentError",
    "ConfigurationError",
    "TextNormalizationError",
]
