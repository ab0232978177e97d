"""Text preprocessing for Lithuanian number expansion."""

from skaitvardis.preprocessing.text import LithuanianTextNormalizer, normalize_text

__all__ = [
    "LithuanianTextNormalizer",
    "normalize_text",
]
