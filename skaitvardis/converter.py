"""Conversion of signed 64-bit integers into Lithuanian words."""

from typing import Self

from skaitvardis.config import ConverterConfig
from skaitvardis.constants import INT64_MAX, INT64_MIN, MINUS, TENS, ZERO_TO_NINETEEN
from skaitvardis.preconditions import check_value_between
from skaitvardis.scale import HUNDRED, SCALES, Scale


def render_up_to_hundred(number: int) -> str:
    """Convert a number in ``[0, 99]`` to words.

    Raises:
        InvalidArgumentError: If ``number`` is outside ``[0, 99]``.
    """
    check_value_between(0, 99, number)
    if number < len(ZERO_TO_NINETEEN):
        return ZERO_TO_NINETEEN[number]
    tens, ones = divmod(number, 10)
    if ones == 0:
        return TENS[tens]
    return f"{TENS[tens]} {ZERO_TO_NINETEEN[ones]}"


def render_up_to_thousand(number: int, elide_count_of_one: bool = False) -> str:
    """Convert a number in ``[0, 999]`` to words.

    Raises:
        InvalidArgumentError: If ``number`` is outside ``[0, 999]``.
    """
    check_value_between(0, 999, number)
    if number < len(ZERO_TO_NINETEEN):
        return ZERO_TO_NINETEEN[number]

    parts: list[str] = []
    remainder = extract_scale(number, HUNDRED, parts, elide_count_of_one)
    if remainder > 0:
        parts.append(render_up_to_hundred(remainder))
    return " ".join(parts).strip()


def extract_scale(
    remainder: int,
    scale: Scale,
    parts: list[str],
    elide_count_of_one: bool = False,
) -> int:
    """Append the ``scale`` group of ``remainder`` to ``parts``.

    For example, with ``THOUSAND`` and ``2018`` this appends
    ``"du"`` and ``"tūkstančiai"`` and returns ``18``. Nothing is appended
    when ``remainder`` is below the scale's magnitude.

    Args:
        remainder: A non-negative number.
        scale: The scale to extract.
        parts: Word fragments accumulated so far.
        elide_count_of_one: Drop a count of one before scales that do not
            speak it.

    Returns:
        ``remainder`` without its ``scale`` group.
    """
    if remainder < scale.magnitude:
        return remainder

    count = remainder // scale.magnitude
    if not (elide_count_of_one and count == 1 and not scale.speak_count_when_one):
        parts.append(render_up_to_thousand(count, elide_count_of_one))
    parts.append(scale.form_for_count(count))
    return remainder - count * scale.magnitude


class NumberConverter:
    """Converts integers into Lithuanian words.

    Instances hold only an immutable configuration and can be shared
    between threads.

    Examples:
        >>> NumberConverter().convert(123)
        'vienas šimtas dvidešimt trys'
        >>> NumberConverter(ConverterConfig(elide_count_of_one=True)).convert(123)
        'šimtas dvidešimt trys'
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()

    @classmethod
    def create(cls, elide_count_of_one: bool = False) -> Self:
        """Create a converter from keyword options."""
        return cls(ConverterConfig(elide_count_of_one=elide_count_of_one))

    def convert(self, number: int) -> str:
        """Convert a signed 64-bit integer to words.

        Args:
            number: Integer in ``[-2**63, 2**63 - 1]``.

        Returns:
            Lithuanian words for ``number``.

        Raises:
            TypeError: If ``number`` is not an ``int``.
            InvalidArgumentError: If ``number`` does not fit in 64 bits.
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Expected int, got {type(number).__name__}")
        check_value_between(INT64_MIN, INT64_MAX, number)
        return self._from_int(number)

    def _from_int(self, number: int) -> str:
        if number == INT64_MIN:
            # -9223372036854775808 has no positive counterpart in 64 bits
            return f"{self._from_int(INT64_MIN + 8)} {ZERO_TO_NINETEEN[8]}"

        if number < 0:
            return f"{MINUS} {self._from_int(-number)}"

        if number < len(ZERO_TO_NINETEEN):
            return ZERO_TO_NINETEEN[number]

        parts: list[str] = []
        remainder = number
        for scale in SCALES:
            remainder = extract_scale(
                remainder, scale, parts, self.config.elide_count_of_one
            )
        # Zero is only spoken for zero itself, handled above
        if remainder > 0:
            parts.append(render_up_to_hundred(remainder))

        return " ".join(parts).strip()


_DEFAULT_CONVERTER = NumberConverter()


def to_words(number: int) -> str:
    """Convert a number to Lithuanian words.

    Examples:
        >>> to_words(0)
        'nulis'
        >>> to_words(-5)
        'minus penki'
        >>> to_words(1_000_000)
        'vienas milijonas'
    """
    return _DEFAULT_CONVERTER.convert(number)
