"""Decimal scales with their Lithuanian word forms."""

from dataclasses import dataclass
from typing import Final

from skaitvardis.preconditions import check_not_negative


@dataclass(frozen=True)
class Scale:
    """A named decimal magnitude such as hundred or million.

    Lithuanian numerals take one of three forms depending on the count they
    follow: ``vienas tūkstantis``, ``du tūkstančiai``, ``dešimt tūkstančių``.

    Attributes:
        magnitude: Numeric value of the scale.
        singular_form: Form used after counts ending in 1 (but not 11).
        plural_form_a: Form used after counts ending in 2 to 9.
        plural_form_b: Form used after 0, multiples of 10 and 11 to 19.
        speak_count_when_one: Whether a count of one is spoken before the
            scale word when count elision is enabled.
    """

    magnitude: int
    singular_form: str
    plural_form_a: str
    plural_form_b: str
    speak_count_when_one: bool = True

    def form_for_count(self, count: int) -> str:
        """Return the word form agreeing with ``count``.

        Raises:
            InvalidArgumentError: If ``count`` is negative.
        """
        check_not_negative(count)
        last_two_digits = count % 100
        last_digit = count % 10
        if 10 < last_two_digits < 20:
            return self.plural_form_b
        # Round counts share the form of 11-19
        if last_digit == 0:
            return self.plural_form_b
        if last_digit == 1:
            return self.singular_form
        return self.plural_form_a


HUNDRED: Final = Scale(100, "šimtas", "šimtai", "šimtų", speak_count_when_one=False)
THOUSAND: Final = Scale(1_000, "tūkstantis", "tūkstančiai", "tūkstančių")
MILLION: Final = Scale(1_000_000, "milijonas", "milijonai", "milijonų")
BILLION: Final = Scale(1_000_000_000, "milijardas", "milijardai", "milijardų")
TRILLION: Final = Scale(1_000_000_000_000, "trilijonas", "trilijonai", "trilijonų")
QUADRILLION: Final = Scale(
    1_000_000_000_000_000, "kvadrilijonas", "kvadrilijonai", "kvadrilijonų"
)
QUINTILLION: Final = Scale(
    1_000_000_000_000_000_000, "kvintilijonas", "kvintilijonai", "kvintilijonų"
)

# Largest first; the converter walks this order
SCALES: Final[tuple[Scale, ...]] = (
    QUINTILLION,
    QUADRILLION,
    TRILLION,
    BILLION,
    MILLION,
    THOUSAND,
    HUNDRED,
)
