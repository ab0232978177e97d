"""Argument checks shared by the converter internals."""

from skaitvardis.exceptions import InvalidArgumentError


def check_value_between(minimum: int, maximum: int, value: int) -> None:
    """Check that ``value`` lies in the inclusive range ``[minimum, maximum]``.

    Args:
        minimum: Smallest allowed value.
        maximum: Largest allowed value.
        value: Value to check.

    Raises:
        InvalidArgumentError: If ``minimum > maximum`` or ``value`` lies
            outside the range.
    """
    if minimum > maximum:
        raise InvalidArgumentError(
            f"min ({minimum}) > max ({maximum})", value, minimum, maximum
        )
    if value < minimum:
        raise InvalidArgumentError(
            f"value ({value}) < min ({minimum})", value, minimum, maximum
        )
    if value > maximum:
        raise InvalidArgumentError(
            f"value ({value}) > max ({maximum})", value, minimum, maximum
        )


def check_not_negative(value: int) -> None:
    """Check that ``value`` is zero or positive.

    Raises:
        InvalidArgumentError: If ``value`` is negative.
    """
    if value < 0:
        raise InvalidArgumentError(f"negative value ({value})", value, minimum=0)
