import logging
import sys

from .digits import digit_value, is_finite_number
from .errors import InvalidBase, InvalidDigit, MalformedNumber


logger = logging.getLogger(__name__)

SEPARATOR = "."


def _check_source_base(base_from) -> None:
    if not is_finite_number(base_from):
        raise InvalidBase(base_from, "base must be a finite number")
    if base_from <= 1:
        raise InvalidBase(base_from, "source base must be greater than 1")


def _split(digits: str) -> tuple[str, str]:
    if not digits or digits == SEPARATOR:
        raise MalformedNumber(digits, "no digits given")
    if digits.count(SEPARATOR) > 1:
        raise MalformedNumber(digits, f"more than one '{SEPARATOR}' separator")
    integer_part, _, fraction_part = digits.partition(SEPARATOR)
    return integer_part, fraction_part


def _values(segment: str, base_from, name: str) -> list[int]:
    values = []
    for index, char in enumerate(segment):
        value = digit_value(char)
        if value is None or value >= base_from:
            raise InvalidDigit(char, base_from, name, index)
        values.append(value)
    return values


def decode(digits: str, base_from: int | float) -> float:
    """Parse ``digits`` written in ``base_from`` into a non-negative float.

    The integer segment is folded left to right (Horner), so the rightmost
    digit carries ``base ** 0``. The fractional segment is weighted left to
    right starting at ``base ** -1``. An empty integer segment counts as zero,
    so ``".5"`` is accepted.

    Raises InvalidBase, MalformedNumber or InvalidDigit.
    """
    _check_source_base(base_from)
    integer_part, fraction_part = _split(digits)

    integer_values = _values(integer_part, base_from, "integer")
    fraction_values = _values(fraction_part, base_from, "fractional")

    try:
        total = 0
        for value in integer_values:
            total = total * base_from + value
            if total > sys.float_info.max:
                raise MalformedNumber(digits, "magnitude is too large to represent")
        fraction = 0.0
        for position, value in enumerate(fraction_values):
            fraction += value * base_from ** -(position + 1)
        result = float(total) + fraction
    except OverflowError:
        raise MalformedNumber(digits, "magnitude is too large to represent")

    if not is_finite_number(result):
        raise MalformedNumber(digits, "magnitude is too large to represent")

    logger.debug("decoded %r (base %s) -> %r", digits, base_from, result)
    return result
