import logging
import math

from .digits import (
    CONVERGENCE_THRESHOLD,
    MAX_ALPHABET_SIZE,
    MAX_FRACTION_DIGITS,
    digit_char,
    is_finite_number,
)
from .errors import InvalidBase, InvalidValue, UnsupportedAlphabetSize


logger = logging.getLogger(__name__)


def _check_target_base(base_to) -> int:
    if not is_finite_number(base_to):
        raise InvalidBase(base_to, "base must be a finite number")
    if base_to < 1:
        raise InvalidBase(base_to, "target base must be at least 1")
    if base_to == 1:
        raise InvalidBase(base_to, "base 1 has no positional notation")
    if base_to != int(base_to):
        raise InvalidBase(base_to, "target base must be a whole number")
    if base_to > MAX_ALPHABET_SIZE:
        raise UnsupportedAlphabetSize(base_to, MAX_ALPHABET_SIZE)
    return int(base_to)


def encode_integer(number: int, base: int) -> str:
    if number == 0:
        return digit_char(0)
    out = []
    while number:
        number, remainder = divmod(number, base)
        out.append(digit_char(remainder))
    return "".join(reversed(out))


def encode_fraction(
    fraction: float,
    base: int,
    max_digits: int = MAX_FRACTION_DIGITS,
    threshold: float = CONVERGENCE_THRESHOLD,
) -> str:
    """Expand 0 <= fraction < 1 into at most ``max_digits`` digits.

    Stops early once the remainder drops below ``threshold``, so the result
    may be empty.
    """
    out = []
    while fraction >= threshold and len(out) < max_digits:
        fraction *= base
        digit = min(math.floor(fraction), base - 1)
        fraction -= digit
        out.append(digit_char(digit))
    return "".join(out)


def encode(
    value: float,
    base_to: int | float,
    max_digits: int = MAX_FRACTION_DIGITS,
    threshold: float = CONVERGENCE_THRESHOLD,
) -> str:
    """Render a non-negative value as a digit string in ``base_to``."""
    base = _check_target_base(base_to)
    if not is_finite_number(value) or value < 0:
        raise InvalidValue(value)
    if max_digits < 0:
        raise ValueError("max_digits must not be negative")

    whole = math.floor(value)
    result = encode_integer(whole, base)
    fraction = encode_fraction(value - whole, base, max_digits, threshold)
    if fraction:
        result = f"{result}.{fraction}"

    logger.debug("encoded %r -> %r (base %d)", value, result, base)
    return result
