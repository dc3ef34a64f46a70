import math
import string


ALPHABET = string.digits + string.ascii_lowercase
MAX_ALPHABET_SIZE = len(ALPHABET)

MAX_FRACTION_DIGITS = 10
CONVERGENCE_THRESHOLD = 1e-10

_DIGIT_VALUES = {ch: i for i, ch in enumerate(ALPHABET)}


def digit_value(char: str) -> int | None:
    """Return the value of a single digit character, or None if it is not one."""
    return _DIGIT_VALUES.get(char.lower())


def digit_char(value: int) -> str:
    if not 0 <= value < MAX_ALPHABET_SIZE:
        raise IndexError(f"No digit symbol for value {value}")
    return ALPHABET[value]


def is_finite_number(value) -> bool:
    # bool is an int subclass but never a meaningful base or magnitude
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
