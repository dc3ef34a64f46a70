import logging

from .decoder import decode
from .digits import MAX_FRACTION_DIGITS
from .encoder import encode


logger = logging.getLogger(__name__)


def convert_number(
    num_str: str,
    from_base: int | float,
    to_base: int | float,
    precision: int = MAX_FRACTION_DIGITS,
) -> str:
    value = decode(num_str, from_base)
    result = encode(value, to_base, max_digits=precision)
    logger.debug("%s (base %s) -> %s (base %s)", num_str, from_base, result, to_base)
    return result
