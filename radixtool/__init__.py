from .converter import convert_number
from .decoder import decode
from .encoder import encode
from .errors import (
    ConversionError,
    InvalidBase,
    InvalidDigit,
    InvalidValue,
    MalformedNumber,
    UnsupportedAlphabetSize,
)
from .prefix import detect_base

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "InvalidBase",
    "InvalidDigit",
    "InvalidValue",
    "MalformedNumber",
    "UnsupportedAlphabetSize",
    "convert_number",
    "decode",
    "detect_base",
    "encode",
]
