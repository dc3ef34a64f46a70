class ConversionError(ValueError):
    """Base class for everything that can go wrong while converting a number."""


class InvalidBase(ConversionError):
    def __init__(self, base, reason: str):
        self.base = base
        super().__init__(f"Invalid base {base!r}: {reason}.")


class MalformedNumber(ConversionError):
    def __init__(self, digits: str, reason: str):
        self.digits = digits
        super().__init__(f"'{digits}' is not a well-formed number: {reason}.")


class InvalidDigit(ConversionError):
    def __init__(self, char: str, base, segment: str, index: int):
        self.char = char
        self.base = base
        self.segment = segment
        self.index = index
        super().__init__(
            f"'{char}' is not a valid digit in base {base} "
            f"({segment} part, position {index})."
        )


class UnsupportedAlphabetSize(ConversionError):
    def __init__(self, base, limit: int):
        self.base = base
        self.limit = limit
        super().__init__(
            f"Base {base} needs more than {limit} digit symbols; "
            f"only bases up to {limit} can be rendered."
        )


class InvalidValue(ConversionError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Cannot render {value!r}: only finite, non-negative values are supported.")
