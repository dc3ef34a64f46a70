PREFIX_BASES = {
    "0x": 16,
    "0o": 8,
    "0b": 2,
}
DEFAULT_BASE = 10


def detect_base(text: str) -> tuple[str, int]:
    """Split a 0x/0o/0b prefix off ``text`` and return (digits, base).

    Text without a recognised prefix is taken as decimal.
    """
    prefix = text[:2].lower()
    if prefix in PREFIX_BASES:
        return text[2:], PREFIX_BASES[prefix]
    return text, DEFAULT_BASE
