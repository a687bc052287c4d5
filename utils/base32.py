"""
Fixed-width base-32 fields.

Digits are 0-9 then a-v, so for equal widths numeric order matches
lexicographic string order.
"""

BASE32 = "0123456789abcdefghijklmnopqrstuv"
_VALUES = {char: index for index, char in enumerate(BASE32)}


def encode_base32(value, width):
    """Encode a non-negative int, zero-padded on the left to `width` chars."""
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")

    chars = []
    while value > 0:
        value, remainder = divmod(value, 32)
        chars.append(BASE32[remainder])

    # Wider values are emitted in full, never truncated
    return "".join(reversed(chars)).rjust(width, "0")


def decode_base32(text):
    """Decode a base-32 field. Accepts only lowercase 0-9a-v digits."""
    if not text:
        raise ValueError("empty base-32 field")

    value = 0
    for char in text:
        digit = _VALUES.get(char)
        if digit is None:
            raise ValueError(f"invalid base-32 digit {char!r} in {text!r}")
        value = value * 32 + digit
    return value
