# (C) 2024 Irreducible Inc.

SUPERSCRIPT_DIGITS = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
}


def superscript(n: int) -> str:
    """Renders a non-negative integer in Unicode superscript digits.

    For example, superscript(2) returns "²" and superscript(10) returns "¹⁰".
    """
    assert n >= 0
    return "".join(SUPERSCRIPT_DIGITS[digit] for digit in str(n))


def strip_trailing_zeros(seq: list[int]) -> list[int]:
    """Drops zeros from the end of a coefficient list, never shrinking it below length 1."""
    length = len(seq)
    while length > 1 and seq[length - 1] == 0:
        length -= 1
    return seq[:length]
