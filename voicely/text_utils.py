"""Length helpers that count UTF-16 code units.

Limits shared with browser and mobile clients are expressed in the units a
JavaScript string reports, where a character outside the Basic Multilingual
Plane (most emoji) counts as two.
"""

_BMP_LIMIT = 0xFFFF


def code_unit_length(text: str) -> int:
    """Number of UTF-16 code units needed to encode `text`."""
    return len(text.encode("utf-16-le")) // 2


def truncate_code_units(text: str, limit: int) -> str:
    """Longest prefix of `text` that fits in `limit` code units.

    A surrogate pair is never split: a character that would straddle the
    limit is dropped whole.
    """
    used = 0
    for index, char in enumerate(text):
        used += 2 if ord(char) > _BMP_LIMIT else 1
        if used > limit:
            return text[:index]
    return text
