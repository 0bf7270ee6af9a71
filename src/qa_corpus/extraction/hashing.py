# ABOUTME: Deterministic question identifiers - slug prefix plus a 32-bit rolling hash suffix
# ABOUTME: The hash recurrence must stay bit-identical so re-imports keep the same IDs

import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s]")

SLUG_WORDS = 5
HASH_LENGTH = 6


def _to_int32(value: int) -> int:
    """Wrap an arbitrary integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_code_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def text_length(text: str) -> int:
    """Length in UTF-16 code units; every character threshold and comparison uses this count."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def simple_hash(text: str) -> int:
    """Compute the signed 32-bit ``hash * 31 + c`` rolling hash.

    Characters are consumed as UTF-16 code units, so text outside the BMP
    contributes its surrogate pair.
    """
    value = 0
    for code in _utf16_code_units(text):
        value = _to_int32((value << 5) - value + code)
    return value


def hash6(text: str) -> str:
    """First six lowercase hex digits of ``abs(simple_hash(text))``."""
    return format(abs(simple_hash(text)), "x")[:HASH_LENGTH]


def slugify(text: str) -> str:
    """Lowercase, drop punctuation and join the first five words with underscores."""
    cleaned = _NON_SLUG_CHARS.sub("", text.lower())
    return "_".join(cleaned.split()[:SLUG_WORDS])


def question_id(question: str) -> str:
    """Build the record ID for a question: ``<slug>_<hash6>``."""
    return f"{slugify(question)}_{hash6(question)}"
