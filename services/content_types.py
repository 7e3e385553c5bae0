from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    article = "artikel"
    school_assignment = "tugas-sekolah"
    book_summary = "ringkasan-buku"
    instagram_caption = "caption-ig"
    formal_email = "email-formal"


class WritingStyle(str, Enum):
    formal = "formal"
    casual = "santai"
    long = "panjang"
    short = "pendek"


class LengthClass(str, Enum):
    short = "short"
    medium = "medium"
    long = "long"


def enum_value(value: Enum | str) -> str:
    """Return the plain string behind a ``str`` enum member, or the string itself."""
    if isinstance(value, Enum):
        return str(value.value)
    return value
