"""Garbled-text rules, evaluated in order; the first match wins.

These are heuristics. Garbled text that still carries two format keywords
and no fingerprint run passes, and correctly decoded text that lacks the
keywords is rejected.
"""

import re
from collections.abc import Callable
from typing import Final

Predicate = Callable[[str], bool]

REPLACEMENT_CHAR: Final = "\ufffd"

STRUCTURAL_KEYWORDS: Final[tuple[str, ...]] = ("TITLE", "PERFORMER", "TRACK", "FILE", "INDEX")
MIN_KEYWORDS: Final = 2

# Accented Latin-1 letters (U+00C3..U+00FF) that CJK bytes turn into when
# read as a Western single-byte encoding.
MOJIBAKE_CHARS: Final = "".join(chr(cp) for cp in range(0xC3, 0x100))
MOJIBAKE_RUN: Final = 3
_MOJIBAKE_RE: Final[re.Pattern[str]] = re.compile(
    f"[{re.escape(MOJIBAKE_CHARS)}]{{{MOJIBAKE_RUN},}}"
)


def is_blank(text: str) -> bool:
    return not text or text.isspace()


def has_replacement_char(text: str) -> bool:
    return REPLACEMENT_CHAR in text


def count_keywords(text: str) -> int:
    upper = text.upper()
    return sum(1 for keyword in STRUCTURAL_KEYWORDS if keyword in upper)


def lacks_keywords(text: str) -> bool:
    return count_keywords(text) < MIN_KEYWORDS


def has_mojibake_run(text: str) -> bool:
    return _MOJIBAKE_RE.search(text) is not None


DEFAULT_RULES: Final[tuple[tuple[str, Predicate], ...]] = (
    ("blank", is_blank),
    ("replacement_char", has_replacement_char),
    ("missing_keywords", lacks_keywords),
    ("mojibake_run", has_mojibake_run),
)
