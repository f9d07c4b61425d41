"""Traditional-to-Simplified conversion via ICU transliteration.

Phrases from the phrase table take precedence: every match is emitted
verbatim from the table, and only the text between matches goes through
ICU's character-level Traditional-Simplified transform.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import ClassVar

import icu  # type: ignore[import-untyped]

from cuefix.normalization.base import BaseScriptNormalizer
from cuefix.normalization.exceptions import ScriptNormalizationError

# Phrases whose characters convert differently as a unit than one by one.
DEFAULT_PHRASES: dict[str, str] = {
    "乾隆": "乾隆",
    "乾坤": "乾坤",
    "頭髮": "头发",
    "理髮": "理发",
    "皇后": "皇后",
    "天后": "天后",
    "於是": "于是",
    "瞭解": "了解",
}


class IcuScriptNormalizer(BaseScriptNormalizer):
    """Deterministic converter backed by ICU plus a phrase table."""

    _ICU_TRANSFORM: ClassVar[str] = "Traditional-Simplified"

    def __init__(self, phrases: Mapping[str, str] | None = None) -> None:
        self._phrases = dict(DEFAULT_PHRASES if phrases is None else phrases)
        self._phrase_re = self._compile_phrases(self._phrases)
        try:
            self._transliterator: icu.Transliterator = icu.Transliterator.createInstance(
                self._ICU_TRANSFORM
            )
        except icu.ICUError as exc:
            raise ScriptNormalizationError(
                f"ICU transform '{self._ICU_TRANSFORM}' unavailable: {exc}"
            ) from exc

    def normalize(self, text: str) -> str:
        if not text:
            return text
        try:
            return self._run(text)
        except ScriptNormalizationError:
            raise
        except Exception as exc:
            raise ScriptNormalizationError(f"Script normalization failed: {exc}") from exc

    def _run(self, text: str) -> str:
        if self._phrase_re is None:
            return self._transliterate(text)

        parts: list[str] = []
        pos = 0
        for match in self._phrase_re.finditer(text):
            parts.append(self._transliterate(text[pos : match.start()]))
            parts.append(self._phrases[match.group(0)])
            pos = match.end()
        parts.append(self._transliterate(text[pos:]))
        return "".join(parts)

    def _transliterate(self, segment: str) -> str:
        if not segment:
            return segment
        return str(self._transliterator.transliterate(segment))

    @staticmethod
    def _compile_phrases(phrases: Mapping[str, str]) -> re.Pattern[str] | None:
        keys = [k for k in phrases if k]
        if not keys:
            return None
        # Longest first so overlapping phrases resolve to the longer match.
        keys.sort(key=len, reverse=True)
        return re.compile("|".join(re.escape(k) for k in keys))
