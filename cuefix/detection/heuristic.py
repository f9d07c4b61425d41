"""Local encoding detection over the fixed candidate list.

Candidates are tried in order and the first one that decodes strictly and
passes the garbled-text classifier wins. When none does, the last candidate
is decoded leniently and the result is flagged as possibly garbled.
"""

from collections.abc import Collection

from cuefix.classification.classifier import GarbledTextClassifier
from cuefix.detection.base import BaseDetector
from cuefix.detection.models import DetectionResult
from cuefix.encoding.candidates import (
    CANDIDATE_ENCODINGS,
    FALLBACK_ENCODING,
    canonical_label,
    is_auto,
)
from cuefix.encoding.decoder import decode, decode_lenient, require_bytes
from cuefix.encoding.exceptions import DecodeError
from cuefix.logging.logger import Log


class HeuristicDetector(BaseDetector):
    """First-match-wins detector driven by the garbled-text classifier."""

    def __init__(self, classifier: GarbledTextClassifier | None = None) -> None:
        self._classifier = classifier if classifier is not None else GarbledTextClassifier()

    def detect(self, raw: bytes, encoding: str | None = None) -> DetectionResult:
        raw = require_bytes(raw)
        if not is_auto(encoding):
            return self.decode_as(raw, encoding or "")
        return self.detect_auto(raw)

    def detect_auto(
        self,
        raw: bytes,
        skip: Collection[str] = (),
    ) -> DetectionResult:
        """Run the candidate loop, ignoring labels listed in *skip*."""
        for candidate in CANDIDATE_ENCODINGS:
            if candidate in skip:
                continue
            text = self.try_candidate(raw, candidate)
            if text is not None:
                Log.info(f"Detected encoding {candidate} ({len(raw)} bytes)")
                return DetectionResult(text=text, encoding=candidate)

        Log.warning(
            f"No candidate accepted for {len(raw)} bytes, "
            f"falling back to lenient {FALLBACK_ENCODING}"
        )
        return DetectionResult(
            text=decode_lenient(raw, FALLBACK_ENCODING),
            encoding=FALLBACK_ENCODING,
            possibly_garbled=True,
        )

    def try_candidate(self, raw: bytes, encoding: str) -> str | None:
        """Return the strict decode of *raw* if it looks plausible, else None."""
        try:
            text = decode(raw, encoding)
        except DecodeError as exc:
            Log.debug(f"Candidate {encoding} rejected: {exc.reason}")
            return None
        rule = self._classifier.first_match(text)
        if rule is not None:
            Log.debug(f"Candidate {encoding} rejected by rule '{rule}'")
            return None
        return text

    def decode_as(
        self,
        raw: bytes,
        encoding: str,
        *,
        lenient: bool = True,
    ) -> DetectionResult:
        """Decode under an explicitly chosen label, bypassing classification.

        The result is returned even when the classifier rejects it; the
        verdict is only reported through ``possibly_garbled``.

        Raises:
            UnsupportedEncodingLabel: if *encoding* is not supported.
            DecodeError: if strict decoding fails and *lenient* is False.
        """
        label = canonical_label(encoding)
        try:
            text = decode(raw, label)
        except DecodeError:
            if not lenient:
                raise
            Log.warning(f"Strict {label} decode failed, using lenient decode")
            text = decode_lenient(raw, label)
        return DetectionResult(
            text=text,
            encoding=label,
            possibly_garbled=self._classifier.is_garbled(text),
            strategy="manual",
        )
