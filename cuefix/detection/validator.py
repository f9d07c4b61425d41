"""Validates a parsed provider response into an EncodingSuggestion."""

from typing import Any

from cuefix.detection.exceptions import DetectionValidationError
from cuefix.detection.models import EncodingSuggestion
from cuefix.encoding.candidates import canonical_label
from cuefix.encoding.exceptions import UnsupportedEncodingLabel


def validate_suggestion(data: dict[str, Any]) -> EncodingSuggestion:
    """Check required fields and resolve the encoding to a candidate label.

    Raises:
        DetectionValidationError: on any validation failure.
    """
    encoding = data.get("encoding")
    if not encoding or not isinstance(encoding, str):
        raise DetectionValidationError("'encoding' must be a non-empty string")
    cleaned_text = data.get("cleaned_text", "")
    if cleaned_text is None:
        cleaned_text = ""
    if not isinstance(cleaned_text, str):
        raise DetectionValidationError("'cleaned_text' must be a string")
    try:
        label = canonical_label(encoding)
    except UnsupportedEncodingLabel as exc:
        raise DetectionValidationError(str(exc)) from exc
    return EncodingSuggestion(encoding=label, cleaned_text=cleaned_text, raw=data)
