import pytest

from cuefix.detection.exceptions import DetectionValidationError
from cuefix.detection.validator import validate_suggestion


class TestValidateSuggestion:
    def test_resolves_alias(self) -> None:
        suggestion = validate_suggestion({"encoding": "GBK", "cleaned_text": "歌"})
        assert suggestion.encoding == "gb18030"
        assert suggestion.cleaned_text == "歌"

    def test_cleaned_text_is_optional(self) -> None:
        suggestion = validate_suggestion({"encoding": "big5"})
        assert suggestion.cleaned_text == ""

    def test_null_cleaned_text_becomes_empty(self) -> None:
        suggestion = validate_suggestion({"encoding": "big5", "cleaned_text": None})
        assert suggestion.cleaned_text == ""

    def test_missing_encoding_raises(self) -> None:
        with pytest.raises(DetectionValidationError, match="'encoding'"):
            validate_suggestion({"cleaned_text": ""})

    def test_non_string_encoding_raises(self) -> None:
        with pytest.raises(DetectionValidationError, match="'encoding'"):
            validate_suggestion({"encoding": 936})

    def test_non_string_cleaned_text_raises(self) -> None:
        with pytest.raises(DetectionValidationError, match="'cleaned_text'"):
            validate_suggestion({"encoding": "big5", "cleaned_text": ["x"]})

    def test_encoding_outside_candidates_raises(self) -> None:
        with pytest.raises(DetectionValidationError, match="euc-jp"):
            validate_suggestion({"encoding": "euc-jp"})
