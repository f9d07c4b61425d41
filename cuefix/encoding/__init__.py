from cuefix.encoding.candidates import (
    AUTO,
    CANDIDATE_ENCODINGS,
    FALLBACK_ENCODING,
    SUPPORTED_ENCODINGS,
    canonical_label,
    is_auto,
)
from cuefix.encoding.decoder import decode, decode_lenient
from cuefix.encoding.exceptions import DecodeError, EncodingError, UnsupportedEncodingLabel

__all__ = [
    "AUTO",
    "CANDIDATE_ENCODINGS",
    "FALLBACK_ENCODING",
    "SUPPORTED_ENCODINGS",
    "DecodeError",
    "EncodingError",
    "UnsupportedEncodingLabel",
    "canonical_label",
    "decode",
    "decode_lenient",
    "is_auto",
]
