import codecs

from cuefix.encoding.candidates import CODECS, canonical_label
from cuefix.encoding.exceptions import DecodeError

# Bytes cp1252 leaves unmapped. WHATWG windows-1252 decodes each one as the C1
# control of the same value, so no byte sequence is invalid under that label.
C1_PASSTHROUGH_BYTES = frozenset((0x81, 0x8D, 0x8F, 0x90, 0x9D))
C1_PASSTHROUGH = "cuefix_c1_passthrough"


def _c1_passthrough(error: UnicodeError) -> tuple[str, int]:
    """Decode one unmapped windows-1252 byte as the matching C1 code point."""
    if isinstance(error, UnicodeDecodeError):
        byte = error.object[error.start]
        if byte in C1_PASSTHROUGH_BYTES:
            return chr(byte), error.start + 1
    raise error


codecs.register_error(C1_PASSTHROUGH, _c1_passthrough)

# Labels whose decode errors go through a handler instead of the default.
_ERROR_HANDLERS: dict[str, str] = {
    "windows-1252": C1_PASSTHROUGH,
}


def decode(raw: bytes, encoding: str) -> str:
    """Strictly decode *raw* under *encoding*.

    The label is resolved through the alias table first, then decoded with
    the broadest codec registered for it.

    Raises:
        DecodeError: if any byte sequence is invalid for the encoding.
        UnsupportedEncodingLabel: if the label is not supported.
    """
    label = canonical_label(encoding)
    try:
        return codecs.decode(raw, CODECS[label], errors=_ERROR_HANDLERS.get(label, "strict"))
    except UnicodeDecodeError as exc:
        raise DecodeError(label, exc.reason) from exc


def decode_lenient(raw: bytes, encoding: str) -> str:
    """Decode *raw* under *encoding*, substituting U+FFFD for invalid bytes."""
    label = canonical_label(encoding)
    return codecs.decode(raw, CODECS[label], errors=_ERROR_HANDLERS.get(label, "replace"))


def require_bytes(raw: object) -> bytes:
    """Return *raw* as bytes, rejecting anything that is not a byte buffer."""
    if isinstance(raw, bytes):
        return raw
    if isinstance(raw, (bytearray, memoryview)):
        return bytes(raw)
    raise TypeError(f"Expected a byte buffer, got {type(raw).__name__}")
