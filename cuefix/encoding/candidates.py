"""Fixed encoding tables shared by the decoder and the detectors."""

from typing import Final

from cuefix.encoding.exceptions import UnsupportedEncodingLabel

AUTO: Final = "auto"

# Tried in this order; the last entry doubles as the lenient fallback.
CANDIDATE_ENCODINGS: Final[tuple[str, ...]] = (
    "utf-8",
    "gb18030",
    "big5",
    "shift-jis",
    "euc-kr",
    "windows-1252",
)

FALLBACK_ENCODING: Final = CANDIDATE_ENCODINGS[-1]

ENCODING_ALIASES: Final[dict[str, str]] = {
    "utf8": "utf-8",
    "gbk": "gb18030",
    "gb2312": "gb18030",
    "cp936": "gb18030",
    "big5-hkscs": "big5",
    "shift_jis": "shift-jis",
    "sjis": "shift-jis",
    "cp932": "shift-jis",
    "euc_kr": "euc-kr",
    "cp949": "euc-kr",
    "cp1252": "windows-1252",
}

# Broadest Python codec covering each label's script family.
CODECS: Final[dict[str, str]] = {
    "utf-8": "utf_8_sig",
    "gb18030": "gb18030",
    "big5": "big5hkscs",
    "shift-jis": "cp932",
    "euc-kr": "cp949",
    "windows-1252": "cp1252",
}

SUPPORTED_ENCODINGS: Final[tuple[tuple[str, str], ...]] = (
    (AUTO, "Auto-detect (local)"),
    ("gb18030", "Simplified Chinese (GB18030)"),
    ("big5", "Traditional Chinese (Big5)"),
    ("shift-jis", "Japanese (Shift-JIS)"),
    ("euc-kr", "Korean (EUC-KR)"),
    ("windows-1252", "Western (Windows-1252)"),
    ("utf-8", "UTF-8"),
)


def canonical_label(label: str) -> str:
    """Resolve *label* to its canonical candidate name.

    Raises:
        UnsupportedEncodingLabel: if the label is not a candidate or a known alias.
    """
    key = label.strip().lower()
    key = ENCODING_ALIASES.get(key, key)
    if key not in CODECS:
        raise UnsupportedEncodingLabel(
            f"Unsupported encoding '{label}'. Choose from: {list(CANDIDATE_ENCODINGS)}"
        )
    return key


def is_auto(label: str | None) -> bool:
    """True when *label* requests automatic detection."""
    return label is None or label.strip().lower() in ("", AUTO)
