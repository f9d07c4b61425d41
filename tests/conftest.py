import logging
from collections.abc import Iterator

import pytest

CUE_TEXT = (
    'TITLE "歌"\n'
    'PERFORMER "人"\n'
    'FILE "a.mp3" WAVE\n'
    "TRACK 01 AUDIO\n"
    "INDEX 01 00:00:00"
)

ASCII_CUE_TEXT = (
    'PERFORMER "Various"\n'
    'TITLE "Live"\n'
    'FILE "live.flac" WAVE\n'
    "  TRACK 01 AUDIO\n"
    "    INDEX 01 00:00:00\n"
)

# Half-width katakana followed by a quote is invalid in GB18030 and Big5.
SHIFT_JIS_CUE_TEXT = 'TITLE "ｱ"\nFILE "a.wav" WAVE\n'

# Accented letters followed by a quote are invalid in every multi-byte candidate.
WESTERN_CUE_TEXT = 'TITLE "Café"\nPERFORMER "Zoë"\nFILE "x.wav" WAVE\n'


@pytest.fixture(autouse=True)
def _reset_cuefix_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("cuefix")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def cue_text() -> str:
    return CUE_TEXT


@pytest.fixture()
def gb18030_cue_bytes() -> bytes:
    return CUE_TEXT.encode("gb18030")


@pytest.fixture()
def ascii_cue_bytes() -> bytes:
    return ASCII_CUE_TEXT.encode("ascii")


@pytest.fixture()
def shift_jis_cue_bytes() -> bytes:
    return SHIFT_JIS_CUE_TEXT.encode("cp932")


@pytest.fixture()
def western_cue_bytes() -> bytes:
    return WESTERN_CUE_TEXT.encode("cp1252")
