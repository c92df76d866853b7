from enum import Enum


class ToneFormat(Enum):
    """Output format for Pinyin syllables."""

    WITH_TONE_MARK = "with_tone_mark"  # zhōng
    WITH_TONE_NUMBER = "with_tone_number"  # zhong1
    WITHOUT_TONE = "without_tone"  # zhong
