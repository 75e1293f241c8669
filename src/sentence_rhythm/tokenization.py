from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

LATIN_WORD_CHARS = r"A-Za-z0-9\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u00ff\u0100-\u017f"
APOSTROPHES = r"'\u2019"
SINGLE_CHAR_WORDS = (
    r"\u4e00-\u9fff"  # CJK unified ideographs
    r"\u3040-\u309f"  # Hiragana
    r"\u30a0-\u30ff"  # Katakana
    r"\uac00-\ud7af"  # Hangul syllables
    r"\uf900-\ufaff"  # CJK compatibility ideographs
    r"\uff66-\uff9f"  # halfwidth Katakana
)

WORD_PATTERN = re.compile(
    rf"[{LATIN_WORD_CHARS}]+(?:[{APOSTROPHES}][{LATIN_WORD_CHARS}]+)*"
    rf"|[{SINGLE_CHAR_WORDS}]"
)


@dataclass(frozen=True, slots=True)
class Word:
    """A counted word and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


def iter_words(text: str) -> Iterator[Word]:
    """Yield words with character offsets; each CJK or Kana character is its own word."""
    for match in WORD_PATTERN.finditer(text):
        yield Word(text=match.group(), start_char=match.start(), end_char=match.end())


def count_words(text: str) -> int:
    """Return the number of words in a sentence. Punctuation and symbols never count."""
    return sum(1 for _ in WORD_PATTERN.finditer(text))
