"""
Forward scanner that finds sentence-like spans in prose.

A sentence is an anchor character (nothing at the very start of the text),
a body of characters that may not end a sentence or break a line, a run of
sentence-ending punctuation, any closing quotes, and at most one trailing
space. Text after the last terminator is never reported.
"""

from __future__ import annotations

from typing import Iterator

from .config import FrozenConfig, SentenceRhythmConfig, snapshot
from .models import SentenceSpan

CLOSING_QUOTES = frozenset("\"”'’」")
LEADING_MARKERS = frozenset(">")


def iter_sentence_spans(
    text: str,
    config: SentenceRhythmConfig | FrozenConfig | None = None,
    start: int = 0,
    end: int | None = None,
) -> Iterator[SentenceSpan]:
    """
    Yield trimmed sentence spans of ``text[start:end]`` with absolute offsets.

    A ``start`` in the middle of a line is moved back to the start of that
    line so the first sentence is never cut off.
    """
    cfg = snapshot(config)
    stop = len(text) if end is None else min(end, len(text))
    first = _line_start(text, max(0, min(start, len(text))))
    pos = first
    if pos >= stop:
        return

    endings = frozenset(cfg.sentence_endings)
    disallowed = endings | {"\n"}

    while pos < stop:
        match_end = _match_at(text, pos, stop, pos == first, endings, disallowed)
        if match_end is None:
            # Every anchor inside the failed body run fails the same way.
            pos = max(pos + 1, _body_end(text, pos + 1, stop, disallowed))
            continue
        span = _trim(text, pos, match_end)
        if span is not None:
            yield span
        pos = match_end


def scan(
    text: str, config: SentenceRhythmConfig | FrozenConfig | None = None
) -> list[SentenceSpan]:
    """Return every sentence span in ``text``."""
    return list(iter_sentence_spans(text, config))


def _match_at(
    text: str,
    pos: int,
    stop: int,
    at_text_start: bool,
    endings: frozenset[str],
    disallowed: frozenset[str],
) -> int | None:
    """Return the raw match end for a sentence anchored at ``pos``, or None."""
    if at_text_start:
        matched = _match_sentence(text, pos, stop, endings, disallowed)
        if matched is not None:
            return matched
    # Otherwise the anchor swallows exactly one character.
    if pos + 1 > stop:
        return None
    return _match_sentence(text, pos + 1, stop, endings, disallowed)


def _match_sentence(
    text: str,
    body_start: int,
    stop: int,
    endings: frozenset[str],
    disallowed: frozenset[str],
) -> int | None:
    candidates = [body_start]
    if body_start < stop and text[body_start] == " ":
        candidates.insert(0, body_start + 1)

    for idx in candidates:
        body_end = _body_end(text, idx, stop, disallowed)
        if body_end == idx:
            continue
        cursor = body_end
        while cursor < stop and text[cursor] in endings:
            cursor += 1
        if cursor == body_end:
            continue
        while cursor < stop and text[cursor] in CLOSING_QUOTES:
            cursor += 1
        if cursor < stop and text[cursor] == " ":
            cursor += 1
        return cursor
    return None


def _trim(text: str, match_start: int, match_end: int) -> SentenceSpan | None:
    begin = match_start
    while begin < match_end and (text[begin].isspace() or text[begin] in LEADING_MARKERS):
        begin += 1
    finish = match_end
    if finish > begin and text[finish - 1] == " ":
        finish -= 1
    if finish <= begin:
        return None
    return SentenceSpan(start=begin, end=finish)


def _line_start(text: str, offset: int) -> int:
    return text.rfind("\n", 0, offset) + 1


def _body_end(text: str, idx: int, stop: int, disallowed: frozenset[str]) -> int:
    while idx < stop and text[idx] not in disallowed:
        idx += 1
    return idx
