from __future__ import annotations

from .config import FrozenConfig, SentenceRhythmConfig
from .models import Category


def classify(word_count: int, config: SentenceRhythmConfig | FrozenConfig) -> Category:
    """
    Map a word count to its length category.

    Thresholds are inclusive upper bounds checked in order, so misordered
    thresholds simply funnel sentences into the first bucket that fits.
    """
    if word_count <= config.xs_threshold:
        return Category.XS
    if word_count <= config.sm_threshold:
        return Category.SM
    if word_count <= config.md_threshold:
        return Category.MD
    if word_count <= config.lg_threshold:
        return Category.LG
    return Category.XL
