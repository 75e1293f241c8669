"""
sentence_rhythm package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .classifier import classify
from .config import (
    ColorSettings,
    ConfigError,
    SentenceRhythmConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
    save_config,
)
from .exclusions import ExclusionIndex
from .models import Category, ClassifiedSentence, SentenceSpan, StructuralNode
from .pipeline import analyze, process_corpus, process_document
from .scanner import iter_sentence_spans, scan
from .tokenization import count_words

__all__ = [
    "Category",
    "ClassifiedSentence",
    "ColorSettings",
    "ConfigError",
    "ExclusionIndex",
    "SentenceRhythmConfig",
    "SentenceSpan",
    "StructuralNode",
    "analyze",
    "classify",
    "config_from_dict",
    "config_from_yaml",
    "count_words",
    "iter_sentence_spans",
    "load_config",
    "process_corpus",
    "process_document",
    "save_config",
    "scan",
]

__version__ = "0.1.0"
