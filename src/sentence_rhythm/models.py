from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
class Category(Enum):
    """Sentence length buckets, ordered from shortest to longest."""

    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"

    @property
    def rank(self) -> int:
        return list(Category).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.rank < other.rank


@dataclass(frozen=True, slots=True)
class StructuralNode:
    """A labelled region reported by a document structure analyzer."""

    kind: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class ExclusionRange:
    """Closed interval [min, max] of character offsets that must not be highlighted."""

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class SentenceSpan:
    """Represents a detected sentence and its inclusive-exclusive character offsets."""

    start: int
    end: int

    def text_of(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class ClassifiedSentence:
    """A sentence span tagged with its length category."""

    start: int
    end: int
    category: Category
    word_count: int = 0


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class DocumentReport:
    """Classified sentences and per-category tallies for one document."""

    doc_id: str
    sentences: list[ClassifiedSentence]
    excluded: int = 0

    def category_counts(self) -> dict[Category, int]:
        counts = {category: 0 for category in Category}
        for sentence in self.sentences:
            counts[sentence.category] += 1
        return counts
