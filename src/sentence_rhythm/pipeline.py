from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List

from .classifier import classify
from .config import FrozenConfig, SentenceRhythmConfig, snapshot
from .exclusions import ExclusionIndex, NodeLike
from .markdown import iter_markdown_nodes
from .models import ClassifiedSentence, Document, DocumentReport, SentenceSpan
from .scanner import iter_sentence_spans
from .tokenization import count_words

LOGGER = logging.getLogger(__name__)


def analyze(
    text: str,
    nodes: Iterable[NodeLike] | None = None,
    config: SentenceRhythmConfig | FrozenConfig | None = None,
    start: int = 0,
    end: int | None = None,
) -> List[ClassifiedSentence]:
    """
    Classify every highlightable sentence of ``text`` by length.

    ``nodes`` are structural annotations ``(kind, start, end)``; sentences
    touching a node whose kind marks code, comments, links or headings are
    skipped. ``start``/``end`` restrict scanning to a viewport while
    offsets in the result stay relative to the whole text.
    """
    cfg = snapshot(config)
    if not cfg.enabled:
        return []
    exclusions = ExclusionIndex.from_nodes(nodes, cfg.excluded_kinds)
    return list(_classify_spans(text, iter_sentence_spans(text, cfg, start, end), exclusions, cfg))


def _classify_spans(
    text: str,
    spans: Iterable[SentenceSpan],
    exclusions: ExclusionIndex,
    cfg: FrozenConfig,
) -> Iterator[ClassifiedSentence]:
    for span in spans:
        if exclusions.overlaps(span.start, span.end):
            continue
        word_count = count_words(span.text_of(text).strip())
        yield ClassifiedSentence(
            start=span.start,
            end=span.end,
            category=classify(word_count, cfg),
            word_count=word_count,
        )


def process_document(
    doc: Document,
    config: SentenceRhythmConfig | FrozenConfig | None = None,
    markdown: bool = True,
) -> DocumentReport:
    """Classify a document's sentences, skipping Markdown code, comments, links and headings."""
    cfg = snapshot(config)
    if not cfg.enabled:
        return DocumentReport(doc_id=doc.doc_id, sentences=[])
    nodes = iter_markdown_nodes(doc.text) if markdown else None
    exclusions = ExclusionIndex.from_nodes(nodes, cfg.excluded_kinds)
    spans = list(iter_sentence_spans(doc.text, cfg))
    sentences = list(_classify_spans(doc.text, spans, exclusions, cfg))
    LOGGER.debug(
        "%s: %d sentences found, %d highlighted",
        doc.doc_id,
        len(spans),
        len(sentences),
    )
    return DocumentReport(
        doc_id=doc.doc_id, sentences=sentences, excluded=len(spans) - len(sentences)
    )


def process_corpus(
    documents: List[Document],
    config: SentenceRhythmConfig | FrozenConfig | None = None,
    markdown: bool = True,
) -> Dict[str, DocumentReport]:
    """Process all documents and return the per-document reports."""
    cfg = snapshot(config)
    results: Dict[str, DocumentReport] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, cfg, markdown=markdown)
    return results
