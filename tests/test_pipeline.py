from sentence_rhythm.config import SentenceRhythmConfig
from sentence_rhythm.models import Category, ClassifiedSentence, Document, StructuralNode
from sentence_rhythm.pipeline import analyze, process_corpus, process_document

ENABLED = SentenceRhythmConfig(enabled=True)


def test_analyze_classifies_each_sentence():
    result = analyze("Hi. This is a test.", config=ENABLED)

    assert result == [
        ClassifiedSentence(start=0, end=3, category=Category.XS, word_count=1),
        ClassifiedSentence(start=4, end=19, category=Category.SM, word_count=4),
    ]


def test_analyze_disabled_returns_nothing():
    assert analyze("Hi. This is a test.", config=SentenceRhythmConfig()) == []


def test_analyze_empty_text():
    assert analyze("", config=ENABLED) == []


def test_analyze_skips_sentences_touching_exclusions():
    text = "Use `pip install` now. Plain prose here."
    nodes = [("inline-code", 4, 17), StructuralNode("paragraph", 0, len(text))]
    result = analyze(text, nodes, ENABLED)

    assert [(item.start, item.end) for item in result] == [(23, 40)]
    assert result[0].category == Category.SM


def test_analyze_viewport_restricts_scanning():
    text = "First one.\nSecond one. Third one."
    result = analyze(text, config=ENABLED, start=11, end=22)

    assert [(item.start, item.end) for item in result] == [(11, 22)]


def test_analyze_is_idempotent_and_ordered():
    text = (
        "A tiny one. This sentence is a fair bit longer than the previous one! "
        "Short? 这是一个中文句子。 > Quoted words here.\nTail without end"
    )
    first = analyze(text, [("link", 0, 3)], ENABLED)
    second = analyze(text, [("link", 0, 3)], ENABLED)

    assert first == second
    assert all(a.end <= b.start for a, b in zip(first, first[1:]))
    assert all(not (item.start <= 3 and item.end > 0) for item in first)


def test_process_document_skips_markdown_headings_and_links():
    doc = Document(
        doc_id="notes.md",
        text=(
            "# Heading here.\n"
            "A plain sentence. Check [the docs](https://example.com) now.\n"
        ),
    )
    report = process_document(doc, ENABLED)

    assert [doc.text[s.start : s.end] for s in report.sentences] == ["A plain sentence."]
    assert report.excluded >= 2


def test_process_document_skips_fenced_code_unless_plain():
    doc = Document(doc_id="code.md", text="```\nx = 1. y = 2.\n```\nReal text here.")

    report = process_document(doc, ENABLED)
    assert [(s.start, s.end) for s in report.sentences] == [(22, 37)]

    plain = process_document(doc, ENABLED, markdown=False)
    assert len(plain.sentences) == 3


def test_process_corpus_reports_category_counts():
    docs = [
        Document("a", "One. Two words. Three short words."),
        Document("b", "Nothing ends here"),
    ]
    results = process_corpus(docs, ENABLED)

    assert results["a"].category_counts()[Category.XS] == 2
    assert results["a"].category_counts()[Category.SM] == 1
    assert results["b"].sentences == []
