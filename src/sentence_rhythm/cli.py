from __future__ import annotations

import json
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import ConfigError, SentenceRhythmConfig, load_config, save_config, toggle_enabled
from .models import Category, Document, DocumentReport
from .pipeline import process_corpus, process_document
from .styles import render_html, render_stylesheet

app = typer.Typer(help="Sentence Rhythm CLI.", no_args_is_help=True)

DEFAULT_CONFIG_PATH = Path("sentence-rhythm.yaml")


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    line_breaks: bool | None = typer.Option(
        None,
        "--line-breaks/--no-line-breaks",
        help="Override whether a bare line break ends a sentence.",
    ),
    markdown: bool = typer.Option(
        True,
        "--markdown/--plain",
        help="Skip Markdown code, comments, links and headings (default) or treat input as plain text.",
    ),
    respect_enabled: bool = typer.Option(
        False,
        "--respect-enabled",
        help="Honour the config 'enabled' flag instead of always analyzing.",
    ),
    include_text: bool = typer.Option(
        True, "--include-text/--offsets-only", help="Embed sentence text in the output."
    ),
) -> None:
    """Classify every sentence and emit a JSON summary."""
    cfg = _resolve_config(config, line_breaks, respect_enabled)
    documents = _load_documents(input_path)
    results = process_corpus(documents, cfg, markdown=markdown)
    texts = {doc.doc_id: doc.text for doc in documents}
    summary = [
        _report_dict(report, texts[doc_id] if include_text else None)
        for doc_id, report in sorted(results.items())
    ]
    typer.echo(json.dumps({"documents": summary}, indent=2, ensure_ascii=False))


@app.command()
def stats(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    line_breaks: bool | None = typer.Option(
        None, "--line-breaks/--no-line-breaks", help="Override the line-break rule."
    ),
    markdown: bool = typer.Option(True, "--markdown/--plain"),
) -> None:
    """Print how many sentences fall into each length category."""
    cfg = _resolve_config(config, line_breaks, respect_enabled=False)
    documents = _load_documents(input_path)
    results = process_corpus(documents, cfg, markdown=markdown)
    totals = {category.value: 0 for category in Category}
    per_document: List[DocumentStats] = []
    for doc_id, report in sorted(results.items()):
        counts = _counts_dict(report)
        for key, value in counts.items():
            totals[key] += value
        per_document.append(
            {"doc_id": doc_id, "counts": counts, "excluded": report.excluded}
        )
    typer.echo(json.dumps({"documents": per_document, "totals": totals}, indent=2))


@app.command()
def render(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path = typer.Option(..., dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    line_breaks: bool | None = typer.Option(
        None, "--line-breaks/--no-line-breaks", help="Override the line-break rule."
    ),
    markdown: bool = typer.Option(True, "--markdown/--plain"),
) -> None:
    """Write an HTML page with each sentence highlighted by length."""
    cfg = _resolve_config(config, line_breaks, respect_enabled=False)
    doc = _document_from_file(input_path, input_path.name)
    report = process_document(doc, cfg, markdown=markdown)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        render_html(doc.text, report.sentences, cfg, title=doc.doc_id), encoding="utf-8"
    )
    typer.echo(f"Wrote {len(report.sentences)} highlighted sentences to {output_path}")


@app.command()
def toggle(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c"),
) -> None:
    """Flip the 'enabled' flag and save the configuration."""
    cfg = toggle_enabled(_load_or_fail(config))
    save_config(cfg, config)
    typer.echo(f"Sentence highlighting {'enabled' if cfg.enabled else 'disabled'}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = SentenceRhythmConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


@app.command()
def styles(
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the highlight stylesheet for the configured colours."""
    typer.echo(render_stylesheet(_load_or_fail(config)), nl=False)


def main() -> None:
    app()


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".markdown"}


class SentencePayload(TypedDict, total=False):
    start: int
    end: int
    category: str
    word_count: int
    text: str


class DocumentSummary(TypedDict):
    doc_id: str
    sentences: List[SentencePayload]
    counts: Dict[str, int]
    excluded: int


class DocumentStats(TypedDict):
    doc_id: str
    counts: Dict[str, int]
    excluded: int


def _load_or_fail(path: Path | None) -> SentenceRhythmConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _resolve_config(
    path: Path | None, line_breaks: bool | None, respect_enabled: bool
) -> SentenceRhythmConfig:
    """Load the config and apply CLI overrides."""
    cfg = _load_or_fail(path)
    if line_breaks is not None:
        cfg = dc_replace(cfg, treat_line_break_as_sentence_end=line_breaks)
    if not respect_enabled:
        # An explicit CLI request always analyzes, whatever the editor toggle says.
        cfg = dc_replace(cfg, enabled=True)
    return cfg


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their path relative to it."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, file.relative_to(input_path).as_posix()) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {exc}") from exc
    # Editors hand the engine LF-only text; keep offsets comparable.
    return Document(doc_id=doc_id, text=text.replace("\r\n", "\n"))


def _counts_dict(report: DocumentReport) -> Dict[str, int]:
    return {category.value: count for category, count in report.category_counts().items()}


def _report_dict(report: DocumentReport, text: str | None) -> DocumentSummary:
    """Serialize a DocumentReport so it can be emitted in JSON."""
    sentences: List[SentencePayload] = []
    for sentence in report.sentences:
        payload: SentencePayload = {
            "start": sentence.start,
            "end": sentence.end,
            "category": sentence.category.value,
            "word_count": sentence.word_count,
        }
        if text is not None:
            payload["text"] = text[sentence.start : sentence.end]
        sentences.append(payload)
    return {
        "doc_id": report.doc_id,
        "sentences": sentences,
        "counts": _counts_dict(report),
        "excluded": report.excluded,
    }


if __name__ == "__main__":
    main()
