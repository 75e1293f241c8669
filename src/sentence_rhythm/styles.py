from __future__ import annotations

import html
from typing import Dict, Iterable

from .config import ColorSettings, SentenceRhythmConfig
from .models import Category, ClassifiedSentence

CLASS_PREFIX = "sentence-length-"
VARIABLE_PREFIX = "--sentence-length-highlight-color-"
ACTIVE_CLASS = "sentence-length-highlighting-active"


def css_class(category: Category) -> str:
    """Return the decoration class name for a category."""
    return f"{CLASS_PREFIX}{category.value}"


def style_variables(colors: ColorSettings) -> Dict[str, str]:
    """Map each category's CSS custom property to its configured colour."""
    return {
        f"{VARIABLE_PREFIX}{category.value}": getattr(colors, category.value)
        for category in Category
    }


def render_stylesheet(config: SentenceRhythmConfig) -> str:
    """Render the variables and per-category rules as a CSS stylesheet."""
    lines = [":root {"]
    for name, value in style_variables(config.colors).items():
        lines.append(f"  {name}: {value};")
    lines.append("}")
    for category in Category:
        lines.append(
            f".{ACTIVE_CLASS} .{css_class(category)} "
            f"{{ background-color: var({VARIABLE_PREFIX}{category.value}); }}"
        )
    return "\n".join(lines) + "\n"


def render_html(
    text: str,
    sentences: Iterable[ClassifiedSentence],
    config: SentenceRhythmConfig,
    title: str = "Sentence rhythm",
) -> str:
    """Render ``text`` as a standalone HTML page with every sentence decorated."""
    parts = []
    cursor = 0
    for sentence in sorted(sentences, key=lambda item: item.start):
        if sentence.start < cursor:
            continue
        parts.append(html.escape(text[cursor : sentence.start]))
        parts.append(
            f'<span class="{css_class(sentence.category)}" '
            f'data-words="{sentence.word_count}">'
            f"{html.escape(text[sentence.start : sentence.end])}</span>"
        )
        cursor = sentence.end
    parts.append(html.escape(text[cursor:]))
    body_class = ACTIVE_CLASS if config.enabled else ""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"<style>\n{render_stylesheet(config)}"
        "pre { white-space: pre-wrap; }\n</style>\n"
        "</head>\n"
        f'<body class="{body_class}">\n<pre>{"".join(parts)}</pre>\n</body>\n</html>\n'
    )
