from sentence_rhythm.config import ColorSettings, SentenceRhythmConfig
from sentence_rhythm.models import Category, ClassifiedSentence
from sentence_rhythm.styles import css_class, render_html, render_stylesheet, style_variables


def test_css_class_per_category():
    assert css_class(Category.XS) == "sentence-length-xs"
    assert css_class(Category.XL) == "sentence-length-xl"


def test_style_variables_follow_configured_colors():
    variables = style_variables(ColorSettings(sm="rebeccapurple"))

    assert variables["--sentence-length-highlight-color-sm"] == "rebeccapurple"
    assert variables["--sentence-length-highlight-color-xs"] == "#fff2c8"
    assert len(variables) == 5


def test_render_stylesheet_defines_rules():
    css = render_stylesheet(SentenceRhythmConfig())

    assert ":root {" in css
    assert (
        ".sentence-length-highlighting-active .sentence-length-md "
        "{ background-color: var(--sentence-length-highlight-color-md); }"
    ) in css


def test_render_html_wraps_and_escapes_sentences():
    text = "Hi <b>. Plain tail"
    sentences = [ClassifiedSentence(0, 7, Category.XS, 1)]
    page = render_html(text, sentences, SentenceRhythmConfig(enabled=True))

    assert '<span class="sentence-length-xs" data-words="1">Hi &lt;b&gt;.</span>' in page
    assert " Plain tail</pre>" in page
    assert '<body class="sentence-length-highlighting-active">' in page
