"""Tests for definition and legend rendering."""

from assessment_app.core.markdown_renderer import MarkdownRenderer


def test_render_fragment_handles_empty_input():
    renderer = MarkdownRenderer()

    assert renderer.render_fragment(None) == ""
    assert renderer.render_fragment("   ") == ""


def test_render_fragment_converts_markdown():
    html = MarkdownRenderer().render_fragment("**Accuracy** is correctness.")

    assert "<strong>Accuracy</strong>" in html


def test_raw_html_is_escaped():
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")

    assert "<script>" not in html


def test_legend_becomes_bullet_list():
    html = MarkdownRenderer().render_legend("1-Poor, 5-Excellent")

    assert html.count("<li>") == 2
    assert "<li>1-Poor</li>" in html
    assert "<li>5-Excellent</li>" in html


def test_multiline_legend_is_rendered_as_markdown():
    html = MarkdownRenderer().render_legend("1 means *poor*\n\n5 means *excellent*")

    assert "<em>poor</em>" in html
    assert "<li>" not in html
