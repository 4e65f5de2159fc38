"""Unit tests for quote rendering."""

from romedy_quiz.core.quote_renderer import QuoteRenderer


def test_render_quote_wraps_and_sizes():
    html = QuoteRenderer().render_quote("As you wish.", font_size=20)
    assert "font-size: 20pt" in html
    assert "“As you wish.”" in html


def test_raw_html_is_escaped():
    html = QuoteRenderer().render_fragment("<b>bold</b>")
    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_empty_fragment_placeholder():
    assert "No quote provided" in QuoteRenderer().render_fragment("   ")


def test_asterisks_are_not_emphasis():
    html = QuoteRenderer().render_quote("You're a d*ck and I'm a d*ck.")
    assert "You're a d*ck and I'm a d*ck." in html
    assert "<em>" not in html


def test_dash_line_is_not_a_list():
    html = QuoteRenderer().render_quote("Line one\n- Line two")
    assert "<ul>" not in html
    assert "<li>" not in html
    assert "<br" in html
    assert "- Line two”" in html
