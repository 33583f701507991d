"""Unit tests for core/render.py"""

from distillmd.core.render import render_html, to_plain_text


def test_render_html_basic_markdown():
    html = render_html("## 제목\n\n- 하나\n- **둘**")
    assert "<h2>제목</h2>" in html
    assert "<li><strong>둘</strong></li>" in html


def test_render_html_empty():
    assert render_html("") == ""
    assert render_html(None) == ""


def test_plain_text_strips_syntax():
    text = to_plain_text("# 제목\n\n본문 **강조** 와 `코드`\n\n- 항목\n\n```\nx = 1\n```")
    assert text == "제목\n\n본문 강조 와 코드\n\n항목\n\nx = 1"
