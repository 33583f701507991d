"""Unit tests for core/extract/toc.py"""

from distillmd.core.extract.toc import extract_toc


def test_toc_levels_and_anchors(summary):
    """Top-level numbers are level 1, dotted numbers level 2."""
    toc = extract_toc(summary)
    assert [(e.level, e.number, e.title, e.id) for e in toc] == [
        (1, "1", "개요", "section-1"),
        (1, "2", "핵심 개념", "section-2"),
        (2, "1.1", "이벤트 루프", "section-1-1"),
    ]


def test_toc_trailing_dot_is_dropped():
    entry = extract_toc("1.2. 세부 항목")[0]
    assert entry.number == "1.2"
    assert entry.level == 2


def test_toc_skips_bold_and_overlong_titles():
    md = "1. **굵은 목록**\n2. " + "x" * 101 + "\n3. 결론"
    assert [e.number for e in extract_toc(md)] == ["3"]


def test_toc_repeated_numbers_get_unique_ids():
    ids = [e.id for e in extract_toc("1. 하나\n1. 또 하나\n1. 세 번째")]
    assert ids == ["section-1", "section-1-2", "section-1-3"]


def test_toc_empty_input():
    assert extract_toc("") == []
    assert extract_toc(None) == []
