"""Unit tests for core/extract/sections.py"""

import pytest

from distillmd.core.extract.sections import SectionStart, Skip, classify_line, parse_sections
from distillmd.core.models import SectionItemType


def _types(section):
    return [item.type for item in section.items]


def test_numbered_section_with_description_and_subsection():
    """A numbered line opens a section; leading text is its description."""
    md = "1. 개요\n설명입니다\n- 핵심 내용\n1.1 세부사항\n- 디테일"
    sections = parse_sections(md)
    assert len(sections) == 1
    s = sections[0]
    assert (s.number, s.title, s.description) == ("1", "개요", "설명입니다")
    assert _types(s) == [SectionItemType.bullet, SectionItemType.subsection, SectionItemType.bullet]
    assert s.items[1].marker == "1.1"
    assert s.items[1].content == "세부사항"


def test_timestamp_bullet_becomes_timestamp_item():
    """A bullet opening with [MM:SS] carries the timestamp separately."""
    sections = parse_sections("1. 시작\n- [01:23] 핵심 포인트")
    item = sections[0].items[0]
    assert item.type == SectionItemType.timestamp_item
    assert item.timestamp == "01:23"
    assert item.content == "핵심 포인트"


def test_sample_summary_sections(summary):
    """Numbered and ## / ### headings all open sections, in document order."""
    sections = parse_sections(summary)
    assert [s.number for s in sections] == ["1", "2", "3", "4"]
    assert [s.title for s in sections] == ["개요", "핵심 개념", "핵심 정리", "추가 학습 키워드"]
    assert _types(sections[0]) == [SectionItemType.timestamp_item, SectionItemType.bullet, SectionItemType.quote]
    assert _types(sections[1]) == [SectionItemType.subsection, SectionItemType.bullet, SectionItemType.highlight_box]
    assert sections[1].description is None


def test_quote_glyphs_are_stripped(summary):
    quote = parse_sections(summary)[0].items[2]
    assert quote.content == "동시성은 병렬성과 다르다는 점을 기억하세요"


def test_content_before_first_section_is_dropped():
    sections = parse_sections("intro line\n- loose bullet\n\n2. 본문\n- a bullet")
    assert len(sections) == 1
    assert sections[0].number == "2"
    assert sections[0].description is None


def test_heading_title_timestamp_and_bold_removed():
    """## headings lose a [HH:MM] token and wrapping ** from the title."""
    s = parse_sections("## [01:02] **Intro**\ntext")[0]
    assert s.title == "Intro"
    assert s.timestamp == "01:02"
    assert s.number == "1"


def test_heading_sections_numbered_by_ordinal_among_all_sections():
    """Heading sections take their ordinal; numbered lines keep their own number."""
    sections = parse_sections("## A\n1. B\n## C")
    assert [s.number for s in sections] == ["1", "1", "3"]


@pytest.mark.parametrize("line, kind, marker", [
    ("#### 소제목", SectionItemType.heading, None),
    ("💡 기억할 점", SectionItemType.highlight_box, "💡"),
    ("- ⚠️ 주의하세요", SectionItemType.highlight_box, "⚠️"),
    ("TIP: 자주 쓰는 패턴", SectionItemType.highlight_box, "TIP"),
    ("a) 첫 번째", SectionItemType.alpha_list, "a"),
    ("ii. 두 번째", SectionItemType.roman_list, "ii"),
    ("* 별표 목록", SectionItemType.bullet, None),
    ("> 인용문", SectionItemType.quote, None),
    ("그냥 문장", SectionItemType.text, None),
])
def test_classify_item_lines(line, kind, marker):
    item = classify_line(line)
    assert item.type == kind
    assert item.marker == marker


def test_single_letter_roman_numeral_is_alpha():
    """First match wins, so 'i.' is read as an alphabetic marker."""
    assert classify_line("i. item").type == SectionItemType.alpha_list


def test_highlight_content_is_unbolded():
    item = classify_line("**NOTE:** **중요한 내용**")
    assert item.type == SectionItemType.highlight_box
    assert item.content == "중요한 내용"


def test_classify_structure_lines():
    assert isinstance(classify_line("# 제목"), Skip)
    assert classify_line("3. 결론") == SectionStart(title="결론", number="3")
    assert classify_line("### 정리") == SectionStart(title="정리")


def test_blank_and_empty_quote_lines_are_dropped():
    assert classify_line("   ") is None
    assert classify_line(">") is None
    assert parse_sections("1. 제목\n>\n")[0].items == ()


def test_intro_marker_is_stripped_before_classification():
    assert classify_line("**[인트로]** - 요점").type == SectionItemType.bullet


@pytest.mark.parametrize("value", [None, "", 42, ["1. a"]])
def test_parse_sections_never_raises(value):
    """Non-string and empty inputs give an empty list."""
    assert parse_sections(value) == []


@pytest.mark.parametrize("value", ["*****", "## **", "1. \n", "- ", "1.1.", "\x00"])
def test_parse_sections_tolerates_malformed_lines(value):
    """Degenerate markup still yields a list of well-typed sections."""
    sections = parse_sections(value)
    assert isinstance(sections, list)
    assert all(isinstance(item.type, SectionItemType) for s in sections for item in s.items)
