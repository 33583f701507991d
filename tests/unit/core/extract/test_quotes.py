"""Unit tests for core/extract/quotes.py"""

from distillmd.core.extract.quotes import extract_quotes


def test_block_quote_with_nearby_timestamp(summary):
    """A quote within reach of a [MM:SS] token picks it up."""
    quotes = extract_quotes(summary)
    assert len(quotes) == 1
    assert quotes[0].content == "동시성은 병렬성과 다르다는 점을 기억하세요"
    assert quotes[0].timestamp == "00:45"


def test_inline_quoted_span():
    quotes = extract_quotes('강사는 "this is a long enough quote" 라고 말했다')
    assert [q.content for q in quotes] == ["this is a long enough quote"]
    assert quotes[0].timestamp is None


def test_short_and_duplicate_quotes_are_skipped():
    md = '> "짧은 인용"\n> "a repeated quotation here"\n> "a repeated quotation here"'
    assert [q.content for q in extract_quotes(md)] == ["a repeated quotation here"]


def test_labelled_insights_follow_quotes():
    md = '> "first quotation in the text"\n**Insight**: 배움은 반복에서 온다'
    quotes = extract_quotes(md)
    assert [q.content for q in quotes] == ["first quotation in the text", "배움은 반복에서 온다"]


def test_quote_limit():
    md = "\n".join(f'> "quotation number {i:02d} here"' for i in range(15))
    assert len(extract_quotes(md)) == 10
    assert len(extract_quotes(md, limit=3)) == 3


def test_nearest_timestamp_wins_over_earlier_one():
    """When several timestamps fall in the window, the closest to the quote is used."""
    md = "[00:10] intro " + "x" * 60 + "\n> 이것은 아주 중요한 인용문입니다 [00:55]"
    assert extract_quotes(md)[0].timestamp == "00:55"

    md = "[00:10] " + "x" * 50 + '\n> "a quotation in the middle"\n[00:20]'
    assert extract_quotes(md)[0].timestamp == "00:20"
