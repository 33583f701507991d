"""Unit tests for core/extract/outline.py"""

from distillmd.core.extract.outline import extract_intro, extract_key_points, extract_keywords


def test_intro_stops_at_first_section(summary):
    assert extract_intro(summary) == (
        "이 강의는 asyncio의 기본 개념을 다룹니다.\n"
        "이벤트 루프와 코루틴을 중심으로 설명합니다."
    )


def test_intro_empty_when_summary_starts_with_section():
    assert extract_intro("# 제목\n## 첫 섹션\n본문") == ""


def test_key_points_from_summary_section(summary):
    assert extract_key_points(summary) == [
        "이벤트 루프가 작업을 스케줄링한다",
        "코루틴은 await 지점에서 양보한다",
        "TODO: 예제 코드를 반드시 직접 실행해보기",
    ]


def test_key_points_fall_back_to_first_bullets():
    md = "\n".join(f"- point {i}" for i in range(8))
    assert extract_key_points(md) == [f"point {i}" for i in range(5)]


def test_keywords_from_learning_section(summary):
    assert extract_keywords(summary, fallback=["unused"]) == ["asyncio.gather", "세마포어"]


def test_keywords_fall_back_to_tags():
    assert extract_keywords("no keyword section", fallback=["python", "async"]) == ["python", "async"]
    assert extract_keywords("", fallback=None) == []


def test_keywords_limit():
    md = "## 관련 키워드\n" + "\n".join(f"- kw{i}" for i in range(20))
    assert len(extract_keywords(md)) == 10
