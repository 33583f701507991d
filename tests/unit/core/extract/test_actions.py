"""Unit tests for core/extract/actions.py"""

import pytest

from distillmd.core.extract.actions import extract_actions, priority_of
from distillmd.core.models import ActionItem, Priority


def test_explicit_todo_marker(summary):
    assert extract_actions(summary) == [ActionItem(content="예제 코드를 반드시 직접 실행해보기", priority=Priority.high)]


def test_korean_task_marker_with_low_priority():
    actions = extract_actions("- 할 일: 나중에 문서를 정리하기")
    assert actions == [ActionItem(content="나중에 문서를 정리하기", priority=Priority.low)]


def test_imperative_suffix_pattern():
    actions = extract_actions("- 매일 아침 복습을 해보세요")
    assert [a.content for a in actions] == ["매일 아침 복습"]
    assert actions[0].priority == Priority.medium


def test_fallback_to_action_verb_bullets():
    """With no explicit markers, bullets containing an action verb are used."""
    actions = extract_actions("- 테스트 코드 작성하기\n- 그냥 메모")
    assert [a.content for a in actions] == ["테스트 코드 작성하기"]


def test_short_actions_are_dropped():
    assert extract_actions("- TODO: 짧음") == []


@pytest.mark.parametrize("content, expected", [
    ("urgent: fix the build", Priority.high),
    ("optional reading", Priority.low),
    ("필수 과제, 가능하면 오늘", Priority.high),
    ("read the docs", Priority.medium),
])
def test_priority_of(content, expected):
    assert priority_of(content) == expected
