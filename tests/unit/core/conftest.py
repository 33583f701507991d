"""Shared fixtures for core unit tests"""

import pytest

from distillmd.core.editing import make_block, normalize_positions
from distillmd.core.models import BlockType


SAMPLE_SUMMARY = """\
# 파이썬 비동기 프로그래밍 강의 요약

[Intro] 이 강의는 asyncio의 기본 개념을 다룹니다.
이벤트 루프와 코루틴을 중심으로 설명합니다.

1. 개요
비동기 프로그래밍이 필요한 이유를 소개합니다.
- [00:45] 동기 코드의 한계
- 블로킹 I/O 문제
> "동시성은 병렬성과 다르다는 점을 기억하세요"

2. 핵심 개념
1.1 이벤트 루프
- **코루틴**: async def로 정의되는 일시 중단 가능한 함수입니다
💡 await는 코루틴 안에서만 사용할 수 있습니다

## 핵심 정리
- 이벤트 루프가 작업을 스케줄링한다
- 코루틴은 await 지점에서 양보한다
- TODO: 예제 코드를 반드시 직접 실행해보기

### 추가 학습 키워드
- asyncio.gather
- 세마포어
"""


@pytest.fixture(name="summary")
def summary_fixture():
    return SAMPLE_SUMMARY


@pytest.fixture(name="blocks")
def blocks_fixture():
    """Five text blocks A..E with positions 0..4."""
    return normalize_positions([make_block("doc-1", BlockType.text, c) for c in "ABCDE"])
