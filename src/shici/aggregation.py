"""코퍼스 집계 - 빈도 통계, 비복원 무작위 추출, 목록 자르기."""

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from shici.models import Poem


@dataclass
class Stat:
    """코퍼스 통계 (실행마다 새로 계산)."""

    total: int
    author: list[tuple[str, int]] = field(default_factory=list)
    dynasty: list[tuple[str, int]] = field(default_factory=list)


def word_count(words: Iterable[str], sort: bool = False) -> list[tuple[str, int]]:
    """값별 출현 횟수.

    Args:
        words: 값 목록 (중복 포함)
        sort: True면 횟수 내림차순, 동점이면 값 오름차순

    Returns:
        (값, 횟수) 리스트. 정렬하지 않으면 처음 등장한 순서
    """
    pairs = list(Counter(words).items())
    if sort:
        pairs.sort(key=lambda p: (-p[1], p[0]))
    return pairs


def build_stat(poems: Sequence[Poem], sort: bool = False) -> Stat:
    """작자/왕조별 통계 생성."""
    return Stat(
        total=len(poems),
        author=word_count((p.author for p in poems), sort),
        dynasty=word_count((p.dynasty for p in poems), sort),
    )


def sample(
    poems: Sequence[Poem],
    count: int,
    rng: Optional[random.Random] = None,
) -> list[Poem]:
    """비복원 균등 추출.

    전체를 섞은 뒤 앞에서 count개를 취한다. count가 코퍼스 크기보다 크면
    코퍼스 크기로 줄인다. 입력 시퀀스는 바꾸지 않는다.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = rng or random.Random()
    shuffled = list(poems)
    rng.shuffle(shuffled)
    return shuffled[:min(count, len(shuffled))]


def take(poems: Sequence[Poem], limit: Optional[int] = None) -> list[Poem]:
    """코퍼스 순서대로 최대 limit개. None이면 전부."""
    if limit is None:
        return list(poems)
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return list(poems[:limit])
