"""스킬 이름 퍼지 매칭.

파일시스템과 무관한 순수 함수만 둔다.
"""

from __future__ import annotations

import difflib
import re
from collections.abc import Iterable

DEFAULT_LIMIT = 5

# 이 점수 미만의 후보는 제안하지 않는다
MIN_SCORE = 0.5

_TOKEN_SPLIT = re.compile(r"[\s:_\-/]+")


def _tokens(text: str) -> set[str]:
    return {token for token in _TOKEN_SPLIT.split(text.lower()) if token}


def similarity(query: str, candidate: str) -> float:
    """0.0 ~ 1.0 사이의 유사도 점수.

    대소문자를 무시한 SequenceMatcher 비율과 토큰 Jaccard 중 큰 값.
    """
    query_lower = query.lower()
    candidate_lower = candidate.lower()
    ratio = difflib.SequenceMatcher(None, query_lower, candidate_lower).ratio()

    query_tokens = _tokens(query_lower)
    candidate_tokens = _tokens(candidate_lower)
    overlap = 0.0
    if query_tokens and candidate_tokens:
        overlap = len(query_tokens & candidate_tokens) / len(query_tokens | candidate_tokens)

    return max(ratio, overlap)


def rank_candidates(
    query: str,
    candidates: Iterable[str],
    *,
    limit: int | None = DEFAULT_LIMIT,
    min_score: float = MIN_SCORE,
) -> list[tuple[str, float]]:
    """후보 이름들을 query와의 유사도 순으로 정렬한다.

    Args:
        query: 사용자가 입력한 이름
        candidates: 후보 이름들 (중복은 한 번만 평가)
        limit: 반환할 최대 개수. None이면 제한 없음
        min_score: 이 점수 미만의 후보는 제외

    Returns:
        (이름, 점수) 목록. 점수 내림차순, 동점이면 이름 오름차순.
    """
    if not query:
        return []

    scored = [
        (name, similarity(query, name))
        for name in set(candidates)
    ]
    ranked = sorted(
        (item for item in scored if item[1] >= min_score),
        key=lambda item: (-item[1], item[0]),
    )
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
