"""SkillRegistry에 대한 스킬 이름 해석.

매칭 순서 (먼저 맞는 것이 이긴다):
1. 대소문자를 구분하는 정확한 키 매칭
2. 대소문자를 무시한 정확한 매칭
3. 접두사 매칭 - 엔트리가 하나일 때만 선택, 여럿이면 Ambiguous
4. 퍼지 매칭 - 선택하지 않고 NotFound의 제안으로만 사용

결과는 Found | NotFound | Ambiguous 중 하나이다. 찾은 스킬의 문서를
읽지 못하면 결과 대신 SkillContentError가 발생한다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from skill_registry.load import SkillEntry
from skill_registry.matching import DEFAULT_LIMIT, rank_candidates
from skill_registry.registry import SkillRegistry

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10


class SkillRegistryError(Exception):
    """skill_registry 오류의 기본 클래스."""


class SkillContentError(SkillRegistryError):
    """발견 시점에 있던 스킬 문서를 해석 시점에 읽을 수 없음."""

    def __init__(self, entry: SkillEntry, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(
            f"Cannot read skill '{entry.canonical_name}' at {entry.location}: {reason}"
        )


@dataclass(frozen=True)
class Found:
    """스킬을 찾았고 문서를 읽었다."""

    entry: SkillEntry
    content: str


@dataclass(frozen=True)
class NotFound:
    """충분히 일치하는 스킬이 없다."""

    query: str
    suggestions: tuple[SkillEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Ambiguous:
    """질의가 둘 이상의 스킬과 일치한다."""

    query: str
    candidates: tuple[SkillEntry, ...] = field(default_factory=tuple)


ResolutionResult = Found | NotFound | Ambiguous


def _unique(entries: list[SkillEntry]) -> list[SkillEntry]:
    seen: dict[str, SkillEntry] = {}
    for entry in entries:
        seen.setdefault(entry.canonical_name, entry)
    return list(seen.values())


def _by_name(entries: list[SkillEntry]) -> list[SkillEntry]:
    return sorted(_unique(entries), key=lambda entry: entry.canonical_name)


def load_content(entry: SkillEntry) -> str:
    """스킬 문서 전체 내용을 읽는다.

    Raises:
        SkillContentError: 문서가 사라졌거나 읽을 수 없을 때
    """
    try:
        return entry.location.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillContentError(entry, str(e)) from e


def suggest(registry: SkillRegistry, query: str, limit: int = DEFAULT_LIMIT) -> list[SkillEntry]:
    """퍼지 점수 순으로 제안할 엔트리 목록.

    같은 엔트리에 닿는 키가 여럿이면 가장 높은 점수 하나만 남긴다.
    """
    best: dict[str, tuple[float, SkillEntry]] = {}
    for key, score in rank_candidates(query, registry.keys(), limit=None):
        entry = registry.get(key)
        if entry is None:
            continue
        current = best.get(entry.canonical_name)
        if current is None or score > current[0]:
            best[entry.canonical_name] = (score, entry)

    ranked = sorted(best.values(), key=lambda item: (-item[0], item[1].canonical_name))
    return [entry for _, entry in ranked[:limit]]


def _match(registry: SkillRegistry, query: str) -> SkillEntry | NotFound | Ambiguous:
    entry = registry.get(query)
    if entry is not None:
        return entry

    lowered = query.lower()
    keys = registry.keys()

    folded = _by_name([registry.get(key) for key in keys if key.lower() == lowered])
    if len(folded) == 1:
        return folded[0]
    if folded:
        return Ambiguous(query, tuple(folded))

    prefixed = _by_name([registry.get(key) for key in keys if key.lower().startswith(lowered)])
    if len(prefixed) == 1:
        return prefixed[0]
    if prefixed:
        return Ambiguous(query, tuple(prefixed))

    return NotFound(query, tuple(suggest(registry, query)))


def resolve(registry: SkillRegistry, query: str) -> ResolutionResult:
    """스킬 이름을 해석하고 찾았다면 문서 내용을 읽는다.

    Args:
        registry: build_registry로 만든 레지스트리
        query: bare 이름, 네임스페이스 이름, 또는 그 일부

    Returns:
        Found, NotFound, Ambiguous 중 하나

    Raises:
        SkillContentError: 스킬은 있으나 문서를 읽을 수 없을 때
    """
    query = query.strip()
    if not query:
        return NotFound(query)

    match = _match(registry, query)
    if not isinstance(match, SkillEntry):
        logger.debug("'%s' 해석 실패: %s", query, type(match).__name__)
        return match

    logger.debug("'%s' → %s (%s)", query, match.canonical_name, match.tier.value)
    return Found(match, load_content(match))


def search(
    registry: SkillRegistry,
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> list[SkillEntry]:
    """발견용 검색. 선택하지 않고 순위가 매겨진 목록을 돌려준다.

    순서: 정확한 매칭, 접두사 매칭, 이름/요약 부분 문자열 매칭, 퍼지 매칭.
    빈 질의는 전체 목록을 돌려준다.
    """
    query = query.strip()
    if not query:
        return registry.entries()[:limit]

    lowered = query.lower()
    items = registry.items()

    exact = [entry for key, entry in items if key.lower() == lowered]
    prefixed = [entry for key, entry in items if key.lower().startswith(lowered)]
    contained = [
        entry
        for key, entry in items
        if lowered in key.lower() or lowered in entry.summary.lower()
    ]

    ranked = (
        _by_name(exact)
        + _by_name(prefixed)
        + _by_name(contained)
        + suggest(registry, query, limit=limit)
    )
    return _unique(ranked)[:limit]
