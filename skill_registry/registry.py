"""base/override 두 티어를 하나의 이름 공간으로 병합하는 스킬 레지스트리.

우선순위 규칙은 이 모듈의 build_registry에만 존재한다:
- override 스킬은 bare 이름으로 등록된다.
- base 스킬은 bare 이름이 비어 있을 때만 bare 이름으로 등록된다.
  이미 override가 차지했다면 shadowed 목록에 보관된다.
- 모든 base 스킬은 `<namespace>:<name>` 이름으로 항상 등록된다.

Example:
    registry = build_registry(
        SkillSource(base_root, SkillTier.BASE, namespace="core"),
        SkillSource(override_root, SkillTier.OVERRIDE),
    )

    registry.get("brainstorming")       # override 스킬
    registry.get("core:brainstorming")  # base 스킬
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from skill_registry.load import SkillEntry, SkillSource, SkillTier

logger = logging.getLogger(__name__)


class SkillRegistry:
    """조회 키 → SkillEntry 매핑.

    호출마다 새로 만들어지며 생성 후 변경되지 않는다.

    Args:
        entries: 조회 키(bare 또는 네임스페이스 이름)에서 엔트리로의 매핑.
        shadowed: override 스킬에 bare 이름을 빼앗긴 base 엔트리들.
    """

    def __init__(
        self,
        entries: Mapping[str, SkillEntry] | None = None,
        shadowed: tuple[SkillEntry, ...] = (),
    ) -> None:
        self._entries: dict[str, SkillEntry] = dict(entries or {})
        self.shadowed = tuple(shadowed)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def get(self, key: str) -> SkillEntry | None:
        """정확한 조회 키로 엔트리를 가져온다."""
        return self._entries.get(key)

    def keys(self) -> list[str]:
        """모든 조회 키 (정렬됨)."""
        return sorted(self._entries)

    def items(self) -> list[tuple[str, SkillEntry]]:
        return sorted(self._entries.items())

    def entries(self) -> list[SkillEntry]:
        """조회 가능한 고유 엔트리 목록.

        여러 키로 도달할 수 있는 엔트리도 한 번만 포함되며
        canonical_name 순으로 정렬된다.
        """
        unique = {entry.canonical_name: entry for entry in self._entries.values()}
        return [unique[name] for name in sorted(unique)]

    def shadowed_by(self, entry: SkillEntry) -> SkillEntry | None:
        """base 엔트리를 가리는 override 엔트리. 가려지지 않았으면 None."""
        if entry not in self.shadowed:
            return None
        return self._entries.get(entry.name)


def build_registry(
    base_source: SkillSource | None,
    override_source: SkillSource | None,
) -> SkillRegistry:
    """두 Skill Source를 병합해 SkillRegistry를 만든다.

    두 소스가 모두 비어 있거나 없으면 빈 레지스트리를 반환한다 (오류 아님).

    Args:
        base_source: 기본 스킬 소스 (네임스페이스 이름을 가짐)
        override_source: 사용자 오버라이드 스킬 소스

    Returns:
        병합된 SkillRegistry
    """
    entries: dict[str, SkillEntry] = {}
    shadowed: list[SkillEntry] = []

    # override 스킬을 먼저 등록
    if override_source is not None:
        for entry in override_source.list_skills():
            entries[entry.name] = entry

    if base_source is not None:
        for entry in base_source.list_skills():
            occupant = entries.get(entry.name)
            if occupant is not None and occupant.tier is SkillTier.OVERRIDE:
                logger.debug(
                    "'%s'이 override 스킬(%s)에 가려짐", entry.canonical_name, occupant.location
                )
                shadowed.append(entry)
            else:
                entries[entry.name] = entry
            # 가려진 base 스킬도 네임스페이스 이름으로는 항상 도달 가능
            if entry.namespace:
                entries[entry.canonical_name] = entry

    logger.debug(
        "레지스트리 구성: 조회 키 %d개, 가려진 스킬 %d개", len(entries), len(shadowed)
    )
    return SkillRegistry(entries, tuple(shadowed))
