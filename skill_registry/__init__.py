"""에이전트 스킬 레지스트리.

두 티어(base, override)의 SKILL.md 문서를 발견하고 이름 충돌을 해결한 뒤
요청된 스킬의 내용을 돌려준다:
1. SkillSource가 디렉토리에서 SkillEntry를 나열
2. build_registry가 override 우선순위로 두 티어를 병합
3. resolve가 정확/접두사/퍼지 매칭으로 스킬을 해석

공개 API:
- SkillSource, SkillEntry, SkillTier: 스킬 발견
- SkillRegistry, build_registry: 티어 병합
- resolve, search, Found, NotFound, Ambiguous: 스킬 해석
- rank_candidates: 순수 퍼지 매칭 함수
- RegistryConfig: 루트 디렉토리 설정
"""

from skill_registry.config import RegistryConfig
from skill_registry.load import SkillEntry, SkillSource, SkillTier
from skill_registry.matching import rank_candidates
from skill_registry.registry import SkillRegistry, build_registry
from skill_registry.resolver import (
    Ambiguous,
    Found,
    NotFound,
    ResolutionResult,
    SkillContentError,
    SkillRegistryError,
    resolve,
    search,
)

__all__ = [
    "RegistryConfig",
    "SkillEntry",
    "SkillSource",
    "SkillTier",
    "rank_candidates",
    "SkillRegistry",
    "build_registry",
    "Ambiguous",
    "Found",
    "NotFound",
    "ResolutionResult",
    "SkillContentError",
    "SkillRegistryError",
    "resolve",
    "search",
]
