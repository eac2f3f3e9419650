"""스킬 루트 디렉토리 설정.

환경 변수 (또는 .env 파일):
- SKILL_REGISTRY_BASE_ROOT: base 스킬 디렉토리
- SKILL_REGISTRY_OVERRIDE_ROOT: override 스킬 디렉토리
- SKILL_REGISTRY_NAMESPACE: base 스킬의 네임스페이스
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from skill_registry.load import SkillSource, SkillTier

BASE_ROOT_ENV = "SKILL_REGISTRY_BASE_ROOT"
OVERRIDE_ROOT_ENV = "SKILL_REGISTRY_OVERRIDE_ROOT"
NAMESPACE_ENV = "SKILL_REGISTRY_NAMESPACE"

DEFAULT_BASE_ROOT = Path("~/.skill-registry/core/skills")
DEFAULT_OVERRIDE_ROOT = Path("~/.skill-registry/personal/skills")
DEFAULT_NAMESPACE = "core"


@dataclass
class RegistryConfig:
    """Skill Source 루트 설정."""

    base_root: Path = field(default_factory=lambda: DEFAULT_BASE_ROOT.expanduser())
    """base 티어 스킬 디렉토리."""

    override_root: Path = field(default_factory=lambda: DEFAULT_OVERRIDE_ROOT.expanduser())
    """override 티어 스킬 디렉토리. 없어도 된다."""

    namespace: str = DEFAULT_NAMESPACE
    """base 스킬의 정식 이름 접두사."""

    def __post_init__(self) -> None:
        self.base_root = Path(self.base_root).expanduser()
        self.override_root = Path(self.override_root).expanduser()

    @classmethod
    def from_env(
        cls,
        *,
        base_root: str | Path | None = None,
        override_root: str | Path | None = None,
        namespace: str | None = None,
    ) -> RegistryConfig:
        """환경 변수로 설정을 만든다. 인자로 준 값이 환경 변수보다 우선한다."""
        load_dotenv()

        return cls(
            base_root=base_root or os.environ.get(BASE_ROOT_ENV) or DEFAULT_BASE_ROOT,
            override_root=override_root
            or os.environ.get(OVERRIDE_ROOT_ENV)
            or DEFAULT_OVERRIDE_ROOT,
            namespace=namespace or os.environ.get(NAMESPACE_ENV) or DEFAULT_NAMESPACE,
        )

    def base_source(self) -> SkillSource:
        return SkillSource(self.base_root, SkillTier.BASE, namespace=self.namespace)

    def override_source(self) -> SkillSource:
        return SkillSource(self.override_root, SkillTier.OVERRIDE)
