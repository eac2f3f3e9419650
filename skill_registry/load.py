"""스킬 디렉토리에서 SKILL.md 문서를 찾아 SkillEntry로 나열하는 Skill Source.

각 스킬은 SKILL.md 파일을 가진 하위 디렉토리이다:
- 선택적 YAML 프론트매터 (description이 요약으로 사용됨)
- 에이전트용 마크다운 지침
- 선택적 지원 파일 (스크립트, 설정 등)

SKILL.md 구조 예시:
```markdown
---
name: brainstorming
description: 아이디어를 설계로 다듬는 구조화된 대화 절차
---

# Brainstorming

## 사용 시점
...
```

프론트매터가 없으면 제목 다음의 첫 번째 비어있지 않은 줄이 요약이 된다.
"""

from __future__ import annotations

import logging
import re
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

SKILL_FILE_NAME = "SKILL.md"

NAMESPACE_SEPARATOR = ":"

# SKILL.md 파일 최대 크기 (10MB) - DoS 방지
MAX_SKILL_FILE_SIZE = 10 * 1024 * 1024

MAX_SUMMARY_LENGTH = 200

_FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)


class SkillTier(Enum):
    """스킬 출처 티어."""

    BASE = "base"
    OVERRIDE = "override"


@dataclass(frozen=True)
class SkillEntry:
    """발견된 스킬 하나. 발견 이후 변경되지 않는다."""

    name: str
    """스킬 디렉토리 이름 (티어 내에서 고유)."""

    tier: SkillTier
    """스킬 출처 티어."""

    location: Path
    """SKILL.md 파일 경로."""

    summary: str = ""
    """문서의 첫 설명 줄 (최대 200자)."""

    namespace: str | None = None
    """base 티어 스킬의 네임스페이스. override 티어는 None."""

    @property
    def canonical_name(self) -> str:
        """조회에 쓰이는 정식 이름 (base는 `<namespace>:<name>`)."""
        if self.namespace:
            return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"
        return self.name


def _is_safe_path(path: Path, base_dir: Path) -> bool:
    """경로가 base_dir 내에 안전하게 포함되어 있는지 확인한다.

    심볼릭 링크를 따라간 실제 경로가 기본 디렉토리 밖을 가리키면 False.
    """
    try:
        path.resolve().relative_to(base_dir.resolve())
        return True
    except ValueError:
        return False
    except (OSError, RuntimeError):
        # 순환 심볼릭 링크 등
        return False


def _truncate(text: str) -> str:
    text = " ".join(text.split())
    if len(text) > MAX_SUMMARY_LENGTH:
        return text[:MAX_SUMMARY_LENGTH]
    return text


def _first_description_line(body: str) -> str:
    """제목 블록 이후 첫 번째 비어있지 않은, 제목이 아닌 줄."""
    for line in body.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        return stripped
    return ""


def extract_summary(content: str, skill_md_path: Path | None = None) -> str:
    """SKILL.md 내용에서 요약 줄을 추출한다.

    프론트매터에 description이 있으면 그것을, 없으면 본문의 첫 설명 줄을 쓴다.

    Args:
        content: SKILL.md 전체 내용
        skill_md_path: 경고 메시지용 파일 경로

    Returns:
        최대 200자로 잘린 요약. 찾지 못하면 빈 문자열.
    """
    body = content
    match = _FRONTMATTER_PATTERN.match(content)
    if match:
        body = content[match.end() :]
        try:
            frontmatter = yaml.safe_load(match.group(1))
        except yaml.YAMLError as e:
            logger.warning("%s의 YAML 프론트매터가 유효하지 않음: %s", skill_md_path, e)
            frontmatter = None

        if isinstance(frontmatter, dict):
            name = frontmatter.get("name")
            if skill_md_path is not None and name and str(name) != skill_md_path.parent.name:
                logger.warning(
                    "%s: 프론트매터 이름 '%s'이 디렉토리 이름과 다름 (디렉토리 이름 사용)",
                    skill_md_path,
                    name,
                )
            description = frontmatter.get("description")
            if description:
                return _truncate(str(description))

    return _truncate(_first_description_line(body))


class SkillSource:
    """단일 스킬 디렉토리에 대한 추상화.

    스킬 구조:
    skills/
    ├── skill-name/
    │   ├── SKILL.md        # 필수: 지침 문서
    │   └── helper.py       # 선택: 지원 파일
    └── drafts/             # SKILL.md 없음 → 조용히 건너뜀

    Args:
        root: 스킬 디렉토리 경로. 없어도 오류가 아니다.
        tier: 이 디렉토리에서 나온 스킬의 티어.
        namespace: base 티어 스킬의 네임스페이스.
    """

    def __init__(
        self,
        root: str | Path,
        tier: SkillTier,
        *,
        namespace: str | None = None,
    ) -> None:
        self.root = Path(root).expanduser()
        self.tier = tier
        self.namespace = namespace if tier is SkillTier.BASE else None

    def __repr__(self) -> str:
        return f"SkillSource({str(self.root)!r}, {self.tier.value})"

    def _report_unreadable(self, reason: str) -> None:
        # override 티어가 없는 것은 정상적인 설치 상태
        if self.tier is SkillTier.OVERRIDE:
            logger.info("%s 스킬 디렉토리 사용 안 함 (%s): %s", self.tier.value, reason, self.root)
        else:
            logger.warning("%s 스킬 디렉토리를 읽을 수 없음 (%s): %s", self.tier.value, reason, self.root)

    def _parse_entry(self, skill_md_path: Path) -> SkillEntry | None:
        try:
            file_size = skill_md_path.stat().st_size
            if file_size > MAX_SKILL_FILE_SIZE:
                logger.warning(
                    "%s 건너뜀: 파일이 너무 큼 (%d 바이트)", skill_md_path, file_size
                )
                return None
            content = skill_md_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("%s 읽기 오류: %s", skill_md_path, e)
            return None

        return SkillEntry(
            name=skill_md_path.parent.name,
            tier=self.tier,
            location=skill_md_path,
            summary=extract_summary(content, skill_md_path),
            namespace=self.namespace,
        )

    def list_skills(self) -> list[SkillEntry]:
        """디렉토리의 모든 스킬을 이름 순으로 나열한다.

        Returns:
            SkillEntry 목록. 디렉토리가 없거나 읽을 수 없으면 빈 목록.
        """
        try:
            if not self.root.exists():
                self._report_unreadable("없음")
                return []
            if not self.root.is_dir():
                self._report_unreadable("디렉토리가 아님")
                return []
        except OSError as e:
            self._report_unreadable(str(e))
            return []

        try:
            resolved_base = self.root.resolve()
            children = sorted(self.root.iterdir())
        except (OSError, RuntimeError) as e:
            self._report_unreadable(str(e))
            return []

        entries: list[SkillEntry] = []
        for skill_dir in children:
            if skill_dir.name.startswith("."):
                continue

            # ":"는 네임스페이스 구분자라서 스킬 이름에 쓸 수 없다
            if NAMESPACE_SEPARATOR in skill_dir.name:
                logger.warning("%s 건너뜀: 스킬 이름에 '%s' 포함", skill_dir, NAMESPACE_SEPARATOR)
                continue

            # 보안: 스킬 디렉토리 외부를 가리키는 심볼릭 링크 포착
            if not _is_safe_path(skill_dir, resolved_base):
                logger.warning("%s 건너뜀: 스킬 디렉토리 밖을 가리킴", skill_dir)
                continue

            skill_md_path = skill_dir / SKILL_FILE_NAME
            try:
                if not skill_dir.is_dir():
                    continue
                if not stat.S_ISREG(skill_md_path.stat().st_mode):
                    continue
            except (FileNotFoundError, NotADirectoryError):
                continue
            except OSError as e:
                logger.warning("%s 건너뜀: 읽을 수 없음 (%s)", skill_dir, e)
                continue

            if not _is_safe_path(skill_md_path, resolved_base):
                logger.warning("%s 건너뜀: 스킬 디렉토리 밖을 가리킴", skill_md_path)
                continue

            entry = self._parse_entry(skill_md_path)
            if entry is not None:
                entries.append(entry)

        logger.debug("%s에서 스킬 %d개 발견", self.root, len(entries))
        return entries
