"""bootstrap, find-skills, use-skill 명령 구현.

각 명령은 출력 문자열과 종료 코드를 담은 CommandResult를 돌려준다.
출력과 프로세스 종료는 cli 모듈이 맡는다.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from skill_registry.config import RegistryConfig
from skill_registry.load import SkillEntry, SkillTier
from skill_registry.prompts import BOOTSTRAP_INSTRUCTIONS, NO_SKILLS_MESSAGE
from skill_registry.registry import SkillRegistry, build_registry
from skill_registry.resolver import (
    Ambiguous,
    Found,
    SkillContentError,
    resolve,
    search,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
# 2는 argparse 사용법 오류
EXIT_CONTENT_ERROR = 3


@dataclass(frozen=True)
class CommandResult:
    """명령 실행 결과."""

    output: str
    exit_code: int = EXIT_OK

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_OK


def load_registry(config: RegistryConfig) -> SkillRegistry:
    return build_registry(config.base_source(), config.override_source())


def _format_locations(config: RegistryConfig) -> str:
    return "\n".join(
        [
            f"**Stock Skills** (`{config.namespace}:`): `{config.base_root}`",
            f"**Personal Skills**: `{config.override_root}` (overrides stock skills)",
        ]
    )


def _no_skills(config: RegistryConfig) -> str:
    return NO_SKILLS_MESSAGE.format(
        skills_locations_inline=f"{config.base_root} or {config.override_root}"
    )


def format_entry(entry: SkillEntry, registry: SkillRegistry | None = None) -> str:
    line = f"- **{entry.canonical_name}** [{entry.tier.value}]"
    if entry.summary:
        line += f": {entry.summary}"
    if registry is not None:
        shadowing = registry.shadowed_by(entry)
        if shadowing is not None:
            line += f" (overridden by override skill `{shadowing.canonical_name}`)"
    return line


def format_listing(entries: list[SkillEntry], registry: SkillRegistry | None = None) -> str:
    return "\n".join(format_entry(entry, registry) for entry in entries)


def _entries_as_json(entries: list[SkillEntry]) -> str:
    return json.dumps(
        [
            {
                "name": entry.canonical_name,
                "tier": entry.tier.value,
                "summary": entry.summary,
                "location": str(entry.location),
            }
            for entry in entries
        ],
        indent=2,
    )


def bootstrap(config: RegistryConfig) -> CommandResult:
    """안내 문구와 전체 스킬 목록. 항상 성공한다."""
    registry = load_registry(config)
    entries = registry.entries()
    skills_list = format_listing(entries, registry) if entries else _no_skills(config)

    output = BOOTSTRAP_INSTRUCTIONS.format(
        skills_locations=_format_locations(config),
        namespace=config.namespace,
        skills_list=skills_list,
    )
    return CommandResult(output.rstrip() + "\n")


def find_skills(
    config: RegistryConfig,
    query: str | None = None,
    *,
    as_json: bool = False,
) -> CommandResult:
    """스킬 목록 또는 검색 결과. 일치하는 스킬이 없어도 실패가 아니다."""
    registry = load_registry(config)
    query = (query or "").strip()

    if query:
        entries = search(registry, query)
    else:
        entries = registry.entries()

    if as_json:
        return CommandResult(_entries_as_json(entries) + "\n")

    if registry.is_empty:
        return CommandResult(_no_skills(config) + "\n")
    if not entries:
        return CommandResult(f"No skills match '{query}'.\n")

    header = f"Skills matching '{query}':" if query else "Available skills:"
    return CommandResult(f"{header}\n{format_listing(entries, registry)}\n")


def use_skill(config: RegistryConfig, name: str) -> CommandResult:
    """스킬 문서 내용을 그대로 돌려준다.

    Returns:
        Found면 문서 내용과 EXIT_OK, NotFound/Ambiguous면 EXIT_NOT_FOUND,
        문서를 읽지 못하면 EXIT_CONTENT_ERROR.
    """
    registry = load_registry(config)

    try:
        result = resolve(registry, name)
    except SkillContentError as e:
        logger.debug("%s", e)
        return CommandResult(f"Error: {e}\n", EXIT_CONTENT_ERROR)

    if isinstance(result, Found):
        if result.entry.tier is SkillTier.OVERRIDE:
            logger.info("override 스킬 사용: %s", result.entry.location)
        return CommandResult(result.content)

    if isinstance(result, Ambiguous):
        lines = [f"Skill name '{result.query}' is ambiguous. Matching skills:"]
        lines.append(format_listing(list(result.candidates)))
        lines.append("Use the full name of one of these skills.")
        return CommandResult("\n".join(lines) + "\n", EXIT_NOT_FOUND)

    lines = [f"Skill not found: '{result.query}'"]
    if result.suggestions:
        lines.append("Did you mean:")
        lines.append(format_listing(list(result.suggestions)))
    elif registry.is_empty:
        lines.append(_no_skills(config))
    else:
        lines.append("Run `skill-registry find-skills` to list available skills.")
    return CommandResult("\n".join(lines) + "\n", EXIT_NOT_FOUND)
