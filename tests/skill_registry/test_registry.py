from pathlib import Path

import pytest

from skill_registry.load import SkillSource, SkillTier
from skill_registry.registry import SkillRegistry, build_registry


@pytest.fixture
def sources(base_root: Path, override_root: Path) -> tuple[SkillSource, SkillSource]:
    return (
        SkillSource(base_root, SkillTier.BASE, namespace="core"),
        SkillSource(override_root, SkillTier.OVERRIDE),
    )


class TestBuildRegistry:
    def test_base_only_skill_has_bare_and_namespaced_keys(self, make_skill, base_root, sources):
        make_skill(base_root, "tdd")

        registry = build_registry(*sources)

        assert registry.keys() == ["core:tdd", "tdd"]
        assert registry.get("tdd") is registry.get("core:tdd")
        assert registry.shadowed == ()

    def test_override_shadows_base_bare_name(
        self, make_skill, base_root, override_root, sources
    ):
        make_skill(base_root, "brainstorming", "stock")
        make_skill(override_root, "brainstorming", "personal")

        registry = build_registry(*sources)

        assert registry.get("brainstorming").tier is SkillTier.OVERRIDE
        assert registry.get("core:brainstorming").tier is SkillTier.BASE
        assert [e.canonical_name for e in registry.shadowed] == ["core:brainstorming"]

    def test_shadowed_by_reports_override(self, make_skill, base_root, override_root, sources):
        make_skill(base_root, "brainstorming")
        make_skill(base_root, "tdd")
        make_skill(override_root, "brainstorming")

        registry = build_registry(*sources)
        base_entry = registry.get("core:brainstorming")

        assert registry.shadowed_by(base_entry) is registry.get("brainstorming")
        assert registry.shadowed_by(registry.get("tdd")) is None

    def test_override_only_skill_has_only_bare_key(self, make_skill, override_root, sources):
        make_skill(override_root, "my-workflow")

        registry = build_registry(*sources)

        assert registry.keys() == ["my-workflow"]

    def test_entries_lists_each_entry_once(
        self, make_skill, base_root, override_root, sources
    ):
        make_skill(base_root, "tdd")
        make_skill(base_root, "brainstorming")
        make_skill(override_root, "brainstorming")
        make_skill(override_root, "alpha")

        registry = build_registry(*sources)
        names = [e.canonical_name for e in registry.entries()]

        assert names == ["alpha", "brainstorming", "core:brainstorming", "core:tdd"]

    def test_empty_sources_give_empty_registry(self, sources):
        registry = build_registry(*sources)

        assert registry.is_empty
        assert len(registry) == 0
        assert registry.entries() == []

    def test_absent_roots_give_empty_registry(self, tmp_path: Path):
        registry = build_registry(
            SkillSource(tmp_path / "nope", SkillTier.BASE, namespace="core"),
            SkillSource(tmp_path / "also-nope", SkillTier.OVERRIDE),
        )

        assert registry.is_empty

    def test_none_sources(self):
        assert build_registry(None, None).is_empty


class TestSkillRegistry:
    def test_contains_and_iter(self, make_skill, base_root, sources):
        make_skill(base_root, "tdd")

        registry = build_registry(*sources)

        assert "core:tdd" in registry
        assert "missing" not in registry
        assert sorted(registry) == ["core:tdd", "tdd"]

    def test_default_is_empty(self):
        registry = SkillRegistry()

        assert registry.is_empty
        assert registry.get("tdd") is None
