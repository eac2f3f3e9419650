from pathlib import Path

import pytest

from skill_registry.config import RegistryConfig


def _write_skill(
    root: Path,
    name: str,
    description: str | None = None,
    body: str = "Follow these steps.\n",
) -> Path:
    skill_dir = root / name
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_md = skill_dir / "SKILL.md"
    if description is None:
        skill_md.write_text(f"# {name}\n\n{body}", encoding="utf-8")
    else:
        skill_md.write_text(
            f"---\nname: {name}\ndescription: {description}\n---\n\n# {name}\n\n{body}",
            encoding="utf-8",
        )
    return skill_md


@pytest.fixture
def make_skill():
    return _write_skill


@pytest.fixture
def base_root(tmp_path: Path) -> Path:
    root = tmp_path / "base"
    root.mkdir()
    return root


@pytest.fixture
def override_root(tmp_path: Path) -> Path:
    root = tmp_path / "personal"
    root.mkdir()
    return root


@pytest.fixture
def config(base_root: Path, override_root: Path) -> RegistryConfig:
    return RegistryConfig(base_root=base_root, override_root=override_root, namespace="core")
