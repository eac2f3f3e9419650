"""skill-registry 명령줄 진입점.

Usage:
    skill-registry bootstrap
    skill-registry find-skills [QUERY] [--json]
    skill-registry use-skill NAME

Examples:
    skill-registry use-skill brainstorming
    skill-registry use-skill core:brainstorming
    skill-registry --override-root ./skills find-skills test
"""

from __future__ import annotations

import argparse
import logging
import sys

from skill_registry.commands import CommandResult, bootstrap, find_skills, use_skill
from skill_registry.config import RegistryConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skill-registry",
        description="Find and load agent skill documents",
    )
    parser.add_argument("--base-root", help="Stock skills directory")
    parser.add_argument("--override-root", help="Personal skills directory")
    parser.add_argument("--namespace", help="Namespace prefix for stock skills")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log discovery details to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("bootstrap", help="Show usage instructions and all skills")

    find_parser = subparsers.add_parser("find-skills", help="List or search skills")
    find_parser.add_argument("query", nargs="*", help="Words to search for")
    find_parser.add_argument("--json", action="store_true", help="Output as JSON")

    use_parser = subparsers.add_parser("use-skill", help="Print a skill's content")
    use_parser.add_argument("name", help="Skill name, bare or namespaced")

    return parser


def run(args: argparse.Namespace) -> CommandResult:
    config = RegistryConfig.from_env(
        base_root=args.base_root,
        override_root=args.override_root,
        namespace=args.namespace,
    )

    if args.command == "bootstrap":
        return bootstrap(config)
    if args.command == "find-skills":
        return find_skills(config, " ".join(args.query), as_json=args.json)
    return use_skill(config, args.name)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    result = run(args)
    stream = sys.stdout if result.ok else sys.stderr
    stream.write(result.output)
    stream.flush()
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
