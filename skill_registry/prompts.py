"""에이전트에게 보여주는 고정 안내 문구."""

BOOTSTRAP_INSTRUCTIONS = """# Skills System

You have access to a skills library: instructional documents describing proven
workflows and conventions. Skills come from two locations:

{skills_locations}

**How to Use Skills:**

1. **Check for a matching skill before starting a task**: Compare the task with the skill summaries below.
2. **Load the skill**: Run `skill-registry use-skill <name>` and read the full instructions.
3. **Follow the skill exactly**: A loaded skill is a directive, not a suggestion.
4. **Search when unsure**: Run `skill-registry find-skills <words>` to list related skills.

**Naming:**
- Personal (override) skills are addressed by their bare name, e.g. `brainstorming`.
- Stock skills are addressed as `{namespace}:<name>`, e.g. `{namespace}:brainstorming`.
  A bare name also works unless a personal skill of the same name overrides it.

**Available Skills:**

{skills_list}
"""

NO_SKILLS_MESSAGE = """(No skills available.)
Check the installation: no SKILL.md documents were found in
{skills_locations_inline}"""
