"""Prompt Builder - Construct LLM prompts for commit message generation."""

from dataclasses import dataclass

from smartcommit import COMMIT_TYPES

# Bullet guidance per style
BODY_INSTRUCTIONS = {
    "detailed": """- bullet points explaining the changes

Write 2-5 bullets. Each bullet should:
- Be a complete thought (10-20 words)
- Explain WHAT changed and WHY
- Mention specific files, components, or functions by name""",
    "short": """- at most 2 short bullet points, only if the subject can't stand alone""",
}


@dataclass
class PromptConfig:
    """Request details that shape the prompt."""
    style: str = "detailed"
    forced_type: str | None = None
    forced_scope: str | None = None
    max_subject_length: int = 72


class PromptBuilder:
    """Constructs prompts for the SDK backends.

    The HTTP server receives the structured request instead and builds its
    own prompt.
    """

    def build(self, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            self._build_format_section(config),
            self._build_diff_section(diff),
            self._build_instructions(),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_format_section(self, config: PromptConfig) -> str:
        body = BODY_INSTRUCTIONS.get(config.style, BODY_INSTRUCTIONS["detailed"])

        return f"""<format>
Write the commit message in this exact format:

type(scope): subject line (lowercase, imperative mood, max {config.max_subject_length} chars)

{body}

{self._build_type_instruction(config.forced_type)}
{self._build_scope_instruction(config.forced_scope)}
</format>"""

    def _build_type_instruction(self, forced_type: str | None) -> str:
        if forced_type:
            return f"IMPORTANT: Use type '{forced_type}' for this commit."
        types_list = "\n".join(f"  - {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"Choose the most appropriate type:\n{types_list}"

    def _build_scope_instruction(self, forced_scope: str | None) -> str:
        if forced_scope:
            return f"IMPORTANT: Use scope '{forced_scope}' for this commit."
        return "Scope is ONE WORD naming the module or feature (auth, api, cli). Never a file path."

    def _build_diff_section(self, diff: str) -> str:
        return f"<changes>\n{diff}\n</changes>"

    def _build_instructions(self) -> str:
        return """<instructions>
Generate exactly ONE commit message.

Rules:
- Start directly with the type(scope): subject line
- No markdown formatting (no ```, no bold)
- No preamble like "Here's a commit message:"
- No explanation after the message
- Add a "BREAKING CHANGE:" footer only if the diff breaks a public interface
</instructions>"""
