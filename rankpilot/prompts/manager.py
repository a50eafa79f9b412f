"""Prompt manager: loads two-part flow templates and substitutes variables.

A template file holds a system section and a user section::

    [system]
    You are ...
    [user]
    URL to analyze: {url}

Both sections use ``str.format`` placeholders.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from functools import lru_cache

logger = logging.getLogger(__name__)

PROMPT_DIR = Path(__file__).resolve().parent / "templates"

_SECTION_RE = re.compile(r"^\[(system|user)\]\s*$", re.MULTILINE)


@dataclass(frozen=True)
class FlowPrompt:
    system: str
    user: str


def _split_sections(name: str, text: str) -> FlowPrompt:
    sections: dict[str, str] = {}
    matches = list(_SECTION_RE.finditer(text))
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        sections[m.group(1)] = text[m.end():end].strip()
    missing = {"system", "user"} - sections.keys()
    if missing:
        raise ValueError(f"Prompt '{name}' is missing section(s): {', '.join(sorted(missing))}")
    return FlowPrompt(system=sections["system"], user=sections["user"])


class PromptManager:
    """Loads flow prompt templates from .txt files, cached per name."""

    def __init__(self, prompt_dir: Path | None = None):
        self._dir = prompt_dir or PROMPT_DIR
        self._cache: dict[str, FlowPrompt] = {}

    def _load(self, name: str) -> FlowPrompt:
        if name not in self._cache:
            path = self._dir / f"{name}.txt"
            if not path.exists():
                raise FileNotFoundError(f"Prompt template not found: {path}")
            self._cache[name] = _split_sections(name, path.read_text(encoding="utf-8"))
            logger.debug("Loaded prompt template: %s", name)
        return self._cache[name]

    def render(self, name: str, **kwargs) -> FlowPrompt:
        """Render both sections of the named template."""
        template = self._load(name)
        try:
            return FlowPrompt(
                system=template.system.format(**kwargs),
                user=template.user.format(**kwargs),
            )
        except KeyError as e:
            raise ValueError(f"Missing variable {e} in prompt '{name}'") from e


@lru_cache()
def get_prompt_manager() -> PromptManager:
    return PromptManager()
