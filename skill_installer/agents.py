"""Install-target options offered by the agent selector.

Each option pairs a display label with a destination directory. A ``None``
path marks the entry that asks the user for a custom destination instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

CUSTOM_PATH_LABEL = "custom path"


@dataclass(frozen=True)
class AgentOption:
    """One selectable install target."""

    name: str
    path: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("agent option name must be non-empty")

    @property
    def display_path(self) -> str:
        return self.path if self.path is not None else CUSTOM_PATH_LABEL

    @property
    def is_custom(self) -> bool:
        return self.path is None


DEFAULT_AGENT_OPTIONS: tuple[AgentOption, ...] = (
    AgentOption("Claude Code", "./.claude/skills"),
    AgentOption("Other", None),
)


def parse_agent_options(raw: object) -> tuple[AgentOption, ...]:
    """Build options from a config ``agents`` list.

    Entries that are not objects with a non-empty string ``name`` (and a
    string or null ``path``) are skipped. Returns an empty tuple when nothing
    usable remains.
    """
    if not isinstance(raw, list):
        return ()
    options: list[AgentOption] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        path = entry.get("path")
        if not isinstance(name, str) or not name.strip():
            continue
        if path is not None and not isinstance(path, str):
            continue
        if isinstance(path, str) and not path.strip():
            path = None
        options.append(AgentOption(name.strip(), path))
    return tuple(options)


def find_agent_option(options: Iterable[AgentOption], choice: str) -> int | None:
    """Resolve a 1-based number or case-insensitive name to an option index."""
    options = tuple(options)
    wanted = choice.strip()
    if not wanted:
        return None
    if wanted.isdigit():
        index = int(wanted) - 1
        return index if 0 <= index < len(options) else None
    lowered = wanted.lower()
    for index, option in enumerate(options):
        if option.name.lower() == lowered:
            return index
    return None
