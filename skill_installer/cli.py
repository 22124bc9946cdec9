"""Command-line front door for skill-installer.

Validates the skill directory, asks which agent to install for, resolves the
destination, and copies the skill there. Interactive runs use the raw-mode
selector; without a tty the choice comes from flags or the environment.
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

from .agents import AgentOption, find_agent_option
from .config import load_agent_options, load_last_custom_path, load_theme_name, save_last_custom_path
from .install import InstallError, install_skill, validate_skill_path
from .log import setup_logging
from .render import TerminalSurface
from .selector import SelectionCancelled, select
from .ui_theme import UITheme, available_theme_names, color_disabled, resolve_theme

AGENT_ENV_VAR = "SKILL_INSTALLER_AGENT"
DEST_ENV_VAR = "SKILL_INSTALLER_DEST"
SELECTOR_FOOTER = "↑/↓ or 1-9 to choose, Enter to confirm, Ctrl+C to cancel"


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return callable(isatty) and bool(isatty())


def _prompt_line(text: str, stdin: TextIO, stdout: TextIO) -> str:
    """Write ``text`` and read one answer line; EOF reads as empty."""
    stdout.write(text)
    stdout.flush()
    return stdin.readline().strip()


def _resolve_choice_non_interactive(options: tuple[AgentOption, ...], agent: str | None) -> int:
    choice = agent if agent is not None else os.environ.get(AGENT_ENV_VAR)
    if choice is None:
        raise InstallError(f"stdin is not a terminal; pass --agent or set {AGENT_ENV_VAR}")
    index = find_agent_option(options, choice)
    if index is None:
        raise InstallError(f"Invalid choice {choice!r}. Please enter 1-{len(options)} or an agent name.")
    return index


def _resolve_custom_path(
    dest: str | None,
    *,
    interactive: bool,
    stdin: TextIO,
    stdout: TextIO,
) -> str:
    custom = dest if dest is not None else os.environ.get(DEST_ENV_VAR)
    if custom is None:
        if not interactive:
            raise InstallError(f"no installation path given; pass --dest or set {DEST_ENV_VAR}")
        last = load_last_custom_path()
        hint = f" [{last}]" if last else ""
        # Must not run in a worker thread: interpreter exit would wait on it.
        custom = _prompt_line(f"Enter custom installation path{hint}: ", stdin, stdout) or last
    if not custom or not custom.strip():
        raise InstallError("Installation path cannot be empty")
    return custom.strip()


async def run_install(
    skill_path: Path,
    *,
    agent: str | None = None,
    dest: str | None = None,
    theme: UITheme,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Path:
    """Run the whole install flow and return where the skill was copied."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    validate_skill_path(skill_path)
    options = load_agent_options()
    interactive = agent is None and _is_tty(stdin) and os.environ.get(AGENT_ENV_VAR) is None

    stdout.write(f"\n{theme.heading}Select AI Agent:{theme.reset}\n")
    stdout.flush()
    if interactive:
        index = await select(
            options,
            SELECTOR_FOOTER,
            stdin_fd=stdin.fileno(),
            surface=TerminalSurface(stdout),
            theme=theme,
        )
    else:
        index = _resolve_choice_non_interactive(options, agent)
        stdout.write(f"{options[index].name} ({options[index].display_path})\n")
    option = options[index]
    logger.debug("installing for agent {!r}", option.name)

    if option.path is not None:
        destination = option.path
    else:
        destination = _resolve_custom_path(
            dest,
            interactive=_is_tty(stdin),
            stdin=stdin,
            stdout=stdout,
        )

    final_destination = await asyncio.to_thread(install_skill, skill_path, Path(destination))
    if option.is_custom:
        save_last_custom_path(destination)
    stdout.write(f"\n{theme.success}Skill installed successfully to: {final_destination}{theme.reset}\n")
    stdout.flush()
    return final_destination


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and install the given skill directory."""
    parser = argparse.ArgumentParser(
        prog="skill-installer",
        description="Install a skill directory into an AI agent's skills folder.",
    )
    parser.add_argument("skill_path", metavar="skill-path", help="Path to the skill directory to install.")
    parser.add_argument(
        "--agent",
        default=None,
        help=f"Agent number or name; skips the interactive menu (env: {AGENT_ENV_VAR}).",
    )
    parser.add_argument(
        "--dest",
        default=None,
        help=f"Destination for agents without a fixed skills folder (env: {DEST_ENV_VAR}).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug detail to stderr.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write debug logs to this file.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)
    theme_name = args.theme or load_theme_name()
    theme = resolve_theme(theme_name, no_color=color_disabled(sys.stdout, args.no_color))
    error_theme = resolve_theme(theme_name, no_color=color_disabled(sys.stderr, args.no_color))

    try:
        asyncio.run(run_install(Path(args.skill_path), agent=args.agent, dest=args.dest, theme=theme))
    except SelectionCancelled:
        logger.debug("selection cancelled")
        raise
    except InstallError as exc:
        raise SystemExit(f"{error_theme.error}Error: {exc}{error_theme.reset}") from exc


if __name__ == "__main__":
    main()
