"""Skill directory validation and copy."""

from __future__ import annotations

import shutil
from pathlib import Path

from loguru import logger


class InstallError(Exception):
    """A skill could not be validated or installed."""


def validate_skill_path(skill_path: Path) -> Path:
    """Return ``skill_path`` if it names an existing directory."""
    if not skill_path.exists():
        raise InstallError(f"{skill_path} does not exist")
    if not skill_path.is_dir():
        raise InstallError(f"{skill_path} is not a directory")
    return skill_path


def install_skill(skill_path: Path, destination: Path) -> Path:
    """Copy the skill directory into ``destination`` and return the new path.

    The skill lands at ``destination / skill_path.name``. ``destination`` is
    created when missing, and an existing install is overwritten file by file.
    """
    validate_skill_path(skill_path)
    source = skill_path.resolve()
    final_destination = destination / source.name
    if final_destination.resolve() == source:
        raise InstallError(f"{skill_path} is already installed at {destination}")
    if destination.resolve().is_relative_to(source):
        raise InstallError(f"cannot copy {skill_path} into itself ({destination})")
    try:
        destination.mkdir(parents=True, exist_ok=True)
        shutil.copytree(skill_path, final_destination, dirs_exist_ok=True)
    except OSError as exc:
        raise InstallError(f"failed to copy {skill_path} to {final_destination}: {exc}") from exc
    logger.debug("copied {} -> {}", skill_path, final_destination)
    return final_destination
