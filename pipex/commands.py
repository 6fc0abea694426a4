"""Locating commands through the PATH of an environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from .textops import split


def get_paths(environ: Optional[Mapping[str, str]] = None) -> Optional[list[str]]:
    """The non-empty directories listed in PATH, or None without a PATH."""
    env = os.environ if environ is None else environ
    value = env.get("PATH")
    if value is None:
        return None
    return split(value, ":")


def check_access(directory: str, command: str) -> Optional[str]:
    """directory/command if that file is executable, otherwise None."""
    full_path = f"{directory}/{command}"
    return full_path if os.access(full_path, os.X_OK) else None


def find_command(
    command: Optional[str], environ: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Search PATH in order for an executable named command.

    The name is always joined to each PATH directory, so a name that
    contains a slash is looked up in the same way.
    """
    if not command:
        return None
    paths = get_paths(environ)
    if paths is None:
        return None
    for directory in paths:
        if not directory:
            continue
        found = check_access(directory, command)
        if found is not None:
            return found
    return None