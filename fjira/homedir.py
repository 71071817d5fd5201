"""Locating the user's home directory and the fjira configuration directory."""

from __future__ import annotations

import os
import sys


def _home_env_var() -> str:
    if sys.platform.startswith("win"):
        return "USERPROFILE"
    return "HOME"


def set_user_home_dir(path: str) -> None:
    """Point the platform's home-directory environment variable at *path*."""
    os.environ[_home_env_var()] = path


def user_home_dir() -> str:
    """Return the user's home directory, raising OSError when it is not set."""
    var = _home_env_var()
    value = os.environ.get(var, "")
    if not value:
        raise OSError(f"${var} is not defined")
    return value


def fjira_home_dir() -> str:
    """Return the fjira configuration directory.

    ``$XDG_CONFIG_HOME/fjira`` wins when it exists, or when XDG is set and
    ``~/.fjira`` does not exist; otherwise ``~/.fjira`` is used.
    """
    home = user_home_dir()
    user_dir = f"{home}/.fjira"
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    xdg_dir = f"{xdg}/fjira"
    if xdg and os.path.isdir(xdg_dir):
        return xdg_dir
    if xdg and not os.path.isdir(user_dir):
        return xdg_dir
    return user_dir