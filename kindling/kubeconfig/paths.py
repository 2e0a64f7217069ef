"""Locating the KUBECONFIG files to read and update, the way kubectl does."""

from __future__ import annotations

import os
import posixpath
import stat
import sys
from collections.abc import Callable

KUBECONFIG_ENV = "KUBECONFIG"

_GOOS = "windows" if sys.platform.startswith(("win", "cygwin")) else sys.platform

EnvGetter = Callable[[str], str]


def _discard_empty_and_duplicates(candidates: list[str]) -> list[str]:
    return list(dict.fromkeys(p for p in candidates if p))


def paths(explicit_path: str, get_env: EnvGetter) -> list[str]:
    """Return the KUBECONFIG paths to consider.

    An explicit path wins; otherwise the entries of $KUBECONFIG (empty ones and
    duplicates dropped); otherwise $HOME/.kube/config.
    """
    if explicit_path:
        return [explicit_path]

    env_value = get_env(KUBECONFIG_ENV) or ""
    listed = _discard_empty_and_duplicates(env_value.split(os.pathsep))
    if listed:
        return listed

    return [posixpath.normpath(posixpath.join(home_dir(_GOOS, get_env), ".kube", "config"))]


def _file_exists(filename: str) -> bool:
    return os.path.exists(filename) and not os.path.isdir(filename)


def path_for_merge(explicit_path: str, get_env: EnvGetter) -> str:
    """Return the file kubectl would merge into: the first that exists, else the last."""
    candidates = paths(explicit_path, get_env)
    if len(candidates) == 1:
        return candidates[0]
    return next((p for p in candidates if _file_exists(p)), candidates[-1])


def home_dir(goos: str, get_env: EnvGetter) -> str:
    """Return the user's home directory.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH, USERPROFILE holding a
    .kube/config wins; then the first of HOME, USERPROFILE, HOMEDRIVE+HOMEPATH
    that is a writeable directory, then the first that exists, then the first
    that is set. Elsewhere it is simply $HOME.
    """
    if goos != "windows":
        return get_env("HOME") or ""

    home = get_env("HOME") or ""
    home_drive = get_env("HOMEDRIVE") or ""
    home_path = get_env("HOMEPATH") or ""
    drive_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = get_env("USERPROFILE") or ""

    for candidate in (home, drive_path, user_profile):
        if candidate and os.path.exists(os.path.join(candidate, ".kube", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, drive_path):
        if not candidate:
            continue
        first_set = first_set or candidate
        try:
            info = os.stat(candidate)
        except OSError:
            continue
        first_existing = first_existing or candidate
        if stat.S_ISDIR(info.st_mode) and info.st_mode & stat.S_IWUSR:
            return candidate

    return first_existing or first_set