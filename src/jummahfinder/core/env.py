"""
Project root and `.env` discovery.

The catalog path in settings (`data/masjids.json`) is relative, and the API, CLI and
snapshot script are started from arbitrary working directories. Relative paths are
therefore anchored at the project root, found by walking up to the first directory
carrying a `.env`, `.git` or `pyproject.toml`.

Overrides:
- `JUMMAHFINDER_PROJECT_ROOT`: use this directory as the root
- `JUMMAHFINDER_ENV_FILE`: load this file instead of `<root>/.env` (its directory
  becomes the root unless `JUMMAHFINDER_PROJECT_ROOT` is also set)
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ROOT_ENV = "JUMMAHFINDER_PROJECT_ROOT"
ENV_FILE_ENV = "JUMMAHFINDER_ENV_FILE"

_ROOT_MARKERS = (".env", ".git", "pyproject.toml")


def _expand(value: str) -> Path:
    return Path(value).expanduser().resolve()


def _find_root(start: Path) -> Path | None:
    start = start.resolve()
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return None


@lru_cache
def get_project_root() -> Path:
    """Return the project root (cached for the life of the process)."""
    if os.getenv(ROOT_ENV):
        return _expand(os.environ[ROOT_ENV])
    if os.getenv(ENV_FILE_ENV):
        return _expand(os.environ[ENV_FILE_ENV]).parent

    # An installed package outside any checkout still resolves against the cwd.
    return _find_root(Path.cwd()) or _find_root(Path(__file__).parent) or Path.cwd().resolve()


def env_file_path() -> Path:
    explicit = os.getenv(ENV_FILE_ENV)
    return _expand(explicit) if explicit else get_project_root() / ".env"


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load the `.env` file once, without overriding variables already set.

    Returns the loaded path, or None when there is no such file.
    """
    path = env_file_path()
    if not path.is_file():
        return None
    load_dotenv(dotenv_path=path, override=False)
    return path


def resolve_project_path(path: str | Path) -> Path:
    """Anchor a relative path at the project root; absolute paths pass through."""
    p = Path(path).expanduser()
    return p if p.is_absolute() else (get_project_root() / p).resolve()
