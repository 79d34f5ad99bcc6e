"""
Environment + project-root helpers.

- `load_dotenv_if_present()`: load a repo-local `.env` once (never overrides the process env)
- `get_project_root()`: the nearest directory (from CWD upwards) holding `.env`, `.git` or `pyproject.toml`
- `resolve_project_path()`: resolve relative paths (e.g. `STOCKFIT_DEMO_PATH`) against that root
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_ROOT_MARKERS = (".env", ".git", "pyproject.toml")


@lru_cache
def get_project_root() -> Path:
    """Return the project root directory (cached); falls back to CWD."""
    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return cwd


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `<project root>/.env` once if it exists; returns its path (or None)."""
    env_path = get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
