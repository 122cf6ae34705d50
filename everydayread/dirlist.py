"""Locating C++ source files under the ``sources`` directory."""

from __future__ import annotations

from pathlib import Path

__all__ = ["ensure_sources_dir", "list_cpp_files"]

SOURCES_DIR = "sources"


def _sources_path(root: str | Path | None) -> Path:
    return (Path.cwd() if root is None else Path(root)) / SOURCES_DIR


def ensure_sources_dir(root: str | Path | None = None) -> Path:
    """Create ``<root>/sources`` if it does not exist and return its path."""
    path = _sources_path(root)
    path.mkdir(exist_ok=True)
    return path


def list_cpp_files(root: str | Path | None = None) -> list[Path]:
    """Return every ``.cpp`` path below ``<root>/sources``, searched recursively."""
    path = _sources_path(root)
    if not path.is_dir():
        raise FileNotFoundError(f"sources directory not found: {path}")
    return sorted(entry for entry in path.rglob("*") if entry.suffix == ".cpp")