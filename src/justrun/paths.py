from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .config import EffectiveConfig
from .domain import RecipeSet, load
from .errors import MissingFileError


def find_definition(start: Path, names: Iterable[str]) -> Path:
    """Return the closest definition file at or above ``start``."""
    names = tuple(names)
    directory = start.resolve()
    for candidate_dir in (directory, *directory.parents):
        for name in names:
            candidate = candidate_dir / name
            if candidate.is_file():
                return candidate
    raise MissingFileError(f"No justfile found (looked for {', '.join(names)} from {directory})")


def resolve_definition_path(cfg: EffectiveConfig) -> Path:
    if cfg.justfile:
        path = Path(cfg.justfile)
        if not path.is_absolute():
            path = Path(cfg.project_dir) / path
        if not path.is_file():
            raise MissingFileError(f"Justfile not found: {path}")
        return path
    return find_definition(Path(cfg.project_dir), cfg.definition_names)


def load_definition(path: Path) -> RecipeSet:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingFileError(f"Failed to read justfile: {path}") from exc
    return load(text)
