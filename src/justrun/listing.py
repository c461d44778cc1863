from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Iterable, Iterator, Optional

import yaml

from .domain import RecipeSet
from .errors import ConfigError


ListEntry = tuple[str, Optional[str]]


@dataclass(frozen=True)
class RecipeListing:
    """Restartable view over ``(name, summary)`` pairs of a recipe set."""

    recipe_set: RecipeSet
    order: str = "declaration"

    def __iter__(self) -> Iterator[ListEntry]:
        recipes = iter(self.recipe_set)
        if self.order == "alphabetical":
            recipes = iter(sorted(self.recipe_set, key=lambda recipe: recipe.name))
        for recipe in recipes:
            yield recipe.name, recipe.summary


def list_recipes(recipe_set: RecipeSet, order: str = "declaration") -> RecipeListing:
    if order not in ("declaration", "alphabetical"):
        raise ConfigError(f"Unsupported list order: {order}")
    return RecipeListing(recipe_set, order)


def format_listing(entries: Iterable[ListEntry], heading: str | None = None) -> list[str]:
    entries = list(entries)
    lines = [heading] if heading else []
    width = max((len(name) for name, _ in entries), default=0)
    for name, summary in entries:
        if summary:
            lines.append(f"    {name.ljust(width)} # {summary}")
        else:
            lines.append(f"    {name}")
    return lines


def recipes_to_data(recipe_set: RecipeSet) -> list[dict[str, Any]]:
    return [
        {
            "name": recipe.name,
            "summary": recipe.summary,
            "commands": [("@" if cmd.quiet else "") + cmd.text for cmd in recipe.command_lines],
        }
        for recipe in recipe_set
    ]


def dump_recipes(recipe_set: RecipeSet, fmt: str = "json") -> str:
    data = recipes_to_data(recipe_set)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ConfigError(f"Unsupported dump format: {fmt}")
