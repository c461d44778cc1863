from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class CommandLine:
    text: str
    quiet: bool = False


@dataclass(frozen=True)
class Recipe:
    name: str
    summary: str | None
    command_lines: tuple[CommandLine, ...]
    line: int = 0

    @property
    def commands(self) -> list[str]:
        return [cmd.text for cmd in self.command_lines]


@dataclass(frozen=True)
class RecipeSet:
    recipes: tuple[Recipe, ...] = ()
    _index: dict[str, Recipe] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {recipe.name: recipe for recipe in self.recipes})

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def get(self, name: str) -> Recipe | None:
        return self._index.get(name)

    @property
    def names(self) -> list[str]:
        return [recipe.name for recipe in self.recipes]
