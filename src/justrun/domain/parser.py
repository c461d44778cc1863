from __future__ import annotations

from dataclasses import dataclass, field
import re

from ..errors import DuplicateNameError, MalformedBlockError
from .models import CommandLine, Recipe, RecipeSet


COMMENT_MARKER = "#"
QUIET_MARKER = "@"
HEADER_RE = re.compile(r"^(?P<name>[A-Za-z_][A-Za-z0-9_-]*)\s*:?\s*$")


@dataclass
class _PendingRecipe:
    name: str
    line: int
    summary: str | None
    indent: str | None = None
    commands: list[CommandLine] = field(default_factory=list)

    def finish(self) -> Recipe:
        if not self.commands:
            raise MalformedBlockError(f"recipe {self.name!r} has no commands", self.line)
        return Recipe(
            name=self.name,
            summary=self.summary,
            command_lines=tuple(self.commands),
            line=self.line,
        )


def load(source: str) -> RecipeSet:
    """Parse recipe definition text into a :class:`RecipeSet`.

    Headers sit at column 0 and are followed by an indented block of shell
    command lines. A single comment line directly above a header becomes the
    recipe summary.
    """
    recipes: list[Recipe] = []
    seen: dict[str, int] = {}
    current: _PendingRecipe | None = None
    comment: str | None = None

    for line_no, raw in enumerate(source.lstrip("\ufeff").splitlines(), start=1):
        if not raw.strip():
            comment = None
            continue

        if raw[0] in " \t":
            if current is None:
                raise MalformedBlockError("indented line outside of a recipe", line_no)
            current.commands.append(_command_line(current, raw, line_no))
            comment = None
            continue

        if current is not None:
            recipes.append(current.finish())
            current = None

        if raw.startswith(COMMENT_MARKER):
            comment = raw[len(COMMENT_MARKER) :].strip() or None
            continue

        match = HEADER_RE.match(raw)
        if not match:
            raise MalformedBlockError(f"expected a recipe header, found {raw.strip()!r}", line_no)
        name = match.group("name")
        if name in seen:
            raise DuplicateNameError(
                f"recipe {name!r} is already defined on line {seen[name]}", line_no
            )
        seen[name] = line_no
        current = _PendingRecipe(name=name, line=line_no, summary=comment)
        comment = None

    if current is not None:
        recipes.append(current.finish())

    return RecipeSet(tuple(recipes))


def _command_line(recipe: _PendingRecipe, raw: str, line_no: int) -> CommandLine:
    body = raw.lstrip(" \t")
    indent = raw[: len(raw) - len(body)]
    if recipe.indent is None:
        recipe.indent = indent
    elif indent != recipe.indent:
        raise MalformedBlockError(
            f"inconsistent indentation in recipe {recipe.name!r}", line_no
        )

    text = body.rstrip()
    quiet = text.startswith(QUIET_MARKER)
    if quiet:
        text = text[len(QUIET_MARKER) :]
    if not text.strip():
        raise MalformedBlockError(f"empty command in recipe {recipe.name!r}", line_no)
    return CommandLine(text=text, quiet=quiet)
