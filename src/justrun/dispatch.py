from __future__ import annotations

from dataclasses import dataclass
import difflib
import shlex
import sys
from typing import Sequence

from .config import EffectiveConfig
from .domain import RecipeSet
from .errors import PassthroughError, SpawnFailureError, UnknownRecipeError
from .infra import run_process


# Trailing arguments reach the final command as shell positional parameters.
PASSTHROUGH = ' "$@"'
COMMENT_BOUNDARY = " \t;&|()"
CONTROL_CHARS = ";&|()<>"


@dataclass(frozen=True)
class RunSettings:
    shell: str = "sh"
    shell_args: tuple[str, ...] = ("-cu",)
    quiet: bool = False
    dry_run: bool = False

    @classmethod
    def from_config(cls, cfg: EffectiveConfig, *, dry_run: bool = False) -> RunSettings:
        return cls(
            shell=cfg.shell.program,
            shell_args=cfg.shell.args,
            quiet=cfg.quiet,
            dry_run=dry_run,
        )


@dataclass(frozen=True)
class PlannedCommand:
    argv: tuple[str, ...]
    display: str
    quiet: bool


def plan(
    recipe_set: RecipeSet,
    name: str,
    extra_args: Sequence[str] = (),
    settings: RunSettings | None = None,
) -> list[PlannedCommand]:
    settings = settings or RunSettings()
    recipe = recipe_set.get(name)
    if recipe is None:
        raise UnknownRecipeError(name, difflib.get_close_matches(name, recipe_set.names, n=1))

    extra = [str(arg) for arg in extra_args]
    planned: list[PlannedCommand] = []
    last = len(recipe.command_lines) - 1
    for index, line in enumerate(recipe.command_lines):
        argv = [settings.shell, *settings.shell_args]
        display = line.text
        if index == last and extra:
            target = passthrough_target(name, line.text)
            argv.append(target + PASSTHROUGH)
            argv.append(name)
            argv.extend(extra)
            display = f"{target} {shlex.join(extra)}"
        else:
            argv.append(line.text)
        planned.append(PlannedCommand(argv=tuple(argv), display=display, quiet=line.quiet))
    return planned


def passthrough_target(name: str, text: str) -> str:
    """Return ``text`` ready to take ``"$@"``: trailing comment removed.

    Raises :class:`PassthroughError` when the line would not end in a simple
    command, since appended arguments would then run as a separate command.
    """
    quote: str | None = None
    escaped = False
    comment_at: int | None = None
    ends_in_control = False

    for index, char in enumerate(text):
        if escaped:
            escaped = False
            ends_in_control = False
            continue
        if quote == "'":
            if char == "'":
                quote = None
            continue
        if char == "\\":
            escaped = True
            ends_in_control = False
            continue
        if quote == '"':
            if char == '"':
                quote = None
            continue
        if char in "'\"":
            quote = char
            ends_in_control = False
            continue
        if char == "#" and (index == 0 or text[index - 1] in COMMENT_BOUNDARY):
            comment_at = index
            break
        if not char.isspace():
            ends_in_control = char in CONTROL_CHARS

    if quote is not None or escaped:
        raise PassthroughError(name, "the final command has an unterminated quote or escape")

    target = text if comment_at is None else text[:comment_at]
    target = target.rstrip()
    if not target:
        raise PassthroughError(name, "the final command line is only a comment")
    if ends_in_control:
        raise PassthroughError(name, "the final command ends in a shell operator")
    return target


def run(
    recipe_set: RecipeSet,
    name: str,
    extra_args: Sequence[str] = (),
    settings: RunSettings | None = None,
) -> int:
    """Run recipe ``name`` and return the status of the last command executed.

    Commands run one after another and the first non-zero status stops the
    recipe. ``extra_args`` are appended to the final command only.
    """
    settings = settings or RunSettings()
    status = 0
    for command in plan(recipe_set, name, extra_args, settings):
        if settings.dry_run:
            print(command.display, file=sys.stderr)
            continue
        if not (command.quiet or settings.quiet):
            print(command.display, file=sys.stderr)
        try:
            result = run_process(list(command.argv))
        except OSError as exc:
            raise SpawnFailureError(settings.shell, exc) from exc
        status = result.returncode
        if status != 0:
            return status
    return status


def exit_status(status: int) -> int:
    if status < 0:
        return 128 - status
    return status
