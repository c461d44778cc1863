from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable

from .config import EffectiveConfig, config_to_toml, resolve_config
from .dispatch import RunSettings, exit_status, run
from .domain import RecipeSet
from .errors import (
    ConfigError,
    JustrunError,
    LoadError,
    MissingFileError,
    SpawnFailureError,
    UnknownRecipeError,
)
from .listing import dump_recipes, format_listing, list_recipes
from .paths import load_definition, resolve_definition_path
from .templates import render_justfile_template, write_template_file


LISTING_WORDS = ("help", "list")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "init": _cmd_init,
        "config": _cmd_config,
        "dump": _cmd_dump,
        "choose": _cmd_choose,
        "list": _cmd_list,
        "run": _cmd_run,
    }

    try:
        return handlers[_select_command(args)](args)
    except JustrunError as exc:
        print(f"justrun: error: {exc}", file=sys.stderr)
        return _exit_code(exc)
    except FileExistsError as exc:
        print(f"justrun: error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="justrun",
        description="Run named recipes from a justfile.",
        allow_abbrev=False,
    )
    parser.add_argument("-f", "--justfile", help="Use this justfile instead of searching for one")
    parser.add_argument("--shell", help="Shell used to run recipe commands")
    parser.add_argument(
        "--shell-arg",
        dest="shell_args",
        action="append",
        help="Argument passed to the shell before the command (repeatable, use --shell-arg=-c)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not echo commands")
    parser.add_argument("-n", "--dry-run", action="store_true", help="Print commands without running them")
    parser.add_argument("-l", "--list", dest="list_recipes", action="store_true", help="List recipes")
    order = parser.add_mutually_exclusive_group()
    order.add_argument("--unsorted", dest="list_order", action="store_const", const="declaration")
    order.add_argument("--sort", dest="list_order", action="store_const", const="alphabetical")
    parser.add_argument("--dump", action="store_true", help="Print the parsed recipes")
    parser.add_argument("--dump-format", choices=("json", "yaml"), default="json")
    parser.add_argument("--show-config", action="store_true", help="Print the effective configuration")
    parser.add_argument("--init", action="store_true", help="Write a starter justfile")
    parser.add_argument("--force", action="store_true")
    parser.add_argument("--choose", action="store_true", help="Pick a recipe interactively")
    parser.add_argument("recipe", nargs="?")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def _select_command(args: argparse.Namespace) -> str:
    if args.init:
        return "init"
    if args.show_config:
        return "config"
    if args.dump:
        return "dump"
    if args.choose:
        return "choose"
    if args.list_recipes or args.recipe is None or args.recipe in LISTING_WORDS:
        return "list"
    return "run"


def _cmd_init(args: argparse.Namespace) -> int:
    path = write_template_file(render_justfile_template(), "justfile", os.getcwd(), force=args.force)
    print(path)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    _, recipe_set = _load_recipes(args)
    print(dump_recipes(recipe_set, args.dump_format), end="")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    cfg, recipe_set = _load_recipes(args)
    for line in format_listing(list_recipes(recipe_set, cfg.listing.order), cfg.listing.heading):
        print(line)
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    cfg, recipe_set = _load_recipes(args)
    settings = RunSettings.from_config(cfg, dry_run=args.dry_run)
    return exit_status(run(recipe_set, args.recipe, args.args, settings))


def _cmd_choose(args: argparse.Namespace) -> int:
    from .tui import run_chooser

    cfg, recipe_set = _load_recipes(args)
    name = run_chooser(list_recipes(recipe_set, cfg.listing.order))
    if name is None:
        return 0
    extra = ([args.recipe] if args.recipe else []) + list(args.args)
    settings = RunSettings.from_config(cfg, dry_run=args.dry_run)
    return exit_status(run(recipe_set, name, extra, settings))


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _load_recipes(args: argparse.Namespace) -> tuple[EffectiveConfig, RecipeSet]:
    cfg = _resolve_cfg(args)
    return cfg, load_definition(resolve_definition_path(cfg))


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: JustrunError) -> int:
    if isinstance(exc, UnknownRecipeError):
        return 1
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, LoadError):
        return 4
    if isinstance(exc, SpawnFailureError):
        return 127
    return 1
