from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError


DEFAULT_DEFINITION_NAMES = ("justfile", "Justfile", ".justfile")
DEFAULT_SHELL = "sh"
DEFAULT_SHELL_ARGS = ("-cu",)
DEFAULT_LIST_HEADING = "Available recipes:"
LIST_ORDERS = ("declaration", "alphabetical")


@dataclass(frozen=True)
class ShellConfig:
    program: str = DEFAULT_SHELL
    args: tuple[str, ...] = DEFAULT_SHELL_ARGS


@dataclass(frozen=True)
class ListingConfig:
    order: str = "declaration"
    heading: str = DEFAULT_LIST_HEADING


@dataclass(frozen=True)
class EffectiveConfig:
    justfile: Optional[str]
    definition_names: tuple[str, ...]
    shell: ShellConfig
    listing: ListingConfig
    quiet: bool
    project_dir: str


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/justrun"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "justrun.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    project_dir = str(cli_args.get("project_dir") or os.getcwd())
    global_cfg = load_global_config()
    project_cfg = load_project_config(project_dir)
    merged = merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)

    justfile = merged.get("justfile")
    return EffectiveConfig(
        justfile=str(justfile) if justfile else None,
        definition_names=_string_tuple(
            merged.get("definition_names"), DEFAULT_DEFINITION_NAMES, "definition_names"
        ),
        shell=ShellConfig(
            program=str(merged.get("shell", DEFAULT_SHELL)),
            args=_string_tuple(merged.get("shell_args"), DEFAULT_SHELL_ARGS, "shell_args"),
        ),
        listing=ListingConfig(
            order=normalize_list_order(merged.get("list_order", "declaration")),
            heading=str(merged.get("list_heading", DEFAULT_LIST_HEADING)),
        ),
        quiet=bool(merged.get("quiet", False)),
        project_dir=project_dir,
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("justfile", "shell", "list_order"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    if cli_args.get("shell_args"):
        out["shell_args"] = list(cli_args["shell_args"])
    if cli_args.get("quiet"):
        out["quiet"] = True
    return out


def _string_tuple(value: Any, default: tuple[str, ...], key: str) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    raise ConfigError(f"{key} must be a string or a list of strings")


def normalize_list_order(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in LIST_ORDERS:
        return text
    return "declaration"


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = []
    if cfg.justfile:
        lines.append(f"justfile = {_toml_str(cfg.justfile)}")
    lines.append(f"definition_names = {_toml_list(cfg.definition_names)}")
    lines.append(f"shell = {_toml_str(cfg.shell.program)}")
    lines.append(f"shell_args = {_toml_list(cfg.shell.args)}")
    lines.append(f"list_order = {_toml_str(cfg.listing.order)}")
    lines.append(f"list_heading = {_toml_str(cfg.listing.heading)}")
    lines.append(f"quiet = {str(cfg.quiet).lower()}")
    return "\n".join(lines) + "\n"


def _toml_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _toml_list(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(_toml_str(v) for v in values) + "]"
