from __future__ import annotations

from pathlib import Path
import subprocess


SCENARIO_JUSTFILE = """\
# Show available recipes.
help:
    @just --list --unsorted

# Run Clippy with all features enabled.
clippy:
    cargo clippy-all

# Run the Anthropic OAuth flow via the CLI.
anthropic:
    cargo run --features=cli anthropic

# Run the OpenAI OAuth flow via the CLI.
openai:
    cargo run --features=cli openai
"""


def write_justfile(root: Path, content: str, name: str = "justfile") -> Path:
    path = root / name
    path.write_text(content, encoding="utf-8")
    return path


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "justrun"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


class FakeRunner:
    """Stands in for ``run_process`` and records every argv it is given."""

    def __init__(self, statuses: list[int] | None = None) -> None:
        self.calls: list[list[str]] = []
        self.statuses = list(statuses or [])

    def __call__(self, cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(cmd))
        status = self.statuses.pop(0) if self.statuses else 0
        return subprocess.CompletedProcess(cmd, status)
