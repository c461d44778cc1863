from __future__ import annotations

from pathlib import Path


DEFAULT_RECIPES: tuple[tuple[str, str, str], ...] = (
    ("help", "Show available recipes.", "@justrun --list --unsorted"),
    ("test", "Run the test suite.", "echo 'add your test command here'"),
)


def render_justfile_template(
    recipes: tuple[tuple[str, str, str], ...] = DEFAULT_RECIPES,
    indent: str = "    ",
) -> str:
    blocks = []
    for name, summary, command in recipes:
        lines = []
        if summary:
            lines.append(f"# {summary}")
        lines.append(f"{name}:")
        lines.append(f"{indent}{command}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def write_template_file(content: str, filename: str, cwd: str, force: bool = False) -> str:
    path = Path(cwd) / filename
    if path.exists() and not force:
        raise FileExistsError(f"File already exists: {path} (use --force to overwrite)")
    path.write_text(content, encoding="utf-8")
    return str(path)
