from __future__ import annotations

import pytest

from justrun.domain import CommandLine, load
from justrun.errors import DuplicateNameError, LoadError, MalformedBlockError
from tests.utils import SCENARIO_JUSTFILE


def test_load_scenario_in_declaration_order() -> None:
    recipes = load(SCENARIO_JUSTFILE)
    assert recipes.names == ["help", "clippy", "anthropic", "openai"]
    assert recipes.get("clippy").summary == "Run Clippy with all features enabled."
    assert recipes.get("openai").commands == ["cargo run --features=cli openai"]


def test_quiet_marker_is_stripped() -> None:
    recipes = load(SCENARIO_JUSTFILE)
    assert recipes.get("help").command_lines == (
        CommandLine(text="just --list --unsorted", quiet=True),
    )
    assert recipes.get("clippy").command_lines[0].quiet is False


def test_header_without_colon_and_multiple_lines() -> None:
    recipes = load("build\n\techo one\n\techo two\n")
    recipe = recipes.get("build")
    assert recipe.commands == ["echo one", "echo two"]
    assert recipe.summary is None
    assert recipe.line == 1


def test_summary_requires_adjacent_comment() -> None:
    source = "# Detached comment.\n\nlint:\n    ruff check\n"
    assert load(source).get("lint").summary is None


def test_last_stacked_comment_is_summary() -> None:
    source = "# Section\n# Lint the code.\nlint:\n    ruff check\n"
    assert load(source).get("lint").summary == "Lint the code."


def test_blank_lines_inside_body_are_skipped() -> None:
    source = "a:\n    echo 1\n\n    echo 2\nb:\n    echo 3\n"
    recipes = load(source)
    assert recipes.get("a").commands == ["echo 1", "echo 2"]
    assert recipes.get("b").commands == ["echo 3"]


def test_comment_after_body_closes_recipe() -> None:
    source = "a:\n    echo 1\n# Second.\nb:\n    echo 2\n"
    recipes = load(source)
    assert recipes.get("a").commands == ["echo 1"]
    assert recipes.get("b").summary == "Second."


def test_crlf_and_bom() -> None:
    recipes = load("\ufeff# Hi.\r\nhi:\r\n    echo hi\r\n")
    assert recipes.get("hi").summary == "Hi."
    assert recipes.get("hi").commands == ["echo hi"]


def test_empty_source() -> None:
    assert len(load("")) == 0


def test_duplicate_name() -> None:
    with pytest.raises(DuplicateNameError) as info:
        load("a:\n    echo 1\n\na:\n    echo 2\n")
    assert info.value.line == 4
    assert "line 1" in str(info.value)
    assert isinstance(info.value, LoadError)


@pytest.mark.parametrize(
    "source, line",
    [
        ("a:\n", 1),
        ("a:\n\nb:\n    echo\n", 1),
        ("a:\n    echo 1\n      echo 2\n", 3),
        ("a:\n    echo 1\n\techo 2\n", 3),
        ("    echo orphan\n", 1),
        ("not a header!\n", 1),
        ("a: b\n    echo\n", 1),
        ("a:\n    @\n", 2),
    ],
)
def test_malformed_blocks(source: str, line: int) -> None:
    with pytest.raises(MalformedBlockError) as info:
        load(source)
    assert info.value.line == line


def test_recipe_set_is_immutable() -> None:
    recipes = load(SCENARIO_JUSTFILE)
    with pytest.raises(AttributeError):
        recipes.recipes = ()  # type: ignore[misc]
    assert "clippy" in recipes
    assert "missing" not in recipes
    assert [r.name for r in recipes] == recipes.names
