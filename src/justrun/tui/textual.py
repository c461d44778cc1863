from __future__ import annotations

from ..errors import ConfigError

try:  # Textual is optional at import time for non-TUI usage.
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Input, Label, ListItem, ListView
except Exception as exc:  # pragma: no cover
    raise ConfigError(
        "Textual is required for --choose. Install justrun with TUI dependencies."
    ) from exc

__all__ = [
    "App",
    "ComposeResult",
    "Footer",
    "Header",
    "Input",
    "Label",
    "ListItem",
    "ListView",
]
