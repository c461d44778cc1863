from __future__ import annotations

from .state import ChooserEntry, filter_entries, name_width
from .textual import App, ComposeResult, Footer, Header, Input, Label, ListItem, ListView


class RecipeItem(ListItem):
    def __init__(self, entry: ChooserEntry, width: int) -> None:
        super().__init__(Label(entry.display(width)))
        self.entry = entry


class ChooserApp(App[str]):
    TITLE = "justrun"
    CSS = """
    #filter {
        margin: 0 0 1 0;
    }

    #recipes {
        height: 1fr;
        border: round $surface;
    }
    """
    BINDINGS = [("escape", "cancel", "Cancel"), ("ctrl+c", "cancel", "Cancel")]

    def __init__(self, entries: list[ChooserEntry]) -> None:
        super().__init__()
        self.entries = entries
        self.label_width = name_width(entries)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Filter recipes", id="filter")
        yield ListView(*self._items(self.entries), id="recipes")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#filter", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        list_view = self.query_one("#recipes", ListView)
        list_view.clear()
        list_view.extend(self._items(filter_entries(self.entries, event.value)))
        if list_view.children:
            list_view.index = 0

    def on_input_submitted(self, event: Input.Submitted) -> None:
        list_view = self.query_one("#recipes", ListView)
        item = list_view.highlighted_child
        if isinstance(item, RecipeItem):
            self.exit(item.entry.name)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, RecipeItem):
            self.exit(event.item.entry.name)

    def action_cancel(self) -> None:
        self.exit(None)

    def _items(self, entries: list[ChooserEntry]) -> list[RecipeItem]:
        return [RecipeItem(entry, self.label_width) for entry in entries]
