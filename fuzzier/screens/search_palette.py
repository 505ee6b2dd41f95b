"""Search palette for incremental search over large candidate lists.

A modal overlay that re-runs the search pipeline on every keystroke and
shows the ranked hits. Dismisses with the chosen SearchResult.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import Input, Static

from .base import FuzzierModalScreen
from ..services.search import SearchPipeline, SearchResult

# Rows mounted per refresh; the pipeline may return more
MAX_VISIBLE_RESULTS = 50


def input_query(value: str) -> str:
    """Query for an input value; spaces are boundary characters and are kept."""
    return value if value.strip() else ""


class ResultItem(Static):
    """A single hit in the results list."""

    DEFAULT_CSS = """
    ResultItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    ResultItem:hover {
        background: $surface-lighten-1;
    }

    ResultItem.selected {
        background: $surface-lighten-1;
    }
    """

    def __init__(self, result: SearchResult, show_source: bool = False, **kwargs) -> None:
        text = result.candidate.display
        if show_source:
            text = f"{text}  · {result.source}"
        super().__init__(text, markup=False, **kwargs)
        self.result = result


class SearchPalette(FuzzierModalScreen[SearchResult | None]):
    """Searchable list of candidates from every pipeline source."""

    BINDINGS = [
        Binding("escape", "dismiss_modal", "Cancel"),
        Binding("enter", "select", "Select"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("ctrl+p", "move_up", "Up", show=False),
        Binding("ctrl+n", "move_down", "Down", show=False),
    ]

    DEFAULT_CSS = """
    SearchPalette #dialog {
        border: round $primary;
    }

    SearchPalette #search-input {
        width: 100%;
        margin-bottom: 1;
    }

    SearchPalette #search-input:focus {
        border: tall $primary;
    }

    SearchPalette #results {
        height: auto;
        max-height: 60vh;
        min-height: 5;
        overflow-y: auto;
    }

    SearchPalette #status {
        color: $text-disabled;
    }
    """

    selected_index: reactive[int] = reactive(0)

    def __init__(self, pipeline: SearchPipeline, title: str = "search") -> None:
        super().__init__()
        self._pipeline = pipeline
        self._title = title
        self._results: list[SearchResult] = []
        self._updating = False  # Guard flag for DOM updates

    @property
    def results(self) -> list[SearchResult]:
        return list(self._results)

    def compose(self) -> ComposeResult:
        self.add_class("modal-base", "modal-lg")

        with Vertical(id="dialog"):
            yield Static(self._title, classes="dialog-title")
            yield Input(placeholder="type to search...", id="search-input")
            yield Static("", id="status")
            yield Vertical(id="results")
            yield Static("↑↓ navigate  enter select  esc cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        super().on_mount()
        self._run_search("")
        self.query_one("#search-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the search as the user types."""
        self._run_search(input_query(event.value))
        self.selected_index = 0

    def _run_search(self, query: str) -> None:
        self._results = self._pipeline.search(query)
        mode = "preferred" if self._pipeline.preferred_enabled else "standard"
        self.query_one("#status", Static).update(f"{len(self._results)} hits ({mode})")
        self._update_results()

    def _update_results(self) -> None:
        """Rebuild the results list."""
        self._updating = True
        try:
            results = self.query_one("#results", Vertical)
            results.remove_children()

            if not self._results:
                results.mount(Static("no matches", classes="empty-list"))
                return

            show_source = len(self._pipeline.sources) > 1
            for i, result in enumerate(self._results[:MAX_VISIBLE_RESULTS]):
                item = ResultItem(result, show_source=show_source, id=f"hit-{i}")
                if i == self.selected_index:
                    item.add_class("selected")
                results.mount(item)
        finally:
            self._updating = False

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if self._updating or not self.is_mounted:
            return
        for i, child in enumerate(self.query_one("#results", Vertical).children):
            child.set_class(i == new_index, "selected")

    def _visible_count(self) -> int:
        return min(len(self._results), MAX_VISIBLE_RESULTS)

    def action_move_down(self) -> None:
        """Move selection down."""
        if self._results:
            self.selected_index = min(self.selected_index + 1, self._visible_count() - 1)

    def action_move_up(self) -> None:
        """Move selection up."""
        if self._results:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_select(self) -> None:
        """Dismiss with the selected hit."""
        if 0 <= self.selected_index < self._visible_count():
            self.dismiss(self._results[self.selected_index])
        else:
            self.dismiss(None)
