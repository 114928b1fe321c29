from enum import Enum
from typing import Callable, List, Optional, Tuple

import readchar
from pydantic import BaseModel
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from kube_context_switcher.config.constants import (
    COLUMN_WIDTH,
    CURRENT_MARKER,
    HIGHLIGHT_SYMBOL,
    PICKER_CHROME_ROWS,
    PICKER_TITLE,
)
from kube_context_switcher.config.manager import KubeconfigManager
from kube_context_switcher.config.models import KubeContext
from kube_context_switcher.core.utils import truncate


class Action(str, Enum):
    NAVIGATE_UP = "up"
    NAVIGATE_DOWN = "down"
    CONFIRM = "confirm"
    QUIT = "quit"
    IGNORE = "ignore"

class SessionState(str, Enum):
    LOADING = "loading"
    BROWSING = "browsing"
    TERMINATED = "terminated"

class Outcome(str, Enum):
    SWITCHED = "switched"
    QUIT = "quit"
    EMPTY = "empty"

class SessionResult(BaseModel):
    outcome: Outcome
    context_name: Optional[str] = None


_KEY_ACTIONS = {
    readchar.key.UP: Action.NAVIGATE_UP,
    "k": Action.NAVIGATE_UP,
    readchar.key.DOWN: Action.NAVIGATE_DOWN,
    "j": Action.NAVIGATE_DOWN,
    readchar.key.ENTER: Action.CONFIRM,
    "\r": Action.CONFIRM,
    "\n": Action.CONFIRM,
    "q": Action.QUIT,
}


def translate_key(key: str) -> Action:
    """Maps a raw key press to a picker action."""
    return _KEY_ACTIONS.get(key, Action.IGNORE)


class SelectionState:
    """Records, current marker and cursor for one picker session."""

    def __init__(self, records: List[KubeContext], current_name: str = ""):
        if not records:
            raise ValueError("SelectionState needs at least one context")
        self.records = list(records)
        self.current_name = current_name
        self.selected_index = 0
        # First record shown when the list is taller than the screen
        self.offset = 0

    @property
    def selected(self) -> KubeContext:
        return self.records[self.selected_index]

    def next(self):
        self.selected_index = (self.selected_index + 1) % len(self.records)

    def previous(self):
        self.selected_index = (self.selected_index - 1 + len(self.records)) % len(self.records)

    def window(self, visible: int) -> Tuple[int, int]:
        """
        Returns the `[start, stop)` slice of records that fits in `visible` rows,
        scrolling just enough to keep the selected record inside it.
        """
        visible = max(1, visible)
        if self.selected_index < self.offset:
            self.offset = self.selected_index
        elif self.selected_index >= self.offset + visible:
            self.offset = self.selected_index - visible + 1
        self.offset = max(0, min(self.offset, len(self.records) - visible))
        return self.offset, min(len(self.records), self.offset + visible)


def format_row(record: KubeContext, current_name: str) -> List[str]:
    marker = CURRENT_MARKER if record.name == current_name else ""
    return [marker, truncate(record.name), truncate(record.cluster), truncate(record.user)]


def build_table(
    records: List[KubeContext],
    current_name: str,
    selected_index: Optional[int] = None,
    start: int = 0,
    stop: Optional[int] = None,
) -> Table:
    """Header plus one row per context in `records[start:stop]`; `selected_index` gets the highlight symbol.
    Cells are plain Text so names containing brackets are not read as markup.
    """
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("", no_wrap=True, width=len(HIGHLIGHT_SYMBOL))
    table.add_column("", no_wrap=True, width=len(CURRENT_MARKER))
    for header in ("CONTEXT", "CLUSTER", "USER"):
        table.add_column(header, no_wrap=True, width=COLUMN_WIDTH)

    for i, record in enumerate(records[start:stop], start=start):
        is_selected = i == selected_index
        table.add_row(
            HIGHLIGHT_SYMBOL if is_selected else "",
            *(Text(cell) for cell in format_row(record, current_name)),
            style="reverse" if is_selected else None,
        )
    return table


def render(state: SelectionState, height: Optional[int] = None) -> Panel:
    """Picker panel. With a `height`, only the rows that fit on screen are drawn."""
    start, stop = 0, None
    if height is not None:
        start, stop = state.window(height - PICKER_CHROME_ROWS)
    table = build_table(state.records, state.current_name, state.selected_index, start, stop)
    return Panel(table, title=Text(PICKER_TITLE), title_align="left")


class ContextSelector:
    """
    Interactive picker: load once, browse with the keyboard, write on confirm.

    Load and save errors are not caught here. The alternate screen is
    owned by the `Live` context so it is restored before any error
    reaches the caller.
    """

    def __init__(
        self,
        manager: KubeconfigManager,
        console: Optional[Console] = None,
        read_key: Callable[[], str] = readchar.readkey,
    ):
        self.manager = manager
        self.console = console or Console(stderr=True)
        self.read_key = read_key
        self.state = SessionState.LOADING
        self.selection: Optional[SelectionState] = None

    def run(self) -> SessionResult:
        self.state = SessionState.LOADING
        try:
            records, current_name = self.manager.load()
        except Exception:
            self.state = SessionState.TERMINATED
            raise

        if not records:
            self.state = SessionState.TERMINATED
            return SessionResult(outcome=Outcome.EMPTY)

        self.selection = SelectionState(records, current_name)
        self.state = SessionState.BROWSING
        try:
            with Live(self._render(), console=self.console, screen=True, auto_refresh=False) as live:
                return self._browse(live)
        finally:
            self.state = SessionState.TERMINATED

    def _render(self) -> Panel:
        return render(self.selection, self.console.size.height)

    def _browse(self, live: Live) -> SessionResult:
        selection = self.selection
        while True:
            live.update(self._render(), refresh=True)
            action = translate_key(self.read_key())

            if action == Action.NAVIGATE_DOWN:
                selection.next()
            elif action == Action.NAVIGATE_UP:
                selection.previous()
            elif action == Action.QUIT:
                return SessionResult(outcome=Outcome.QUIT)
            elif action == Action.CONFIRM:
                name = selection.selected.name
                self.manager.save(name)
                selection.current_name = name
                return SessionResult(outcome=Outcome.SWITCHED, context_name=name)
