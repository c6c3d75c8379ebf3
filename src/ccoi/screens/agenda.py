from pathlib import Path

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, DataTable, Input, Label, Static, TabbedContent, TabPane
from textual.containers import Horizontal, Vertical
from textual.binding import Binding
from rich.text import Text

from ccoi.agenda import ALL_THEMES, AgendaView, available_themes, build_agenda_view, session_id, split_time
from ccoi.day_utils import day_tab_label
from ccoi.directory import session_people
from ccoi.models import Day, Session


def format_people(session: Session) -> str:
    """One-line people summary for the agenda table."""
    parts = []
    if session.moderators:
        parts.append("Mod: " + ", ".join(session.moderators))
    if session.panelists:
        parts.append("Panel: " + ", ".join(session.panelists))
    if session.chairs:
        parts.append("Chair: " + ", ".join(session.chairs))
    if session.speakers:
        parts.append(" / ".join(session.speakers))
    return "; ".join(parts)


class AgendaScreen(Screen):
    """Per-day agenda grouped by theme, with search and favorites."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search", show=True),
        Binding("a", "toggle_favorite", "Favorite", show=True),
        Binding("t", "cycle_theme", "Theme", show=True),
        Binding("f", "toggle_favorites_only", "Favorites only", show=True),
        Binding("r", "reset_filters", "Reset", show=True),
        Binding("s", "view_speaker", "Speaker", show=True),
        Binding("e", "export_ical", "Export iCal", show=True),
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self):
        super().__init__()
        self._days: list[Day] = []
        self._themes: list[str] = [ALL_THEMES]
        self._theme_idx: int = 0
        self._query: str = ""
        self._favorites_only: bool = False
        self._view: AgendaView | None = None
        self._row_sessions: dict[str, Session] = {}

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="agenda-content"):
            with Horizontal(id="search-bar"):
                yield Label("Search:")
                yield Input(placeholder="Title, description or speaker...", id="search-input")
                yield Static("", id="filter-status")
            yield TabbedContent(id="day-tabs")
            yield Static("", id="empty-state")
        yield Footer()

    def on_mount(self) -> None:
        self._days = self.app.data_loader.get_all_days()
        tabs = self.query_one("#day-tabs", TabbedContent)
        for idx, day in enumerate(self._days):
            tabs.add_pane(TabPane(day_tab_label(day.title, day.date), id=f"day-{idx}"))
        self.query_one("#empty-state", Static).display = False
        self._update_filter_status()
        if self._days:
            self.call_later(self._populate_active_tab)

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        self._theme_idx = 0
        self.call_later(self._populate_active_tab)

    def _active_day(self) -> Day | None:
        tabs = self.query_one("#day-tabs", TabbedContent)
        if not tabs.active:
            return None
        idx = int(tabs.active.replace("day-", ""))
        return self._days[idx] if idx < len(self._days) else None

    @property
    def _theme(self) -> str:
        if self._theme_idx < len(self._themes):
            return self._themes[self._theme_idx]
        return ALL_THEMES

    def _update_filter_status(self):
        status = f"Theme: {self._theme}"
        if self._favorites_only:
            status += "  ★ only"
        self.query_one("#filter-status", Static).update(status)

    def _populate_active_tab(self):
        """Recompute the agenda view for the active day and redraw its table."""
        day = self._active_day()
        if day is None:
            return
        self._themes = available_themes(day.sessions)
        self._update_filter_status()

        tabs = self.query_one("#day-tabs", TabbedContent)
        pane = tabs.query_one(f"#{tabs.active}", TabPane)
        existing = pane.query("DataTable")
        if existing:
            table = existing.first()
        else:
            table = DataTable()
            pane.mount(table)
            table.add_columns("★", "Time", "Title", "People", "Location")
            table.cursor_type = "row"
            table.focus()
        table.clear()
        self._row_sessions.clear()

        favorites = self.app.favorites.favorites
        self._view = build_agenda_view(day, self._query, self._theme, self._favorites_only, favorites)

        empty = self.query_one("#empty-state", Static)
        empty.display = self._view.is_empty
        if self._view.is_empty:
            empty.update("No sessions match your filters. Press [bold]r[/bold] to reset.")

        for theme, sessions in self._view.groups.items():
            first_time = sessions[0].time if sessions else ""
            table.add_row(
                "", Text(first_time, style="dim"), Text(theme.upper(), style="bold cyan"), "", "",
                key=f"theme-{len(self._row_sessions)}-{theme}",
            )
            for session in sessions:
                key = f"session-{len(self._row_sessions)}"
                self._row_sessions[key] = session
                start, end = split_time(session.time)
                time_str = f"{start}-{end}" if end else start
                mark = Text("★", style="bold yellow") if session_id(session) in favorites else Text("")
                table.add_row(
                    mark, Text(time_str), Text(session.title),
                    Text(format_people(session)), Text(session.location),
                    key=key,
                )

    def _active_table(self) -> DataTable | None:
        tabs = self.query_one("#day-tabs", TabbedContent)
        if not tabs.active:
            return None
        tables = tabs.query_one(f"#{tabs.active}", TabPane).query("DataTable")
        return tables.first() if tables else None

    def _selected_session(self) -> Session | None:
        table = self._active_table()
        if table is None or table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return self._row_sessions.get(row_key.value)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self._query = event.value
            self._populate_active_tab()

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_cycle_theme(self) -> None:
        self._theme_idx = (self._theme_idx + 1) % len(self._themes)
        self._populate_active_tab()

    def action_toggle_favorites_only(self) -> None:
        self._favorites_only = not self._favorites_only
        self._populate_active_tab()

    def action_reset_filters(self) -> None:
        self.query_one("#search-input", Input).value = ""
        self._query = ""
        self._theme_idx = 0
        self._favorites_only = False
        self._populate_active_tab()

    def action_toggle_favorite(self) -> None:
        session = self._selected_session()
        if session is None:
            return
        added = self.app.favorites.toggle(session_id(session))
        self.notify("Added to favorites" if added else "Removed from favorites", severity="information")
        self._populate_active_tab()

    def action_view_speaker(self) -> None:
        session = self._selected_session()
        if session is None:
            return
        people = session_people(session)
        if not people:
            self.notify("No speaker profile for this session", severity="warning")
        elif len(people) == 1:
            self.app.action_show_speakers(people[0][1])
        else:
            from ccoi.screens.speaker_picker import SpeakerPickerScreen
            self.app.push_screen(SpeakerPickerScreen(people), self._open_speaker)

    def _open_speaker(self, slug: str | None) -> None:
        if slug:
            self.app.action_show_speakers(slug)

    def action_export_ical(self) -> None:
        from ccoi.export import export_ical

        selected = self.app.favorites.get_favorite_sessions(self._days)
        if not selected:
            self.notify("No favorites to export", severity="warning")
            return
        output = Path.home() / "Downloads" / "ccoi2026.ics"
        count = export_ical(selected, output)
        self.notify(f"Exported {count} sessions to {output}", severity="information")

    def action_go_back(self) -> None:
        self.app.pop_screen()
