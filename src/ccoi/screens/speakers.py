from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, DataTable, Static
from textual.containers import Vertical
from textual.binding import Binding
from rich.text import Text

from ccoi.directory import avatar_for, group_by_letter
from ccoi.models import SpeakerProfile


class SpeakersScreen(Screen):
    """Alphabetical speaker directory."""

    BINDINGS = [
        Binding("enter", "view_detail", "Details", show=True),
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self, focus_slug: str = ""):
        super().__init__()
        self.focus_slug = focus_slug
        self._profiles: dict[str, SpeakerProfile] = {}

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="speakers-content"):
            yield Static("", id="letter-index")
            yield DataTable(id="speakers-table")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#speakers-table", DataTable)
        table.add_columns("", "Speaker", "Sessions")
        table.cursor_type = "row"
        self._load_data()

    def _load_data(self):
        speakers = self.app.data_loader.get_speakers()
        images = self.app.data_loader.get_speaker_images()
        grouped = group_by_letter(speakers)

        self.query_one("#letter-index", Static).update(" ".join(grouped))
        table = self.query_one("#speakers-table", DataTable)
        table.clear()
        self._profiles = {}

        for letter, profiles in grouped.items():
            table.add_row("", Text(letter, style="bold cyan"), "", key=f"letter-{letter}")
            for profile in profiles:
                self._profiles[profile.slug] = profile
                avatar = avatar_for(profile, images)
                badge = Text("▣", style="green") if avatar.image else Text(avatar.monogram, style="bold")
                count = len(profile.sessions)
                table.add_row(
                    badge, Text(profile.display_name),
                    f"{count} session{'s' if count != 1 else ''}",
                    key=profile.slug,
                )

        if not speakers:
            self.notify("No speakers found in the agenda", severity="warning")
        elif self.focus_slug:
            if self.focus_slug in self._profiles:
                table.move_cursor(row=table.get_row_index(self.focus_slug))
            else:
                self.notify("Speaker not found in the directory", severity="warning")
        table.focus()

    def _selected_slug(self) -> str | None:
        table = self.query_one("#speakers-table", DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return row_key.value if row_key.value in self._profiles else None

    def action_view_detail(self) -> None:
        slug = self._selected_slug()
        if slug:
            self._open(slug)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value in self._profiles:
            self._open(event.row_key.value)

    def _open(self, slug: str):
        from ccoi.screens.speaker_detail import SpeakerDetailScreen
        images = self.app.data_loader.get_speaker_images()
        self.app.push_screen(SpeakerDetailScreen(self._profiles[slug], images))

    def action_go_back(self) -> None:
        self.app.pop_screen()
