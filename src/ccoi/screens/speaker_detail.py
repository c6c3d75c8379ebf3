from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Static
from textual.containers import VerticalScroll
from textual.binding import Binding
from rich.markup import escape

from ccoi.directory import avatar_for
from ccoi.models import SpeakerProfile


class SpeakerDetailScreen(Screen):
    """A speaker's profile and attributed sessions."""

    BINDINGS = [
        Binding("g", "view_agenda", "View agenda", show=True),
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self, profile: SpeakerProfile, images: dict[str, str]):
        super().__init__()
        self.profile = profile
        self.images = images

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="detail-container")
        yield Footer()

    def on_mount(self) -> None:
        self._populate()

    def _populate(self):
        container = self.query_one("#detail-container", VerticalScroll)
        profile = self.profile

        avatar = avatar_for(profile, self.images)
        picture = f"[dim]Photo:[/dim] {avatar.image}" if avatar.image else f"[bold reverse] {avatar.monogram} [/]"
        container.mount(Static(picture))
        container.mount(Static(f"[bold]{escape(profile.display_name)}[/bold]"))
        container.mount(Static(f"Sessions: {len(profile.sessions)}"))

        for summary in profile.sessions:
            lines = [
                f"[dim]{escape(summary.day_title)} • {escape(summary.date)}[/dim]",
                f"[bold]{escape(summary.title)}[/bold]",
            ]
            if summary.theme:
                lines.append(f"[dim]{escape(summary.theme)}[/dim]")
            lines.append(f"[dim]{escape(summary.time)} — {escape(summary.location)}[/dim]")
            container.mount(Static(""))
            container.mount(Static("\n".join(lines), classes="session-card"))

    def action_view_agenda(self) -> None:
        self.app.action_show_agenda()

    def action_go_back(self) -> None:
        self.app.pop_screen()
