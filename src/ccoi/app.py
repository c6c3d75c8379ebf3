from pathlib import Path

from textual.app import App
from textual.binding import Binding

from ccoi.access import AccessGate
from ccoi.data_loader import DataLoader
from ccoi.favorites import FavoritesManager
from ccoi.storage import JsonFileStore, KeyValueStore


CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"


class CompanionApp(App):
    """CCOI Asia 2026 conference companion."""

    TITLE = "CCOI Asia 2026"
    SUB_TITLE = "Conference Companion"
    CSS_PATH = CSS_PATH

    BINDINGS = [
        Binding("1", "show_agenda", "Agenda", show=True),
        Binding("2", "show_speakers", "Speakers", show=True),
        Binding("0", "show_dashboard", "Home", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, store: KeyValueStore | None = None, data_dir: Path | None = None):
        super().__init__()
        self.store: KeyValueStore = store if store is not None else JsonFileStore()
        self.data_loader: DataLoader = DataLoader(data_dir)
        self.favorites: FavoritesManager = FavoritesManager(self.store)
        self.access_gate: AccessGate = AccessGate(self.store)

    def on_mount(self) -> None:
        from ccoi.screens.dashboard import DashboardScreen
        self.install_screen(DashboardScreen(), "dashboard")

        if self.access_gate.is_unlocked():
            self.enter_event()
        else:
            from ccoi.screens.login import LoginScreen
            self.push_screen(LoginScreen())

    def enter_event(self) -> None:
        """Show the dashboard once the access code has been accepted."""
        count = self.data_loader.session_count()
        if count > 0:
            self.notify(f"Loaded {count} sessions", severity="information")
        else:
            self.notify(
                f"No agenda found at {self.data_loader.source_name}",
                severity="warning",
            )
        if len(self.screen_stack) > 1:
            self.switch_screen("dashboard")
        else:
            self.push_screen("dashboard")

    def _back_to_dashboard(self) -> bool:
        """Pop everything above the dashboard. False while still locked."""
        if not self.access_gate.is_unlocked():
            return False
        while len(self.screen_stack) > 2:
            self.pop_screen()
        return True

    def action_show_dashboard(self) -> None:
        self._back_to_dashboard()

    def action_show_agenda(self) -> None:
        if self._back_to_dashboard():
            from ccoi.screens.agenda import AgendaScreen
            self.push_screen(AgendaScreen())

    def action_show_speakers(self, slug: str = "") -> None:
        if self._back_to_dashboard():
            from ccoi.screens.speakers import SpeakersScreen
            self.push_screen(SpeakersScreen(focus_slug=slug))

    def action_quit(self) -> None:
        self.exit()
