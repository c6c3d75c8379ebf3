from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Label, ListItem, ListView, Static
from textual.containers import Vertical
from textual.binding import Binding

from ccoi.models import MenuIcon, MenuItem

MENU_GLYPHS = {
    MenuIcon.INFO: "ℹ",
    MenuIcon.CLIPBOARD_LIST: "☰",
    MenuIcon.CALENDAR: "▦",
    MenuIcon.MIC: "♪",
    MenuIcon.USERS: "☺",
    MenuIcon.HOME: "⌂",
    MenuIcon.MAIL: "✉",
}

# Internal links the terminal client can open; other pages stay on the web app.
SCREEN_ACTIONS = {
    "/agenda": "show_agenda",
    "/speakers": "show_speakers",
    "/dashboard": "show_dashboard",
}

DEFAULT_MENU = [
    MenuItem(title="Agenda", icon=MenuIcon.CALENDAR, link="/agenda"),
    MenuItem(title="Speakers", icon=MenuIcon.MIC, link="/speakers"),
]


class DashboardScreen(Screen):
    """Event home menu."""

    BINDINGS = [
        Binding("ctrl+l", "logout", "Log out", show=True),
    ]

    def __init__(self):
        super().__init__()
        self._menu: list[MenuItem] = []

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="dashboard-content"):
            yield Static("[bold]CCOI Asia-Pacific Innovation Forum 2026[/bold]", id="dashboard-title")
            yield ListView(id="menu")
        yield Footer()

    def on_mount(self) -> None:
        self._menu = self.app.data_loader.get_menu() or list(DEFAULT_MENU)
        menu = self.query_one("#menu", ListView)
        for item in self._menu:
            glyph = MENU_GLYPHS.get(item.icon, MENU_GLYPHS[MenuIcon.INFO])
            suffix = " ↗" if item.external else ""
            menu.append(ListItem(Label(f"{glyph}  {item.title}{suffix}")))
        menu.focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        index = event.list_view.index
        if index is None or index >= len(self._menu):
            return
        self.open_item(self._menu[index])

    def open_item(self, item: MenuItem):
        """Route a menu entry to a screen, or show where it lives on the web."""
        action = SCREEN_ACTIONS.get(item.link)
        if action:
            self.app.call_later(getattr(self.app, f"action_{action}"))
        elif item.external or item.link.startswith("http"):
            self.notify(f"Open in your browser: {item.link}", severity="information")
        else:
            self.notify(f"{item.title} is only available in the web app", severity="warning")

    def action_logout(self) -> None:
        from ccoi.screens.login import LoginScreen
        self.app.access_gate.lock()
        self.app.switch_screen(LoginScreen())
