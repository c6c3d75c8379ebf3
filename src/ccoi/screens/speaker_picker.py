from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Label, ListItem, ListView
from textual.containers import Vertical
from textual.binding import Binding


class SpeakerPickerScreen(ModalScreen[str]):
    """Choose one of a session's people. Dismisses with their slug."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(self, people: list[tuple[str, str]]):
        super().__init__()
        self.people = people

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-box"):
            yield Label("[bold]Speakers[/bold]")
            yield ListView(
                *(ListItem(Label(name, markup=False)) for name, _ in self.people),
                id="picker-list",
            )

    def on_mount(self) -> None:
        self.query_one("#picker-list", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        index = event.list_view.index
        if index is not None and index < len(self.people):
            self.dismiss(self.people[index][1])

    def action_cancel(self) -> None:
        self.dismiss("")
