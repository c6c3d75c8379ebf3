from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Input, Button, Static
from textual.containers import Vertical


class LoginScreen(Screen):
    """Access code prompt shown before the event content."""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="login-box"):
            yield Static("[bold]CCOI Asia 2026[/bold]", id="login-title")
            yield Input(placeholder="Enter Access Code", id="code-input")
            yield Static("", id="login-error")
            yield Button("Enter Event", id="login-button", variant="primary")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#code-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#login-error", Static).update("")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._try_login(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "login-button":
            self._try_login(self.query_one("#code-input", Input).value)

    def _try_login(self, code: str):
        if self.app.access_gate.unlock(code):
            self.app.enter_event()
        else:
            self.query_one("#login-error", Static).update("[red]Invalid Access Code[/red]")
