"""Textual TUI application for Space Empire.

Shows the starmap and player resources. Space advances one step,
Escape or q quits. The app never changes the session except through
SpaceEmpire.step().
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, RichLog, Static

from ..engine.session import SpaceEmpire
from .renderer import MapRenderer


class MapPanel(Static):
    """Widget to display the starmap."""

    def __init__(self, *args, **kwargs):
        """Initialize map panel."""
        super().__init__(*args, **kwargs)
        self.renderer = MapRenderer()
        self.border_title = "Starmap"

    def update_map(self, empire: SpaceEmpire) -> None:
        self.update(self.renderer.render(empire.starmap))


class ResourcesPanel(Static):
    """Widget to display every player's resources."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "Resources"

    def update_resources(self, empire: SpaceEmpire) -> None:
        lines = [
            f"Player {p.id}: [yellow]{p.resources}[/yellow]" for p in empire.players
        ]
        self.update("\n".join(lines))


class SpaceEmpireTUI(App):
    """Space Empire TUI application."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    MapPanel {
        height: 7;
        border: solid green;
        padding: 0 1;
    }

    ResourcesPanel {
        height: auto;
        border: solid blue;
        padding: 0 1;
    }

    RichLog {
        height: 1fr;
        border: solid cyan;
    }
    """

    BINDINGS = [
        Binding("space", "step", "Step", show=True, priority=True),
        Binding("escape", "quit", "Quit", show=True, priority=True),
        Binding("q", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, empire: SpaceEmpire, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            empire: Session to display and step
        """
        super().__init__(*args, **kwargs)
        self.empire = empire
        self.map_panel = None
        self.resources_panel = None
        self.log_panel = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        self.map_panel = MapPanel()
        yield self.map_panel
        self.resources_panel = ResourcesPanel()
        yield self.resources_panel
        self.log_panel = RichLog(markup=True, wrap=True)
        yield self.log_panel
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event."""
        self.refresh_display()
        self.log_panel.write("Press [bold]Space[/bold] to step, [bold]Esc[/bold] to quit")

    def refresh_display(self) -> None:
        self.map_panel.update_map(self.empire)
        self.resources_panel.update_resources(self.empire)

    def action_step(self) -> None:
        """Advance the session by one step."""
        events = self.empire.step()
        for event in events:
            self.log_panel.write(
                f"[cyan]Step {self.empire.turn}[/cyan] player {event.player_id}: {event.after}"
            )
        self.refresh_display()

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()
