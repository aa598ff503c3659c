"""Text-mode display of session state."""

from typing import List, Optional

from ..engine.production import GatheringEvent
from ..engine.session import SpaceEmpire
from .renderer import MapRenderer


class DisplayManager:
    """Prints the map and player stocks to stdout."""

    def __init__(self):
        self.renderer = MapRenderer()

    def show_turn_summary(
        self, empire: SpaceEmpire, events: Optional[List[GatheringEvent]] = None
    ) -> None:
        """Display the map and every player's resources.

        Args:
            empire: Session to display
            events: Gathering events of the last step, if any
        """
        print(f"\n=== Step {empire.turn} ===")
        print(self.renderer.render(empire.starmap))
        print()
        for player in empire.players:
            print(f"Player {player.id}: {player.resources}")
        if events:
            self._show_gathering(events)

    def _show_gathering(self, events: List[GatheringEvent]) -> None:
        for event in events:
            if event.producing_systems:
                systems = ", ".join(str(sid) for sid in event.producing_systems)
                print(f"  Player {event.player_id} gathered from systems {systems}")
            else:
                print(f"  Player {event.player_id} has no producing systems")

    def show_help(self) -> None:
        """Display the text-mode controls."""
        print("Press Enter to advance one step, 'q' then Enter to quit.")
