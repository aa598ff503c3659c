#!/usr/bin/env python3
"""Space Empire - Main entry point.

A turn-based strategy simulation where players gather resources from the
solar systems they own on a small fixed galaxy.
"""

import argparse
import logging
import sys

from space_empire.engine.production import GatheringEvent
from space_empire.engine.session import SpaceEmpire
from space_empire.interface.display import DisplayManager
from space_empire.models.errors import SpaceEmpireError
from space_empire.models.player import GatheringPolicy


class GameOrchestrator:
    """Runs the text-mode step loop for a session."""

    def __init__(self, empire: SpaceEmpire):
        """Initialize game orchestrator.

        Args:
            empire: Session to drive
        """
        self.empire = empire
        self.display = DisplayManager()
        self.last_events: list[GatheringEvent] = []

    def run(self) -> SpaceEmpire:
        """Main loop: Enter steps, 'q' quits."""
        print("\n" + "=" * 60)
        print("Space Empire")
        print("=" * 60)
        self.display.show_help()
        self.display.show_turn_summary(self.empire)

        try:
            while True:
                command = input("> ").strip().lower()
                if command in ("q", "quit", "exit"):
                    break
                self.run_steps(1)
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user. Exiting...")

        return self.empire

    def run_steps(self, count: int) -> SpaceEmpire:
        """Advance the session count times, showing the state after each step."""
        for _ in range(count):
            self.last_events = self.empire.step()
            self.display.show_turn_summary(self.empire, self.last_events)
        return self.empire


def run(argv=None) -> SpaceEmpire:
    """Parse arguments, build the session and drive it.

    Returns:
        The session after the loop ends
    """
    parser = argparse.ArgumentParser(
        description="Space Empire - Turn-based strategy simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Text mode, Enter to step, q to quit
  %(prog)s --tui                    # Terminal user interface (Space to step, Esc to quit)
  %(prog)s --steps 5                # Run five steps and exit
  %(prog)s --policy accumulate      # Keep adding production onto existing stock
        """,
    )

    parser.add_argument(
        "--policy",
        choices=[p.value for p in GatheringPolicy],
        default=GatheringPolicy.RESET.value,
        help="Gathering policy: reset=stock is this step's production, "
        "accumulate=production is added to the stock (default: reset)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        metavar="N",
        help="Run N steps without waiting for input, then exit",
    )
    parser.add_argument(
        "--no-homeworlds",
        action="store_true",
        help="Start without assigning homeworlds",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Use terminal user interface instead of basic text mode",
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.steps is not None and args.steps < 0:
        print(f"Error: --steps must be >= 0, got {args.steps}")
        sys.exit(1)

    empire = SpaceEmpire(policy=GatheringPolicy(args.policy))
    if not args.no_homeworlds:
        try:
            empire.set_homeworlds()
        except SpaceEmpireError as e:
            print(f"Error setting up homeworlds: {e}")
            print("Game cannot start. Exiting...")
            sys.exit(1)

    if args.tui:
        from space_empire.interface.tui_app import SpaceEmpireTUI

        SpaceEmpireTUI(empire).run(mouse=False)
        return empire

    orchestrator = GameOrchestrator(empire)
    if args.steps is not None:
        return orchestrator.run_steps(args.steps)
    return orchestrator.run()


def main(argv=None):
    """Main entry point."""
    run(argv)


if __name__ == "__main__":
    main()
