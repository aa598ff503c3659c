"""Game engine components."""

from .map_generator import generate_universe
from .production import GatheringEvent, process_gathering
from .session import SpaceEmpire

__all__ = [
    "generate_universe",
    "GatheringEvent",
    "process_gathering",
    "SpaceEmpire",
]
