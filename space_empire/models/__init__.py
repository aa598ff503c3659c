"""Data models for Space Empire."""

from .building import BUILDING_PRODUCTION, Building, BuildingClass
from .errors import (
    InsufficientShipsError,
    InvalidPlayerCountError,
    SpaceEmpireError,
    UnknownSystemError,
)
from .fleet import Fleet, FleetLocation
from .player import GatheringPolicy, Player
from .resources import Resources
from .ship import SHIP_STATS, Ship, ShipClass
from .solar_system import SolarSystem
from .starmap import Starmap

__all__ = [
    "BUILDING_PRODUCTION",
    "Building",
    "BuildingClass",
    "Fleet",
    "FleetLocation",
    "GatheringPolicy",
    "InsufficientShipsError",
    "InvalidPlayerCountError",
    "Player",
    "Resources",
    "SHIP_STATS",
    "Ship",
    "ShipClass",
    "SolarSystem",
    "SpaceEmpireError",
    "Starmap",
    "UnknownSystemError",
]
