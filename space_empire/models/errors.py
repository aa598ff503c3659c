"""Error types raised by the simulation core."""


class SpaceEmpireError(Exception):
    """Base class for all recoverable simulation errors."""


class InvalidPlayerCountError(SpaceEmpireError, ValueError):
    """Raised when homeworlds are assigned to anything but two players."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Homeworlds need exactly 2 players, got {count}")


class InsufficientShipsError(SpaceEmpireError, ValueError):
    """Raised when a fleet transfer asks for more ships than are present.

    Attributes:
        ship_class: Class of ships requested
        requested: Number of ships requested
        available: Number of ships of that class in the source fleet
    """

    def __init__(self, ship_class, requested: int, available: int):
        self.ship_class = ship_class
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient {ship_class.value} ships: "
            f"requested {requested}, available {available}"
        )


class UnknownSystemError(SpaceEmpireError, LookupError):
    """Raised when a solar system id is not present in the starmap."""

    def __init__(self, system_id: int):
        self.system_id = system_id
        super().__init__(f"Solar system {system_id} does not exist")
