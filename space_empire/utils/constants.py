"""Game configuration constants."""

# Grid dimensions
GRID_X = 3
GRID_Y = 3

# Universe configuration
NUM_SYSTEMS = GRID_X * GRID_Y
NUM_PLAYERS = 2

# Undirected links between systems, stored in both directions on the starmap
SYSTEM_LINKS = (
    (1, 3),
    (0, 2),
    (1, 5),
    (0, 6),
    (2, 6),
    (2, 8),
    (3, 7),
    (6, 8),
    (7, 5),
)

# Homeworld system per player slot (first player, second player)
HOMEWORLD_SYSTEMS = (0, 8)

# Rendering geometry (pixels)
CELL_SPACING = 80  # Offset between neighbouring grid cells
MARKER_SIZE = 50  # Width and height of a system marker

# Rendering colours (RGB)
BACKGROUND_COLOR = (0, 0, 0)
SYSTEM_COLOR = (0, 0, 255)
LINK_COLOR = (255, 0, 0)
