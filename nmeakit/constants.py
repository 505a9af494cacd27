"""Field values shared by several sentence types."""

STATUS_VALID = "A"
STATUS_INVALID = "V"

NORTH = "N"
SOUTH = "S"
EAST = "E"
WEST = "W"

HEADING_TRUE = "T"
HEADING_MAGNETIC = "M"

TEMPERATURE_CELSIUS = "C"

DISTANCE_UNIT_KILOMETRE = "K"
DISTANCE_UNIT_NAUTICAL_MILE = "N"
DISTANCE_UNIT_STATUTE_MILE = "S"