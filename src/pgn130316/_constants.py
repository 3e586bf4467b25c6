"""Internal constants shared across the package."""

PLUGIN_ID = "pgn130316"
PLUGIN_NAME = "pdjr-skplugin-pgn130316"
PLUGIN_DESCRIPTION = "Map PGN 130316 into Signal K"

PGN = 130316
PGN_PROPERTY = "pgn-to-signalk"

WILDCARD = "*"
UNITS = "K"
DESCRIPTION = "Temperature, Extended Range"

# ------------------------------------------------------------------
# Channels carried by a single PGN 130316 message
# ------------------------------------------------------------------

TEMPERATURE_SUFFIX = "temperature"
SET_TEMPERATURE_SUFFIX = "setTemperature"
TEMPERATURE_FIELD = "Temperature"
SET_TEMPERATURE_FIELD = "Set Temperature"

# ------------------------------------------------------------------
# NMEA 2000 temperature source codes (0-14).
# canboat decodes these to their names; other codes arrive as numbers.
# ------------------------------------------------------------------

STANDARD_SOURCES: dict[int, str] = {
    0: "Sea Temperature",
    1: "Outside Temperature",
    2: "Inside Temperature",
    3: "Engine Room Temperature",
    4: "Main Cabin Temperature",
    5: "Live Well Temperature",
    6: "Bait Well Temperature",
    7: "Refrigeration Temperature",
    8: "Heating System Temperature",
    9: "Dew Point Temperature",
    10: "Apparent Wind Chill Temperature",
    11: "Theoretical Wind Chill Temperature",
    12: "Heat Index Temperature",
    13: "Freezer Temperature",
    14: "Exhaust Gas Temperature",
}

# Older canboat releases spell code 7 this way.
REFRIGERATION_ALT_NAME = "Refridgeration Temperature"

CONFIG_FILE_ENV = "PGN130316_CONFIG_FILE"
