"""Limits and defaults shared by the generator and its validators."""
from __future__ import annotations

import sys
from pathlib import Path

# Widest hex prefix of a digest that still fits in a native signed integer.
MAX_HEX_INT_WIDTH = min(len(format(sys.maxsize, "x")), 15)

DEFAULT_CHARACTER_SET = "abcdefghjkmnpqrstuwxyz123456789"

DEFAULT_START_TIMESTAMP = 0
DEFAULT_MIN_LENGTH = 5
DEFAULT_TIME_MAGNITUDE = 1
DEFAULT_HOST_MAGNITUDE = 1
DEFAULT_RAND_MAGNITUDE = 1

START_TIMESTAMP_LOWER_LIMIT = 0
MIN_LENGTH_LOWER_LIMIT = 3
MIN_LENGTH_UPPER_LIMIT = 255
TIME_MAGNITUDE_LOWER_LIMIT = 1
TIME_MAGNITUDE_UPPER_LIMIT = 5
HOST_MAGNITUDE_LOWER_LIMIT = 1
HOST_MAGNITUDE_UPPER_LIMIT = MAX_HEX_INT_WIDTH
RAND_MAGNITUDE_LOWER_LIMIT = 1
RAND_MAGNITUDE_UPPER_LIMIT = 10
CHARACTER_SET_MIN_LENGTH = 3

CONFIG_SCHEMA_PATH = Path(__file__).resolve().parents[1] / "data" / "config.schema.json"

# Public configuration keys, as used in error messages and JSON files.
FIELD_KEYS = {
    "start_timestamp": "startTimestamp",
    "min_length": "minLength",
    "time_magnitude": "timeMagnitude",
    "host_magnitude": "hostMagnitude",
    "rand_magnitude": "randMagnitude",
    "character_set": "characterSet",
}
