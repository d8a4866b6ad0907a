"""
Configuration constants for the FARS accident helpers.
"""

from typing import Dict, List, Tuple

# ======================================================
#  DATA FILES / SCHEMA
# ======================================================
# One compressed CSV per census year, e.g. ``accident_2013.csv.bz2``.
FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Columns the pipeline relies on and the dtype each is coerced to.
ACCIDENT_SCHEMA: Dict[str, str] = {
    "STATE": "Int64",
    "MONTH": "Int64",
    "LATITUDE": "float64",
    "LONGITUD": "float64",
}

MONTH_COL: str = "MONTH"
YEAR_COL: str = "year"

# Coordinates above these values are FARS codes for "not available".
LATITUDE_SENTINEL: float = 90
LONGITUDE_SENTINEL: float = 900

MONTH_LABELS: List[str] = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# FARS state codes follow FIPS numbering, plus Puerto Rico (43) and the
# Virgin Islands (52).
STATE_NAMES: Dict[int, str] = {
    1: "Alabama",
    2: "Alaska",
    4: "Arizona",
    5: "Arkansas",
    6: "California",
    8: "Colorado",
    9: "Connecticut",
    10: "Delaware",
    11: "District of Columbia",
    12: "Florida",
    13: "Georgia",
    15: "Hawaii",
    16: "Idaho",
    17: "Illinois",
    18: "Indiana",
    19: "Iowa",
    20: "Kansas",
    21: "Kentucky",
    22: "Louisiana",
    23: "Maine",
    24: "Maryland",
    25: "Massachusetts",
    26: "Michigan",
    27: "Minnesota",
    28: "Mississippi",
    29: "Missouri",
    30: "Montana",
    31: "Nebraska",
    32: "Nevada",
    33: "New Hampshire",
    34: "New Jersey",
    35: "New Mexico",
    36: "New York",
    37: "North Carolina",
    38: "North Dakota",
    39: "Ohio",
    40: "Oklahoma",
    41: "Oregon",
    42: "Pennsylvania",
    43: "Puerto Rico",
    44: "Rhode Island",
    45: "South Carolina",
    46: "South Dakota",
    47: "Tennessee",
    48: "Texas",
    49: "Utah",
    50: "Vermont",
    51: "Virginia",
    52: "Virgin Islands",
    53: "Washington",
    54: "West Virginia",
    55: "Wisconsin",
    56: "Wyoming",
}

# ======================================================
#  MAP STYLING
# ======================================================
MARKER_COLOR: str = "#d62728"
MARKER_SIZE: int = 4
SUBUNIT_COLOR: str = "#7f7f7f"
LAND_COLOR: str = "#f5f7fb"
MAP_WIDTH: int = 900
MAP_HEIGHT: int = 650
# Degrees added on each side of the accident bounding box.
MAP_PADDING_DEG: float = 0.5

# ======================================================
#  UI DEFAULTS
# ======================================================
GLOBAL_YEAR_MIN: int = 2013
GLOBAL_YEAR_MAX: int = 2015
DEFAULT_YEAR_RANGE: Tuple[int, int] = (GLOBAL_YEAR_MIN, GLOBAL_YEAR_MAX)
DEFAULT_STATE: int = 1
