"""fars package initializer.

This package loads yearly FARS (Fatality Analysis Reporting System)
accident files, summarizes monthly accident counts across years and maps
accident locations for a single state.  See individual module docstrings
for details.
"""

from .errors import InvalidStateError
from .pipeline import YearResult, fars_read_years, fars_summarize_years
from .plotting import fars_map_state
from .reader import fars_read, make_filename

__all__ = [
    "InvalidStateError",
    "YearResult",
    "fars_map_state",
    "fars_read",
    "fars_read_years",
    "fars_summarize_years",
    "make_filename",
]
