"""Reading FARS accident files.

One file is published per census year and named after it (see
:func:`make_filename`).  :func:`fars_read` is a thin wrapper around
``pandas.read_csv``; :func:`validate_accidents` checks the columns the rest
of the package depends on and coerces them to the dtypes declared in
``config.ACCIDENT_SCHEMA``.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from .config import ACCIDENT_SCHEMA, FILENAME_TEMPLATE

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Filenames
# ---------------------------------------------------------------------------


def make_filename(year: int | str) -> str:
    """Return the accident filename for ``year``, e.g. ``accident_2013.csv.bz2``.

    ``year`` may be an int or a numeric string.  ``int()`` errors
    (``ValueError``/``TypeError``) are left to propagate.
    """
    return FILENAME_TEMPLATE.format(year=int(year))


def resolve_path(year: int | str, data_dir: str | Path | None = None) -> Path:
    """Locate the file for ``year`` in ``data_dir`` (working directory if None)."""
    filename = make_filename(year)
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


# ---------------------------------------------------------------------------
# Reading / schema
# ---------------------------------------------------------------------------


def fars_read(path: str | Path) -> pd.DataFrame:
    """Load one accident file into a DataFrame.

    Parameters
    ----------
    path : str or Path
        Location of a (usually bz2-compressed) CSV file.

    Returns
    -------
    pd.DataFrame
        The file contents with columns and dtypes as authored in the source.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=pd.errors.ParserWarning)
        warnings.simplefilter("ignore", category=pd.errors.DtypeWarning)
        df = pd.read_csv(path, low_memory=False)

    logger.debug("Read %d rows from %s", len(df), path)
    return df


def ensure_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """Raise an error if the DataFrame lacks any of the required columns."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise KeyError(f"Missing expected columns: {missing}")


def validate_accidents(
    df: pd.DataFrame, required: Optional[Iterable[str]] = None
) -> pd.DataFrame:
    """Check and coerce the accident columns named in ``required``.

    Parameters
    ----------
    df : pd.DataFrame
        Raw accident table as returned by :func:`fars_read`.
    required : iterable of str, optional
        Subset of ``ACCIDENT_SCHEMA`` keys to validate.  Defaults to all of
        them.

    Returns
    -------
    pd.DataFrame
        A copy of ``df`` where each required column has its schema dtype.
        Values that cannot be parsed become missing.
    """
    cols = list(required) if required is not None else list(ACCIDENT_SCHEMA)
    unknown = [col for col in cols if col not in ACCIDENT_SCHEMA]
    if unknown:
        raise ValueError(f"No schema entry for columns: {unknown}")
    ensure_columns(df, cols)

    out = df.copy()
    for col in cols:
        numeric = pd.to_numeric(out[col], errors="coerce")
        if ACCIDENT_SCHEMA[col] == "Int64":
            # Int64 rejects fractional floats.
            numeric = numeric.round()
        out[col] = numeric.astype(ACCIDENT_SCHEMA[col])
    return out
