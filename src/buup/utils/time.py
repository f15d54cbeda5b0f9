"""Time handling utilities."""

from __future__ import annotations

import re

import pandas as pd

from buup.types import InvalidInputError

SYDNEY_TZ = "Australia/Sydney"

# Absolute ISO 8601 only: a full calendar date, optionally followed by a time.
_ISO_DATETIME = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ]\S.*)?")


def parse_timestamp(text: str) -> pd.Timestamp:
    """
    Parse an absolute ISO 8601 date/time string into a pandas timestamp.

    Relative words such as ``now`` or ``today`` and time-only values are
    rejected, so the result never depends on the clock.

    Parameters
    ----------
    text : str
        ISO 8601 date, or date and time with an optional offset or ``Z``.

    Returns
    -------
    pd.Timestamp
        Parsed timestamp; tz-aware when the text carries an offset.

    Raises
    ------
    InvalidInputError
        If the text is not an absolute ISO 8601 date/time.
    """
    stripped = text.strip()
    if not _ISO_DATETIME.fullmatch(stripped):
        raise InvalidInputError(f"Could not parse date/time: '{stripped}'")
    try:
        ts = pd.Timestamp(stripped)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidInputError(f"Could not parse date/time: '{stripped}'") from e
    if pd.isna(ts):
        raise InvalidInputError(f"Could not parse date/time: '{stripped}'")
    return ts


def ensure_tz(ts: pd.Timestamp, tz: str) -> pd.Timestamp:
    """
    Make a timestamp timezone-aware.

    Naive timestamps are taken as wall-clock time in ``tz``; aware timestamps
    are converted to ``tz``.

    Parameters
    ----------
    ts : pd.Timestamp
        Timestamp to normalize.
    tz : str
        IANA timezone name.

    Returns
    -------
    pd.Timestamp
        Timezone-aware timestamp in ``tz``.

    Raises
    ------
    InvalidInputError
        If a naive wall-clock time does not exist or is ambiguous in ``tz``.
    """
    # ts.tz is None when the timestamp is tz-naive
    if ts.tz is None:
        localized = ts.tz_localize(tz, ambiguous="NaT", nonexistent="NaT")
        if pd.isna(localized):
            raise InvalidInputError(f"'{ts}' is not a valid unambiguous time in {tz}")
        return localized
    return ts.tz_convert(tz)


def ensure_utc(ts: pd.Timestamp) -> pd.Timestamp:
    """Ensure a timestamp is timezone-aware in UTC."""
    return ensure_tz(ts, "UTC")
