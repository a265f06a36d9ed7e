"""Interpretation of user search queries and date range filtering."""

import re
from typing import List, Optional, Sequence, Tuple

from .dates import parse_date
from .schemas import BlobRecord, DateRangeQuery

START_DATE_FLAG = "-sd"
END_DATE_FLAG = "-ed"

# Accepts single or double digit day/month variants of the positional format
DATE_ARGUMENT_LENGTHS = (10, 11)

PREFIX_PATTERN = re.compile(r"^\s*([^-\s]\S*)")


def extract_prefix(raw_query: str) -> str:
    """Return the leading path term of a query, or '' if it starts with a flag."""
    match = PREFIX_PATTERN.match(raw_query)
    return match.group(1) if match else ""


def extract_argument(flag: str, raw_query: str) -> Optional[str]:
    """Return the value following ``flag``, e.g. ``-sd 2023-01-01``.

    The flag is matched case-insensitively and must be followed by exactly one
    space. A value of the wrong length counts as not found.
    """
    # The flag must start a token, so "Reserves-sd_x" in a path is not a flag
    pattern = re.compile(rf"(?:^|\s){re.escape(flag)} (\S*)", re.IGNORECASE)
    match = pattern.search(raw_query)
    if not match:
        return None

    value = match.group(1)
    if len(value) not in DATE_ARGUMENT_LENGTHS:
        return None
    return value


def _resolve_date(flag: str, raw_query: str):
    value = extract_argument(flag, raw_query)
    if value is None:
        return None
    return parse_date(value)


def interpret(raw_query: str) -> Tuple[str, DateRangeQuery]:
    """Split a query like ``Datasets/Wholesale -sd 2023-01-01 -ed 2023-12-31``.

    Missing, malformed or unparseable dates leave that bound unset.

    Returns:
        Tuple of (path prefix, date range)
    """
    date_range = DateRangeQuery(
        start_date=_resolve_date(START_DATE_FLAG, raw_query),
        end_date=_resolve_date(END_DATE_FLAG, raw_query),
    )
    return extract_prefix(raw_query), date_range


def filter_by_date(
    records: Sequence[BlobRecord], date_range: DateRangeQuery
) -> List[BlobRecord]:
    """Keep records whose embedded date lies strictly inside the range.

    Records without an embedded date are dropped whenever a bound is set.
    """
    if date_range.is_unbounded:
        return list(records)

    start, end = date_range.start_date, date_range.end_date
    selected = []
    for record in records:
        found = record.embedded_date
        if found is None:
            continue
        if start is not None and not found > start:
            continue
        if end is not None and not found < end:
            continue
        selected.append(record)
    return selected
