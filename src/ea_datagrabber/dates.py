"""Date parsing for query arguments, listing metadata and blob URLs."""

import logging
import re
from datetime import date
from typing import Callable, List, Optional

logger = logging.getLogger("ea_datagrabber.dates")

# Used when a filename date carries only year and month. February is always 28.
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_ABBREVIATIONS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}

CLI_DATE_PATTERN = re.compile(r"\A(\d{4}).(\d{2}).(\d{2})\Z", re.ASCII | re.DOTALL)
FILENAME_DATE_PATTERN = re.compile(r"\A(\d{4})(\d{2})(\d{2})?\Z", re.ASCII)

DAY_PATTERN = re.compile(r"\b\d{1,2}\b", re.ASCII)
MONTH_PATTERN = re.compile(r"\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\b")
YEAR_PATTERN = re.compile(r"\b\d{4}\b", re.ASCII)

# 6 or 8 digits delimited by '/', '-', '_' or the ends of the string
URL_DATE_PATTERN = re.compile(r"(?:^|[/_-])(\d{6}(?:\d{2})?)(?=[/_-]|\Z)", re.ASCII)


def _make_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_cli_date(text: str) -> Optional[date]:
    """Parse ``YYYY-MM-DD``. The separators are skipped, not checked."""
    match = CLI_DATE_PATTERN.match(text)
    if not match:
        return None
    year, month, day = (int(group) for group in match.groups())
    return _make_date(year, month, day)


def parse_filename_date(text: str) -> Optional[date]:
    """Parse ``YYYYMMDD`` or ``YYYYMM`` as found in dataset file names.

    A year-month value resolves to the last day of that month according to
    MONTH_DAYS, so ``202402`` is 2024-02-28 rather than the 29th.
    """
    match = FILENAME_DATE_PATTERN.match(text)
    if not match:
        return None

    year = int(match.group(1))
    month = int(match.group(2))
    if match.group(3) is not None:
        day = int(match.group(3))
    elif 1 <= month <= 12:
        day = MONTH_DAYS[month - 1]
    else:
        return None

    return _make_date(year, month, day)


def parse_text_date(text: str) -> Optional[date]:
    """Parse a long-form date such as ``Tue, 12 Jan 2023 10:15:00 GMT``.

    Takes the first standalone 1-2 digit number as the day, the first month
    abbreviation and the first standalone 4 digit number as the year.
    """
    day_match = DAY_PATTERN.search(text)
    month_match = MONTH_PATTERN.search(text)
    year_match = YEAR_PATTERN.search(text)

    if not (day_match and month_match and year_match):
        return None

    month = MONTH_ABBREVIATIONS.get(month_match.group(1))
    if month is None:
        return None

    return _make_date(int(year_match.group()), month, int(day_match.group()))


DATE_PARSERS: List[Callable[[str], Optional[date]]] = [
    parse_cli_date,
    parse_filename_date,
    parse_text_date,
]


def parse_date(text: str) -> Optional[date]:
    """Parse a date string, trying each known format in turn.

    Args:
        text: Date string from a query argument, listing metadata or file name

    Returns:
        The first valid date produced, or None if no format matched
    """
    if not text:
        return None

    for parser in DATE_PARSERS:
        parsed = parser(text)
        if parsed is not None:
            return parsed

    logger.warning("Failed to parse date: %s", text)
    return None


def extract_date_from_url(url: str) -> Optional[date]:
    """Return the date embedded in a blob URL, if it has one.

    Looks for the first isolated ``YYYYMMDD`` or ``YYYYMM`` token, e.g.
    ``.../HydrologicalModellingDataset/2_Flows_20231231`` gives 2023-12-31.
    """
    match = URL_DATE_PATTERN.search(url)
    if not match:
        return None
    return parse_filename_date(match.group(1))
