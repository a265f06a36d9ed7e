"""Parsing of the blob container listing XML.

The listing is flat (``<Blob>`` blocks holding ``<Url>`` and
``<Last-Modified>``, followed by a ``<NextMarker>``), so tag-scoped pattern
matching is used instead of a full XML parser. Nested tags of the same name,
attributes and unclosed tags are not handled.
"""

import re
from typing import List, Tuple

from .dates import extract_date_from_url, parse_date
from .schemas import BlobRecord

PAGE_PATTERN = re.compile(
    r"<Blob>(.*?)</Blob>|<NextMarker>(.*?)</NextMarker>",
    re.IGNORECASE | re.DOTALL,
)


def _tag_pattern(tag: str) -> re.Pattern:
    name = re.escape(tag)
    return re.compile(f"<{name}>(.*?)</{name}>", re.IGNORECASE | re.DOTALL)


def extract_all(tag: str, doc: str) -> List[str]:
    """Return the inner text of every ``<tag>...</tag>`` in document order."""
    return [match.group(1) for match in _tag_pattern(tag).finditer(doc)]


def extract_first(tag: str, doc: str) -> str:
    """Return the inner text of the first ``<tag>...</tag>``, or ''."""
    match = _tag_pattern(tag).search(doc)
    return match.group(1) if match else ""


def parse_blob(block: str) -> BlobRecord:
    """Build a record from the inner text of one ``<Blob>`` element."""
    url = extract_first("Url", block)
    return BlobRecord(
        url=url,
        last_modified=parse_date(extract_first("Last-Modified", block)),
        embedded_date=extract_date_from_url(url),
    )


def parse_page(doc: str) -> Tuple[List[BlobRecord], str]:
    """Parse one page of the listing.

    Args:
        doc: Response body of a single listing request

    Returns:
        Tuple of (records in listing order, continuation marker). An empty
        marker means there are no further pages.
    """
    records: List[BlobRecord] = []
    next_marker = ""

    for match in PAGE_PATTERN.finditer(doc):
        blob_body, marker = match.groups()
        if blob_body is not None:
            records.append(parse_blob(blob_body))
        else:
            next_marker = marker

    return records, next_marker
