"""Publish dates from filename prefixes and document metadata"""

import html
import re
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from octopub.core.fields import resolve_field
from octopub.core.render import DocumentInfo


FILENAME_DATE_RE = re.compile(r'^[0-9]+-[0-9]+-[0-9]+')

# Org-style active/inactive timestamps: <2023-05-01 Mon>, [2023-05-01 Mon 10:00]
_TIMESTAMP_RE = re.compile(r'^[<\[](\d{4}-\d{1,2}-\d{1,2})(?:\s[^>\]]*)?[>\]]$')
_ISO_PREFIX_RE = re.compile(r'^(\d{4}-\d{1,2}-\d{1,2})(?:[T\s].*)?$')

_FORMATS = (
    "%Y/%m/%d",
    "%d.%m.%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def filename_date(path: str | Path) -> Optional[str]:
    """Return the leading digit-run date prefix of the file name, or None when absent."""
    m = FILENAME_DATE_RE.match(Path(path).name)
    return m.group(0) if m else None


def _ymd(text: str) -> date:
    year, month, day = (int(part) for part in text.split("-"))
    return date(year, month, day)


def parse_user_date(text: str, today: Optional[date] = None) -> date:
    """Parse a date the way a user would write it; an empty string means today.

    Raises ValueError for anything unrecognised.
    """
    value = text.strip()
    if not value:
        return today or date.today()
    if m := _TIMESTAMP_RE.match(value):
        return _ymd(m.group(1))
    if m := _ISO_PREFIX_RE.match(value):
        return _ymd(m.group(1))
    for fmt in _FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date: {text!r}")


def metadata_date(info: DocumentInfo, today: Optional[date] = None) -> date:
    """Canonical publish date from the document's date field."""
    return parse_user_date(html.unescape(resolve_field("date", info)), today)


def dated_filename(path: str | Path, info: DocumentInfo, today: Optional[date] = None) -> Path:
    """Path with its date prefix replaced by the metadata date (prepended when missing)."""
    path = Path(path)
    stamp = metadata_date(info, today).isoformat()
    if FILENAME_DATE_RE.match(path.name):
        name = FILENAME_DATE_RE.sub(stamp, path.name, count=1)
    else:
        name = f"{stamp}-{path.name}"
    return path.with_name(name)
