"""Data models shared by the parse, render and export steps"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional


# Fields whose list values are flattened to one space-separated scalar so
# every entry reaches the list formatter.
LIST_FIELDS = frozenset({"categories", "tags"})


@dataclass(frozen=True)
class ScalarValue:
    value: str


@dataclass(frozen=True)
class SequenceValue:
    items: tuple[str, ...]


FieldValue = ScalarValue | SequenceValue


def first_value(value: Optional[FieldValue]) -> Optional[str]:
    """Reduce a field value to a single string: the scalar, or the first sequence item.

    Returns None when the field is unset or the sequence is empty.
    """
    if isinstance(value, ScalarValue):
        return value.value
    if isinstance(value, SequenceValue) and value.items:
        return value.items[0]
    return None


def _stringify(raw: Any) -> str:
    """Render a YAML scalar the way it was written in the document."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, datetime):
        return raw.isoformat(sep=" ")
    if isinstance(raw, date):
        return raw.isoformat()
    return str(raw)


class ExportOptions(Mapping[str, FieldValue]):
    """Read-only mapping of document-level export settings for one export pass."""

    def __init__(self, fields: Mapping[str, FieldValue] = None):
        self._fields = MappingProxyType(dict(fields or {}))

    @classmethod
    def from_frontmatter(cls, frontmatter: dict[str, Any]) -> "ExportOptions":
        """Build options from parsed YAML front matter.

        Keys are lower-cased with underscores mapped to hyphens (with_toc -> with-toc).
        None values are treated as unset.
        """
        fields: dict[str, FieldValue] = {}
        for key, raw in (frontmatter or {}).items():
            if raw is None:
                continue
            name = str(key).lower().replace("_", "-")
            if isinstance(raw, (list, tuple)):
                items = tuple(_stringify(v) for v in raw if v is not None)
                if name in LIST_FIELDS:
                    fields[name] = ScalarValue(" ".join(items))
                else:
                    fields[name] = SequenceValue(items)
            else:
                fields[name] = ScalarValue(_stringify(raw))
        return cls(fields)

    def __getitem__(self, name: str) -> FieldValue:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ExportOptions({dict(self._fields)!r})"


class PublishState(str, Enum):
    published = "published"
    preview   = "preview"

    @classmethod
    def parse(cls, value: str) -> "PublishState":
        """Only the exact string 'true' publishes; anything else is a preview."""
        return cls.published if value == "true" else cls.preview


@dataclass(frozen=True)
class CodeBlock:
    """A fenced or indented code block as handed over by the renderer."""
    value:    str
    language: Optional[str] = None


@dataclass(frozen=True)
class Heading:
    """A rendered heading, used to build the table of contents."""
    level:  int
    anchor: str
    html:   str


@dataclass
class ParsedDoc:
    """A source file split into export options and Markdown body; not persisted."""
    path:     Path
    markdown: str                  # body only (frontmatter stripped)
    options:  ExportOptions = field(default_factory=ExportOptions)
