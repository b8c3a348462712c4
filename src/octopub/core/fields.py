"""Front-matter field lookup and list formatting"""

from typing import Optional

from octopub.config import FieldDefaults
from octopub.core.models import PublishState, first_value
from octopub.core.render import DocumentInfo


def resolve_field(name: str, info: DocumentInfo, default: Optional[str] = None) -> str:
    """Return the inline-rendered value of a field, falling back to default when empty.

    The default is substituted verbatim, never rendered. Absent fields with no
    default resolve to an empty string.
    """
    value = first_value(info.options.get(name))
    if value is None:
        return default if default is not None else ""
    rendered = info.inline(value)
    if default is not None and not rendered:
        return default
    return rendered


def resolve_publish_state(info: DocumentInfo, defaults: FieldDefaults) -> PublishState:
    return PublishState.parse(resolve_field("published", info, defaults.published))


def format_list(text: str) -> str:
    """Turn 'a b c' into newline-prefixed YAML list entries: '\\n- a \\n- b \\n- c'."""
    return " ".join(f"\n- {token}" for token in text.split())
