"""Body assembly: table of contents, preview banner, content and footnotes"""

import logging
from typing import Optional

from octopub.config import FieldDefaults
from octopub.core.fields import resolve_publish_state
from octopub.core.models import PublishState, first_value
from octopub.core.render import DocumentInfo


logger = logging.getLogger(__name__)

PREVIEW_BANNER = (
    '<div class="preview-banner">\n'
    "<p><strong>PREVIEW</strong>: this post is not published yet.</p>\n"
    "</div>\n"
)

_TOC_ON = {"true", "t", "yes"}
_TOC_OFF = {"false", "nil", "no", "0", ""}


def toc_depth(info: DocumentInfo, default_depth: int = 0, headline_levels: int = 3) -> Optional[int]:
    """Depth of the table of contents requested by the with-toc option, or None."""
    raw = first_value(info.options.get("with-toc"))
    if raw is None:
        return default_depth or None
    value = raw.strip().lower()
    if value in _TOC_ON:
        return headline_levels
    if value in _TOC_OFF:
        return None
    if value.isdecimal() and value.isascii():
        return int(value)
    logger.warning("Ignoring unrecognised with-toc value %r", raw)
    return None


def compose_body(
    content: str,
    info: DocumentInfo,
    defaults: FieldDefaults,
    default_depth: int = 0,
    headline_levels: int = 3,
    ) -> str:
    """Return TOC + preview banner + content + footnotes, always in that order."""
    parts = []
    depth = toc_depth(info, default_depth, headline_levels)
    if depth is not None:
        parts.append(info.toc(depth))
    if resolve_publish_state(info, defaults) is PublishState.preview:
        parts.append(PREVIEW_BANNER)
    parts.append(content)
    parts.append(info.footnotes())
    return "".join(parts)
