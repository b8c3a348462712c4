"""Front-matter header: field resolution, preview marking and YAML-style rendering"""

from dataclasses import dataclass, fields

from octopub.config import FieldDefaults
from octopub.core.fields import format_list, resolve_field
from octopub.core.models import PublishState
from octopub.core.render import DocumentInfo


PREVIEW_PREFIX = "[PREVIEW] "
DELIMITER = "---"


@dataclass(frozen=True)
class FrontMatter:
    """Resolved header fields; declaration order is the output order."""
    title:      str
    date:       str
    lang:       str
    layout:     str
    ref:        str
    permalink:  str
    categories: str
    tags:       str
    published:  str
    comments:   str

    def render(self) -> str:
        lines = [DELIMITER]
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "title":
                value = f'"{value}"'
            lines.append(f"{f.name}: {value}")
        lines.append(DELIMITER)
        return "\n".join(lines) + "\n"


def resolve_front_matter(info: DocumentInfo, defaults: FieldDefaults) -> FrontMatter:
    """Resolve all header fields and apply the preview title rule."""
    title      = resolve_field("title", info)
    date       = resolve_field("date", info)
    lang       = resolve_field("lang", info)
    ref        = resolve_field("ref", info)
    permalink  = resolve_field("permalink", info)
    layout     = resolve_field("layout", info, defaults.layout)
    categories = resolve_field("categories", info, defaults.categories)
    tags       = resolve_field("tags", info, defaults.tags)
    published  = resolve_field("published", info, defaults.published)
    comments   = resolve_field("comments", info)

    if PublishState.parse(published) is PublishState.preview:
        title = PREVIEW_PREFIX + title

    return FrontMatter(
        title=title,
        date=date,
        lang=lang,
        layout=layout,
        ref=ref,
        permalink=permalink,
        categories=format_list(categories),
        tags=format_list(tags),
        published=published,
        comments=comments,
    )


def build_front_matter(info: DocumentInfo, defaults: FieldDefaults) -> str:
    return resolve_front_matter(info, defaults).render()
