"""Export driver: wire the octopress hooks into a renderer and write output files"""

import logging
from functools import partial
from pathlib import Path

from octopub.config import FieldDefaults, Settings
from octopub.core.body import compose_body
from octopub.core.codeblock import reformat_code_block
from octopub.core.frontmatter import build_front_matter
from octopub.core.models import ParsedDoc
from octopub.core.render import DocumentInfo, Renderer, RenderHooks


logger = logging.getLogger(__name__)


def front_matter_template(body: str, info: DocumentInfo, defaults: FieldDefaults) -> str:
    """Header first, then body; never interleaved."""
    return build_front_matter(info, defaults) + body


def octopress_hooks(settings: Settings) -> RenderHooks:
    """Hooks producing front matter + HTML body with codeblock shortcodes."""
    defaults = settings.field_defaults()
    return RenderHooks(
        template=partial(front_matter_template, defaults=defaults),
        inner_template=partial(
            compose_body,
            defaults=defaults,
            default_depth=settings.toc_depth,
            headline_levels=settings.headline_levels,
        ),
        code_block=reformat_code_block,
    )


def make_renderer(settings: Settings) -> Renderer:
    return Renderer(settings.parser_config, octopress_hooks(settings))


def export_text(doc: ParsedDoc, renderer: Renderer) -> str:
    """Return the complete export string for one parsed document."""
    return renderer.render(doc.markdown, doc.options)


def write_doc(doc: ParsedDoc, renderer: Renderer, dest: Path) -> Path:
    """Export a document to dest, creating parent directories. Returns dest."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(export_text(doc, renderer), encoding='utf-8')
    logger.debug("Wrote %s -> %s", doc.path, dest)
    return dest
