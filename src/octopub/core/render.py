"""Markdown-it renderer with overridable template, inner-template and code-block hooks"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.footnote import footnote_plugin

from octopub.core.models import CodeBlock, ExportOptions, Heading


logger = logging.getLogger(__name__)

TOC_TITLE = "Table of Contents"


@dataclass
class DocumentInfo:
    """Per-document state the renderer exposes to its hooks."""
    options:   ExportOptions
    inline:    Callable[[str], str]
    headings:  list[Heading] = field(default_factory=list)
    footnotes_html: str = ""

    def footnotes(self) -> str:
        """Rendered footnote section; empty when the document has no footnotes."""
        return self.footnotes_html

    def toc(self, depth: int) -> str:
        """Nested table of contents for headings at or above depth."""
        entries = [h for h in self.headings if h.level <= depth]
        if not entries:
            return ""
        return (
            '<div id="table-of-contents">\n'
            f"<h2>{TOC_TITLE}</h2>\n"
            '<div id="text-table-of-contents">\n'
            f"{_toc_list(entries)}\n"
            "</div>\n"
            "</div>\n"
        )


def _toc_list(entries: list[Heading]) -> str:
    """Build nested <ul> markup; each <li> stays open until its next sibling or parent."""
    parts: list[str] = []
    stack: list[int] = []
    for h in entries:
        if stack and h.level <= stack[-1]:
            parts.append("</li>")
            while len(stack) > 1 and h.level <= stack[-2]:
                stack.pop()
                parts.append("</ul>\n</li>")
        else:
            parts.append("<ul>")
            stack.append(h.level)
        parts.append(f'<li><a href="#{h.anchor}">{h.html}</a>')
    parts.append("</li>")
    parts.extend(["</ul>\n</li>"] * (len(stack) - 1))
    parts.append("</ul>")
    return "\n".join(parts)


def default_template(contents: str, info: DocumentInfo) -> str:
    return contents


def default_inner_template(contents: str, info: DocumentInfo) -> str:
    return contents + info.footnotes()


@dataclass(frozen=True)
class RenderHooks:
    """Named overrides layered over the default HTML rendering.

    template:       (body, info) -> final document
    inner_template: (content, info) -> body
    code_block:     CodeBlock -> markup; None keeps markdown-it's own fence output
    """
    template:       Callable[[str, DocumentInfo], str] = default_template
    inner_template: Callable[[str, DocumentInfo], str] = default_inner_template
    code_block:     Optional[Callable[[CodeBlock], str]] = None


def _code_block_rule(hook: Callable[[CodeBlock], str]):
    """Wrap a code-block hook as a markdown-it render rule."""
    def render(self, tokens, idx, options, env):
        token = tokens[idx]
        info = unescapeAll(token.info).strip() if token.info else ""
        language = info.split(maxsplit=1)[0] if info else None
        return hook(CodeBlock(value=token.content, language=language)) + "\n"
    return render


def make_parser(preset: str = "gfm-like") -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, with footnotes and heading ids."""
    md = MarkdownIt(preset, options_update={"linkify": False})
    md.use(footnote_plugin)
    md.use(anchors_plugin, min_level=1, max_level=6, permalink=False)
    return md


class Renderer:
    """Render a Markdown body into a complete export through the configured hooks."""

    def __init__(self, parser_config: str = "gfm-like", hooks: RenderHooks = None):
        self.hooks = hooks or RenderHooks()
        self.md = make_parser(parser_config)
        if self.hooks.code_block is not None:
            rule = _code_block_rule(self.hooks.code_block)
            self.md.add_render_rule("fence", rule)
            self.md.add_render_rule("code_block", rule)

    def inline(self, text: str) -> str:
        """Render a metadata value with the inline pass used for body text."""
        return self.md.renderInline(text)

    def info(self, options: ExportOptions) -> DocumentInfo:
        """Document info for metadata-only lookups, without rendering a body."""
        return DocumentInfo(options=options, inline=self.inline)

    def _headings(self, tokens: list, env: dict) -> list[Heading]:
        headings = []
        for i, tok in enumerate(tokens):
            if tok.type != "heading_open":
                continue
            # footnote refs stay in the heading only; a TOC copy would duplicate their ids
            children = [c for c in tokens[i + 1].children or [] if c.type != "footnote_ref"]
            headings.append(Heading(
                level=int(tok.tag[1:]),
                anchor=tok.attrGet("id") or "",
                html=self.md.renderer.renderInline(children, self.md.options, env),
            ))
        return headings

    def render_parts(self, markdown: str, options: ExportOptions) -> tuple[str, DocumentInfo]:
        """Render markdown into (content, info) with footnotes split off the content."""
        env: dict = {}
        tokens = self.md.parse(markdown, env)
        split = next(
            (i for i, t in enumerate(tokens) if t.type == "footnote_block_open"), len(tokens)
        )
        content = self.md.renderer.render(tokens[:split], self.md.options, env)
        info = DocumentInfo(
            options=options,
            inline=self.inline,
            headings=self._headings(tokens[:split], env),
            footnotes_html=self.md.renderer.render(tokens[split:], self.md.options, env),
        )
        logger.debug("Rendered %d heading(s), footnotes=%s", len(info.headings), bool(info.footnotes_html))
        return content, info

    def render(self, markdown: str, options: ExportOptions) -> str:
        """Full export string: inner template over the content, then the outer template."""
        content, info = self.render_parts(markdown, options)
        return self.hooks.template(self.hooks.inner_template(content, info), info)
