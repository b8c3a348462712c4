"""File discovery and frontmatter extraction"""

import re
from pathlib import Path
from typing import Any

import yaml

from octopub.core.models import ExportOptions, ParsedDoc


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx', '.markdown'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_text(text: str, path: Path = Path("<string>")) -> ParsedDoc:
    """Split markdown text into export options and body."""
    frontmatter, body = _strip_frontmatter(text)
    return ParsedDoc(path=path, markdown=body, options=ExportOptions.from_frontmatter(frontmatter))


def parse_file(path: Path) -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc."""
    return parse_text(path.read_text(encoding='utf-8'), path)
