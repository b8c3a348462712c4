"""Pipeline step functions: publish and rename orchestration"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from octopub.config import Settings
from octopub.core.dates import dated_filename
from octopub.core.export import make_renderer, write_doc
from octopub.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def _relative_parent(p: Path, root: Path) -> Path:
    """Source directory of p relative to root; empty when root is the file itself."""
    if root.is_file():
        return Path()
    return p.parent.relative_to(root)


def run_export(
    path: str,
    settings: Settings,
    output_dir: Path,
    ) -> list[tuple[Path, Path]]:
    """Export every markdown file under path into output_dir, mirroring subdirectories.

    Returns (source_path, output_path) pairs.
    """
    root = Path(path)
    renderer = make_renderer(settings)
    results = []
    for p in discover_files(root):
        dest = output_dir / _relative_parent(p, root) / f"{p.stem}.{settings.output_ext}"
        try:
            write_doc(parse_file(p), renderer, dest)
        except Exception as e:
            raise RuntimeError(f"Failed to export {p}: {e}") from e
        results.append((p, dest))
    logger.info("Exported %d document(s) to %s", len(results), output_dir)
    return results


def run_rename(
    path: str,
    settings: Settings,
    dry_run: bool = False,
    today: Optional[date] = None,
    ) -> list[tuple[Path, Path]]:
    """Rename files so their name starts with the publish date from metadata.

    Returns (old_path, new_path) pairs for files whose name changes.
    """
    renderer = make_renderer(settings)
    changes = []
    for p in discover_files(Path(path)):
        try:
            doc = parse_file(p)
            target = dated_filename(p, renderer.info(doc.options), today)
        except ValueError as e:
            raise RuntimeError(f"Failed to rename {p}: {e}") from e
        if target == p:
            logger.debug("%s already carries its publish date", p)
            continue
        if target.exists():
            raise RuntimeError(f"Failed to rename {p}: {target} already exists")
        if not dry_run:
            p.rename(target)
        changes.append((p, target))
    return changes
