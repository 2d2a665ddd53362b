"""Pipeline step functions: collect posts, build the index, and write the generated artifact"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from blogindex.config import Settings
from blogindex.core.emit import artifact_paths, render_module, render_sidecar, write_artifact
from blogindex.core.index import build_index
from blogindex.core.models import ArticleEntry, FieldDefaults, MarkdownDocument
from blogindex.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of one build: the index, how many documents were left out, and files written."""
    entries: tuple[ArticleEntry, ...]
    skipped: int
    written: list[tuple[str, Path]] = field(default_factory=list)   # (status, path)


def collect_documents(path: Path, route_prefix: str = '/blog') -> tuple[list[MarkdownDocument], int]:
    """Parse every markdown file under path. Returns (documents, unparseable_count)."""
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    root = path if path.is_dir() else path.parent
    documents, failed = [], 0
    for p in discover_files(path):
        try:
            doc = parse_file(p, root, route_prefix)
        except (ValueError, OSError) as e:
            logger.warning("Skipping %s: %s", p, e)
            failed += 1
            continue
        logger.debug("Parsed %s -> %s", p, doc.route)
        documents.append(doc)
    return documents, failed


def run_index(path: str, settings: Settings) -> tuple[tuple[ArticleEntry, ...], int]:
    """Build the index for path in memory. Returns (entries, skipped_count)."""
    documents, failed = collect_documents(Path(path), settings.route_prefix)
    entries = build_index(documents, FieldDefaults(author=settings.default_author))
    return entries, failed + len(documents) - len(entries)


def run_build(path: str, settings: Settings) -> BuildResult:
    """Build the index for path and write the generated module and sidecar JSON."""
    entries, skipped = run_index(path, settings)
    module_path, sidecar_path = artifact_paths(settings)
    result = BuildResult(entries=entries, skipped=skipped)
    for out_file, content in ((module_path, render_module(entries)), (sidecar_path, render_sidecar(entries))):
        result.written.append((write_artifact(out_file, content), out_file))
    logger.info("Generated %s with %d entries (%d skipped)", module_path, len(entries), skipped)
    return result
