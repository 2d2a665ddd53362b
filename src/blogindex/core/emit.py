"""Generated artifact: render the article listing as a Python module plus sidecar JSON, and write it"""

import json
import logging
from pathlib import Path

from blogindex.config import Settings
from blogindex.core.models import ArticleEntry
from blogindex.core.utils.hashing import sha256, sha256_bytes


logger = logging.getLogger(__name__)


MODULE_HEADER = '''\
"""Generated by blogindex from markdown front matter. Do not edit."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleEntry:
    path: str
    author: str
    date: str
    title: str
    description: str
    tags: tuple[str, ...] = ()

'''

FIELDS = ("path", "author", "date", "title", "description")


def artifact_paths(settings: Settings) -> tuple[Path, Path]:
    """Return (module_path, sidecar_path) under output_dir, following the package layout."""
    package_dir = Path(settings.output_dir).joinpath(*settings.package.split('.'))
    return package_dir / f"{settings.module_name}.py", package_dir / f"{settings.module_name}.json"


def _render_entry(entry: ArticleEntry) -> list[str]:
    lines = ["    ArticleEntry("]
    lines += [f"        {name}={getattr(entry, name)!r}," for name in FIELDS]
    if entry.tags:
        lines.append(f"        tags={tuple(entry.tags)!r},")
    lines.append("    ),")
    return lines


def render_module(entries: tuple[ArticleEntry, ...]) -> str:
    """Return module source defining ArticleEntry and an ENTRIES tuple in the given order."""
    if not entries:
        return MODULE_HEADER + "\nENTRIES: tuple[ArticleEntry, ...] = ()\n"
    lines = ["", "ENTRIES: tuple[ArticleEntry, ...] = ("]
    for entry in entries:
        lines += _render_entry(entry)
    lines.append(")")
    return MODULE_HEADER + "\n".join(lines) + "\n"


def render_sidecar(entries: tuple[ArticleEntry, ...]) -> str:
    """Return the entries as a JSON array (tags as lists), newline-terminated."""
    data = [entry.model_dump(mode="json") for entry in entries]
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_artifact(path: Path, content: str) -> str:
    """Overwrite path with content. Returns 'created', 'updated', or 'unchanged'."""
    if path.exists():
        if sha256_bytes(path.read_bytes()) == sha256(content):
            logger.debug("Unchanged %s", path)
            return "unchanged"
        status = "updated"
    else:
        status = "created"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    logger.debug("Wrote %s (%s)", path, status)
    return status
