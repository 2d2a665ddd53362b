"""File discovery, frontmatter extraction, and route derivation"""

import re
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from blogindex.core.models import MarkdownDocument
from blogindex.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^\ufeff?---[ \t]*\n(.*?)(?:^|\n)---[ \t]*(?:\n|$)', re.DOTALL | re.MULTILINE)
MD_EXTENSIONS = {'.md', '.mdx'}
ROUTE_OVERRIDE_KEY = 'routeOverride'


def _values(value: Any) -> list[str]:
    """Normalize one frontmatter value to a list of strings; mappings, nulls and blanks become []."""
    if isinstance(value, dict):
        return []
    items = value if isinstance(value, list) else [value]
    return [str(v) for v in items if isinstance(v, (str, int, float)) and str(v).strip()]


def _strip_frontmatter(text: str) -> tuple[dict[str, list[str]], str]:
    """Return (frontmatter, body) with the YAML header removed and values normalized to string lists.

    BaseLoader keeps every scalar as written, so dates are not coerced.
    """
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.load(m.group(1), Loader=yaml.BaseLoader) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return {str(k): _values(v) for k, v in fm.items()}, text[m.end():]


def derive_route(relative: PurePosixPath, prefix: str = '/blog') -> str:
    """Map a path relative to the posts root to its site route, e.g. Kmp/MyPost.md -> /blog/kmp/my-post."""
    segments = [slugify(part) for part in relative.with_suffix('').parts]
    if segments and segments[-1] == 'index':
        segments.pop()
    segments = [s for s in segments if s]
    base = prefix.strip('/')
    parts = ([base] if base else []) + segments
    return '/' + '/'.join(parts)


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def parse_file(path: Path, root: Path = None, route_prefix: str = '/blog') -> MarkdownDocument:
    """Parse a single markdown file into a MarkdownDocument with a derived route."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)

    override = frontmatter.get(ROUTE_OVERRIDE_KEY, [])
    if len(override) == 1 and override[0].strip():
        route = '/' + override[0].strip().lstrip('/')
    else:
        relative = path.relative_to(root) if root and root != path else Path(path.name)
        route = derive_route(PurePosixPath(relative.as_posix()), route_prefix)

    return MarkdownDocument(route=route, frontmatter=frontmatter, body=body, path=path)
