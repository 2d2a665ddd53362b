"""Blog index builder: resolve front-matter fields into sorted ArticleEntry records"""

import logging
from collections import Counter
from typing import Iterable

from blogindex.core.models import ArticleEntry, FieldDefaults, MarkdownDocument


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "date")


class MissingFieldError(ValueError):
    """A required front-matter field is absent or has more than one value."""

    def __init__(self, route: str, field: str, count: int):
        self.route = route
        self.field = field
        self.count = count
        problem = "missing" if count == 0 else f"has {count} values, expected 1"
        super().__init__(f"{route}: front matter '{field}' {problem}")


def _single(frontmatter: dict[str, list[str]], key: str) -> str | None:
    """Return the value for key when it has exactly one, else None."""
    values = frontmatter.get(key) or []
    return values[0] if len(values) == 1 else None


def resolve_entry(doc: MarkdownDocument, defaults: FieldDefaults = FieldDefaults()) -> ArticleEntry:
    """Build the ArticleEntry for one document; raises MissingFieldError when a required field is not single-valued."""
    fm = doc.frontmatter
    required = {}
    for name in REQUIRED_FIELDS:
        value = _single(fm, name)
        if value is None:
            raise MissingFieldError(doc.route, name, len(fm.get(name) or []))
        required[name] = value

    tags = fm.get("tags")
    return ArticleEntry(
        path=doc.route,
        author=_single(fm, "author") or defaults.author,
        tags=tuple(tags) if tags else defaults.tags,
        **required,
    )


def build_index(
    documents: Iterable[MarkdownDocument],
    defaults: FieldDefaults = FieldDefaults(),
    ) -> tuple[ArticleEntry, ...]:
    """Return entries for every publishable document, newest date first.

    Documents whose title, description or date is missing or multi-valued are
    skipped with a warning. Dates compare as plain strings; ties keep input order.
    """
    entries = []
    for doc in documents:
        try:
            entry = resolve_entry(doc, defaults)
        except MissingFieldError as e:
            logger.warning("Skipping %s", e)
            continue
        logger.debug("Indexed %s (%s, %d tags)", entry.path, entry.date, len(entry.tags))
        entries.append(entry)

    for route, count in Counter(e.path for e in entries).items():
        if count > 1:
            logger.warning("Duplicate route %s used by %d posts", route, count)

    return tuple(sorted(entries, key=lambda e: e.date, reverse=True))
