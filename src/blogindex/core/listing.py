"""Plain-text rendition of the home page article list"""

from blogindex.core.models import ArticleEntry


EMPTY_MESSAGE = "No posts available yet."


def format_listing(entries: tuple[ArticleEntry, ...]) -> list[str]:
    """Return display lines for entries in order: title and route, date • author, description, tags."""
    if not entries:
        return [EMPTY_MESSAGE]
    lines = []
    for entry in entries:
        if lines:
            lines.append("")
        lines.append(f"{entry.title} ({entry.path})")
        lines.append(f"  {entry.date} • {entry.author}")
        lines.append(f"  {entry.description}")
        if entry.tags:
            lines.append("  " + " ".join(f"#{tag}" for tag in entry.tags))
    return lines
