"""Data models for the blog index: input documents, field defaults, and article entries"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


@dataclass
class MarkdownDocument:
    """A parsed post; frontmatter maps each key to one or more string values."""
    route:       str
    frontmatter: dict[str, list[str]] = field(default_factory=dict)
    body:        str = ""                # unused by the index builder
    path:        Optional[Path] = None   # None for documents built in memory


class FieldDefaults(BaseModel):
    """Fallback values for optional front-matter fields."""
    model_config = ConfigDict(frozen=True)

    author: str = "Preetam"
    tags:   tuple[str, ...] = ()


class ArticleEntry(BaseModel):
    """Normalized summary of one publishable post, as listed on the home page."""
    model_config = ConfigDict(frozen=True)

    path:        str
    author:      str
    date:        str               # verbatim; compared as a plain string
    title:       str
    description: str
    tags:        tuple[str, ...] = ()
