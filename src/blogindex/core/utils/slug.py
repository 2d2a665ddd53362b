"""Slug generation for post route segments"""

import re


_CAMEL_RE = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug; camelCase words are split."""
    text = _CAMEL_RE.sub('-', text.strip()).lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
