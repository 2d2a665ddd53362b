"""Shared fixtures for core unit tests"""

import pytest

from blogindex.core.models import MarkdownDocument


SAMPLE_FM_MD = """\
---
title: Compose Multiplatform Tips
description: Small things that save time
date: 2024-03-02
author: Jane Doe
tags: [kotlin, compose]
---

# Compose Multiplatform Tips

Body content.
"""


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Return a builder for in-memory documents; a str field becomes one value, a list is kept."""
    def _make(route: str, **fields) -> MarkdownDocument:
        fm = {k: (v if isinstance(v, list) else [v]) for k, v in fields.items()}
        return MarkdownDocument(route=route, frontmatter=fm)
    return _make


@pytest.fixture(name="docs")
def docs_fixture(make_doc):
    return [
        make_doc("/a", title="T1", description="D1", date="2024-01-15"),
        make_doc("/b", title="T2", description="D2", date="2024-01-20", tags=["x", "y"]),
    ]


@pytest.fixture(name="sample_post")
def sample_post_fixture(tmp_path):
    p = tmp_path / "CmpTips.md"
    p.write_text(SAMPLE_FM_MD, encoding="utf-8")
    return p
