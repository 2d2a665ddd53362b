"""Unit tests for core/index.py"""

import logging

import pytest

from blogindex.core.index import MissingFieldError, build_index, resolve_entry
from blogindex.core.models import ArticleEntry, FieldDefaults


# --- resolve_entry ---

def test_resolve_entry_defaults(make_doc):
    """author and tags fall back to FieldDefaults when absent."""
    entry = resolve_entry(make_doc("/a", title="T", description="D", date="2024-01-15"))
    assert entry == ArticleEntry(path="/a", author="Preetam", date="2024-01-15", title="T", description="D")
    assert entry.tags == ()


def test_resolve_entry_explicit_fields(make_doc):
    """Explicit author and tags are carried through in order."""
    doc = make_doc("/a", title="T", description="D", date="2024-01-15", author="Jane", tags=["b", "a"])
    entry = resolve_entry(doc)
    assert entry.author == "Jane"
    assert entry.tags == ("b", "a")


def test_resolve_entry_custom_defaults(make_doc):
    """A FieldDefaults record supplies the fallbacks."""
    defaults = FieldDefaults(author="Guest", tags=("misc",))
    entry = resolve_entry(make_doc("/a", title="T", description="D", date="2024"), defaults)
    assert entry.author == "Guest"
    assert entry.tags == ("misc",)


def test_resolve_entry_multi_valued_author_uses_default(make_doc):
    """A multi-valued author is not single-valued, so the default applies."""
    doc = make_doc("/a", title="T", description="D", date="2024", author=["A", "B"])
    assert resolve_entry(doc).author == "Preetam"


@pytest.mark.parametrize("field", ["title", "description", "date"])
def test_resolve_entry_missing_required(make_doc, field):
    """Each required field must be present."""
    fields = {"title": "T", "description": "D", "date": "2024-01-15"}
    del fields[field]
    with pytest.raises(MissingFieldError, match=f"'{field}' missing") as exc:
        resolve_entry(make_doc("/x", **fields))
    assert exc.value.field == field
    assert exc.value.count == 0


@pytest.mark.parametrize("field", ["title", "description", "date"])
def test_resolve_entry_multi_valued_required(make_doc, field):
    """Required fields with more than one value are rejected, not merged."""
    fields = {"title": "T", "description": "D", "date": "2024-01-15", field: ["one", "two"]}
    with pytest.raises(MissingFieldError, match="has 2 values"):
        resolve_entry(make_doc("/x", **fields))


def test_resolve_entry_empty_value_list(make_doc):
    """A key present with zero values counts as missing."""
    with pytest.raises(MissingFieldError):
        resolve_entry(make_doc("/x", title=[], description="D", date="2024"))


def test_missing_field_error_is_value_error():
    assert issubclass(MissingFieldError, ValueError)


# --- build_index ---

def test_build_index_scenario(docs):
    """Newest date first; tags default to empty; author defaults to the fallback."""
    entries = build_index(docs)
    assert [e.path for e in entries] == ["/b", "/a"]
    assert entries[0].date == "2024-01-20"
    assert entries[0].tags == ("x", "y")
    assert entries[1].tags == ()
    assert {e.author for e in entries} == {"Preetam"}


def test_build_index_returns_tuple(docs):
    """The index is an immutable tuple."""
    assert isinstance(build_index(docs), tuple)


def test_build_index_skips_invalid_and_continues(make_doc, caplog):
    """A document without title is excluded and logged; the rest still build."""
    docs = [
        make_doc("/no-title", description="D", date="2024-02-01"),
        make_doc("/ok", title="T", description="D", date="2024-01-01"),
    ]
    with caplog.at_level(logging.WARNING, logger="blogindex"):
        entries = build_index(docs)
    assert [e.path for e in entries] == ["/ok"]
    assert "/no-title" in caplog.text
    assert "'title' missing" in caplog.text


def test_build_index_sorted_descending(make_doc):
    """Adjacent entries satisfy a.date >= b.date as strings."""
    dates = ["2023-12-31", "2024-06-01", "2024-01-15", "2022-01-01", "2024-06-01"]
    docs = [make_doc(f"/{i}", title="T", description="D", date=d) for i, d in enumerate(dates)]
    entries = build_index(docs)
    assert all(a.date >= b.date for a, b in zip(entries, entries[1:]))


def test_build_index_ties_keep_input_order(make_doc):
    """Equal dates keep their input order."""
    docs = [make_doc(f"/{i}", title="T", description="D", date="2024-01-01") for i in range(3)]
    assert [e.path for e in build_index(docs)] == ["/0", "/1", "/2"]


def test_build_index_plain_string_ordering(make_doc):
    """Dates are compared as strings, not calendar values."""
    docs = [
        make_doc("/a", title="T", description="D", date="9/1/2024"),
        make_doc("/b", title="T", description="D", date="10/1/2024"),
    ]
    assert [e.path for e in build_index(docs)] == ["/a", "/b"]


def test_build_index_duplicate_routes_kept(make_doc, caplog):
    """Duplicate routes are emitted as-is with a warning."""
    docs = [
        make_doc("/same", title="A", description="D", date="2024-01-02"),
        make_doc("/same", title="B", description="D", date="2024-01-01"),
    ]
    with caplog.at_level(logging.WARNING, logger="blogindex"):
        entries = build_index(docs)
    assert [e.title for e in entries] == ["A", "B"]
    assert "Duplicate route /same" in caplog.text


def test_build_index_empty():
    assert build_index([]) == ()


def test_build_index_is_deterministic(docs):
    """Unchanged input gives an identical index."""
    assert build_index(docs) == build_index(list(docs))
