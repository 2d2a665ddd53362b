"""Root test configuration: isolate each test from the project directory and environment"""

import pytest

from blogindex.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from tmp_path with no BLOGINDEX_* env vars, so config.yaml and env never leak in."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"BLOGINDEX_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="write_post")
def write_post_fixture(tmp_path):
    """Return a helper that writes a markdown post under tmp_path/posts and returns its path."""
    root = tmp_path / "posts"

    def _write(name: str, text: str):
        p = root / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    return _write
