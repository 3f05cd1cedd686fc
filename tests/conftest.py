"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compoundfinder import config as cfg
from compoundfinder.schema import LengthIndex


@pytest.fixture(autouse=True)
def fallback_config(monkeypatch):
    """Run every test against the built-in defaults, not a local config.json."""
    monkeypatch.setattr(cfg, "_config", {"defaults": dict(cfg.FALLBACK_DEFAULTS)})


@pytest.fixture
def dog_vocabulary():
    """Vocabulary with a single compound."""
    return {"a", "b", "c", "dog", "dogabc"}


@pytest.fixture
def dog_index():
    """Index with one- and three-letter ingredients and one target word."""
    return LengthIndex(buckets={
        1: ["a", "b", "c"],
        3: ["dog"],
        6: ["dogabc"],
    })


@pytest.fixture
def sample_wordlist_content():
    """Sample plain text word list."""
    return """a
b
c
dog
dog
  dogabc

"""


@pytest.fixture
def wordlist_file(tmp_path, sample_wordlist_content):
    """Sample word list written to disk."""
    filepath = tmp_path / "words.txt"
    filepath.write_text(sample_wordlist_content, encoding="utf-8")
    return filepath
