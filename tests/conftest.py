"""Shared test fixtures."""

from __future__ import annotations

import pytest

MB = 1024 * 1024


@pytest.fixture
def isolate_config(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty temp directory."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "sizr" / "settings.json"


@pytest.fixture
def sample_tree(tmp_path):
    """A small tree with known sizes.

    root/
      big.bin            3000
      docs/
        a.txt            100
        b.txt            100
        deep/
          c.txt          50
      empty/
    """
    root = tmp_path / "tree"
    (root / "docs" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "big.bin").write_bytes(b"x" * 3000)
    (root / "docs" / "a.txt").write_bytes(b"a" * 100)
    (root / "docs" / "b.txt").write_bytes(b"b" * 100)
    (root / "docs" / "deep" / "c.txt").write_bytes(b"c" * 50)
    return root
