from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure local "src/" takes precedence over any globally-installed "luxconst" package.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep catalog/.env lookups from leaking in from the developer's shell or cwd."""
    from luxconst.env import reset_dotenv_state

    monkeypatch.delenv("LUXCONST_NETWORKS_PATH", raising=False)
    monkeypatch.setenv("LUXCONST_DOTENV_PATH", str(tmp_path / "missing.env"))
    reset_dotenv_state()
    yield
    # .env loading writes os.environ directly, outside monkeypatch.
    os.environ.pop("LUXCONST_NETWORKS_PATH", None)
    reset_dotenv_state()
