from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from devassets import server
from tests.workspace_helpers import make_generator as _make_generator


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    return tmp_path / "testRoot"


@pytest.fixture
def make_generator(workspace_root: Path):
    def _make(relative_project: str = "testApp.csproj", short_name: str = "netcoreapp1.0", **flags):
        return _make_generator(
            workspace_root,
            workspace_root / relative_project,
            short_name,
            **flags,
        )

    return _make


@pytest.fixture
def fresh_session():
    previous = server.session
    current = server.reset_session()
    try:
        yield current
    finally:
        server.session = previous
