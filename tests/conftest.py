from __future__ import annotations

from pathlib import Path

import pytest

from rmlIngest.config import CONFIG_ENV, SEARCH_PATH_ENV

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from leaking into configuration."""

    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(SEARCH_PATH_ENV, raising=False)


@pytest.fixture
def mappings_dir() -> Path:
    return FIXTURES / "mappings"


@pytest.fixture
def quiet_config(tmp_path: Path) -> Path:
    """A configuration file that turns JSON events off."""

    path = tmp_path / "quiet.yml"
    path.write_text("logging:\n  json_events: false\n", encoding="utf-8")
    return path
