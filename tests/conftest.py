"""Shared test fixtures for the pricebook test suite."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

FROZEN_NOW = datetime(2023, 3, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(
    test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Callable[[dict[str, str]], Path]:
    """Factory fixture that writes TOML files and points the loader at them.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> Path:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)
        monkeypatch.setenv("PRICEBOOK_CONFIG_DIR", str(test_config_dir))
        return test_config_dir

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from pricebook.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def frozen_now() -> datetime:
    return FROZEN_NOW


@pytest.fixture
def clock(frozen_now: datetime) -> Callable[[], datetime]:
    """Clock that always reports the same instant."""
    return lambda: frozen_now


@pytest.fixture
def base_record() -> dict[str, Any]:
    """A valid record as stored before any update."""
    return {
        "id": "rec123",
        "name": "Original Product",
        "price": 50.00,
        "tags": ["old", "product"],
        "createdAt": datetime(2023, 1, 1, tzinfo=UTC),
        "updatedAt": datetime(2023, 1, 1, tzinfo=UTC),
    }
