"""Unit tests for snipman.config."""

from pathlib import Path

import pytest

from snipman.config import get_settings

ENV_VARS = (
    "SNIPMAN_DATA_DIR",
    "SNIPMAN_FILENAME",
    "SNIPMAN_PROGRESS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, clean_env) -> None:
        s = get_settings()
        assert s.SNIPMAN_DATA_DIR == Path("data")
        assert s.SNIPMAN_FILENAME == "items.txt"
        assert s.SNIPMAN_PROGRESS is False

    def test_values_are_stripped(self, clean_env) -> None:
        clean_env.setenv("SNIPMAN_DATA_DIR", "  snippets/dir  ")
        clean_env.setenv("SNIPMAN_FILENAME", " s.txt ")
        s = get_settings()
        assert s.SNIPMAN_DATA_DIR == Path("snippets/dir")
        assert s.SNIPMAN_FILENAME == "s.txt"

    def test_blank_data_dir_uses_default(self, clean_env) -> None:
        clean_env.setenv("SNIPMAN_DATA_DIR", "")
        assert get_settings().SNIPMAN_DATA_DIR == Path("data")

    @pytest.mark.parametrize("raw,expected", [("1", True), (" Yes ", True), ("0", False), ("", False)])
    def test_progress(self, clean_env, raw: str, expected: bool) -> None:
        clean_env.setenv("SNIPMAN_PROGRESS", raw)
        assert get_settings().SNIPMAN_PROGRESS is expected
