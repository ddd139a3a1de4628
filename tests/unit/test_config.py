"""Unit tests for configuration helpers."""

from pathlib import Path

from laakhay.trade.config import (
    DATETIME_FORMAT,
    MIN_RAW_LENGTH,
    REFERENCE_DATA_ENV,
    get_reference_data_path,
)


def test_constants():
    """Test wire constants."""
    assert DATETIME_FORMAT == "%Y-%m-%d %H:%M:%S"
    assert MIN_RAW_LENGTH == 7


def test_reference_data_path_default(monkeypatch):
    """Test no override when the variable is unset or blank."""
    monkeypatch.delenv(REFERENCE_DATA_ENV, raising=False)
    assert get_reference_data_path() is None
    monkeypatch.setenv(REFERENCE_DATA_ENV, "   ")
    assert get_reference_data_path() is None


def test_reference_data_path_override(monkeypatch, tmp_path):
    """Test override path from the environment."""
    target = tmp_path / "ref.yml"
    monkeypatch.setenv(REFERENCE_DATA_ENV, str(target))
    assert get_reference_data_path() == Path(target)
