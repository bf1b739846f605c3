from pathlib import Path

import pytest

from threadline.config import Config
from threadline.config.config import parse_bool
from threadline.exceptions import ConfigError


@pytest.mark.parametrize("value,expected", [
    ("true", True), ("1", True), ("YES", True), (" on ", True),
    ("false", False), ("0", False), ("no", False), ("", False),
])
def test_parse_bool(value, expected):
    assert parse_bool("X", value) is expected


def test_parse_bool_rejects_garbage():
    with pytest.raises(ConfigError, match="X must be a boolean"):
        parse_bool("X", "maybe")


def test_defaults(monkeypatch):
    for key in ("THREADLINE_REMOVE_CODE_BLOCKS", "THREADLINE_OUTPUT_DIR", "THREADLINE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    config = Config()

    assert config.remove_code_blocks is False
    assert config.default_output_dir == Path("output")
    assert config.log_level == "INFO"
    assert config.preprocess_config().remove_code_blocks is False
    assert config.validate()


def test_invalid_values_reported(monkeypatch):
    monkeypatch.setenv("THREADLINE_REMOVE_CODE_BLOCKS", "sometimes")
    monkeypatch.setenv("THREADLINE_LOG_LEVEL", "LOUD")
    config = Config()

    assert not config.validate()
    assert config.get_invalid_config() == ["THREADLINE_REMOVE_CODE_BLOCKS", "THREADLINE_LOG_LEVEL"]
