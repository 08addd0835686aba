"""Tests for errkit.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from errkit.core.config import (
    Config,
    ConfigError,
    GroupingConfig,
    RenderConfig,
    WalkerConfig,
    load_config,
    load_config_or_default,
)
from errkit.core.result import Err, Ok


class TestDefaults:
    def test_walker(self) -> None:
        assert WalkerConfig().max_depth == 256

    def test_render(self) -> None:
        config = RenderConfig()
        assert config.indent == "   "
        assert config.connector == "└─ "

    def test_grouping(self) -> None:
        config = GroupingConfig()
        assert config.id_length == 6
        assert config.algorithm == "sha256"
        assert config.separator == "|"

    def test_frozen(self) -> None:
        config = GroupingConfig()
        with pytest.raises(AttributeError):
            config.id_length = 8  # type: ignore[misc]


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_partial_tables(self) -> None:
        config = Config.from_dict({"grouping": {"id_length": 8}, "walker": {"max_depth": 10}})
        assert config.grouping.id_length == 8
        assert config.grouping.algorithm == "sha256"
        assert config.walker.max_depth == 10
        assert config.render == RenderConfig()

    def test_whitespace_is_kept_for_glyphs(self) -> None:
        config = Config.from_dict({"render": {"indent": "  ", "connector": "+- "}})
        assert config.render.indent == "  "
        assert config.render.connector == "+- "

    def test_algorithm_is_lowercased(self) -> None:
        config = Config.from_dict({"grouping": {"algorithm": "SHA1"}})
        assert config.grouping.algorithm == "sha1"

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict({"grouping": {"id_length": "eight"}, "walker": {"max_depth": True}})
        assert config.grouping.id_length == 6
        assert config.walker.max_depth == 256

    def test_unknown_algorithm_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown hash algorithm"):
            Config.from_dict({"grouping": {"algorithm": "nope"}})

    def test_variable_length_algorithm_rejected(self) -> None:
        with pytest.raises(ValueError, match="variable-length"):
            Config.from_dict({"grouping": {"algorithm": "shake_128"}})

    def test_id_length_bounds(self) -> None:
        with pytest.raises(ValueError, match="id_length"):
            Config.from_dict({"grouping": {"id_length": 0}})
        with pytest.raises(ValueError, match="id_length"):
            Config.from_dict({"grouping": {"id_length": 65}})
        assert Config.from_dict({"grouping": {"id_length": 64}}).grouping.id_length == 64

    def test_max_depth_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            Config.from_dict({"walker": {"max_depth": 0}})

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="grouping.separator"):
            Config.from_dict({"grouping": {"separator": ""}})


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "errkit.toml"
        path.write_text('[grouping]\nid_length = 10\nseparator = " > "\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.grouping.id_length == 10
        assert result.value.grouping.separator == " > "

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == path

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "errkit.toml"
        path.write_text("[grouping\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "errkit.toml"
        path.write_text('[grouping]\nalgorithm = "crc-nothing"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert result.error == ConfigError(
            "Invalid config: unknown hash algorithm: crc-nothing", path=path
        )

    def test_or_default(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Config()
