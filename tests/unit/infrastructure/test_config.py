"""Tests for infrastructure/config.py."""

from pathlib import Path

import pytest

from optargs.domain.exceptions.configuration import ConfigurationError
from optargs.domain.model.configuration import ExpansionConfig
from optargs.domain.model.enums import DispatchStrategy, OrderingMode
from optargs.infrastructure.config import config_from_mapping, load_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pyproject.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_pyproject_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == ExpansionConfig()

    def test_missing_section_gives_defaults(self, tmp_path: Path) -> None:
        _write(tmp_path, '[project]\nname = "demo"\n')
        assert load_config(tmp_path) == ExpansionConfig()

    def test_reads_section(self, tmp_path: Path) -> None:
        _write(
            tmp_path,
            "[tool.optargs]\nshuffle = true\nexport = false\nbuilder = true\n"
            "warn_threshold = 3\nmax_optional = 6\n",
        )
        config = load_config(tmp_path)
        assert config.ordering is OrderingMode.SHUFFLED
        assert config.export is False
        assert config.strategy is DispatchStrategy.BUILDER
        assert config.warn_threshold == 3
        assert config.max_optional == 6

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "optargs.toml"
        path.write_text("[tool.optargs]\nshuffle = true\n", encoding="utf-8")
        assert load_config(config_path=path).shuffled is True

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="file not found"):
            load_config(config_path=tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write(tmp_path, "[tool.optargs\n")
        with pytest.raises(ConfigurationError, match="invalid TOML"):
            load_config(tmp_path)

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        _write(tmp_path, '[tool]\noptargs = "fast"\n')
        with pytest.raises(ConfigurationError, match="must be a table"):
            load_config(tmp_path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.optargs]\nspeed = 1\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.source == path
        assert exc_info.value.key == "speed"


class TestConfigFromMapping:
    """Tests for config_from_mapping()."""

    def test_empty(self) -> None:
        assert config_from_mapping({}) == ExpansionConfig()

    def test_rename_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="only valid on a single declaration"):
            config_from_mapping({"rename": "make"})

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a boolean"):
            config_from_mapping({"shuffle": 1})

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigurationError, match="warn_threshold must be >= 1"):
            config_from_mapping({"warn_threshold": 0})
