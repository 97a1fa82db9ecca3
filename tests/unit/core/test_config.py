"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
from filecontents.core.config import (
    DEFAULT_EXTENSIONS,
    AppConfig,
    ConfigError,
    ConfigParseError,
    DefaultsConfig,
    load_config,
)
from filecontents.models.selection import GitMode, OutputMode


class TestDefaultsConfig:
    """Tests for DefaultsConfig model."""

    def test_default_values(self) -> None:
        """Defaults mirror the CLI defaults."""
        defaults = DefaultsConfig()

        assert defaults.folder == Path(".")
        assert defaults.recursive is False
        assert defaults.output == OutputMode.CLIPBOARD
        assert defaults.extensions == list(DEFAULT_EXTENSIONS)
        assert defaults.git == GitMode.NONE

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValueError):
            DefaultsConfig.model_validate({"colour": "red"})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing config file yields built-in defaults."""
        config = load_config(tmp_path / "config.toml")

        assert config == AppConfig()

    def test_default_path_under_xdg(self, isolated_config_home: Path) -> None:
        """Without a path, the XDG config location is read."""
        config_dir = isolated_config_home / "file-contents"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text(
            '[defaults]\nextensions = ["py"]\n', encoding="utf-8"
        )

        config = load_config()

        assert config.defaults.extensions == ["py"]

    def test_loads_defaults_section(self, tmp_path: Path) -> None:
        """All default fields are read from the file."""
        path = tmp_path / "config.toml"
        path.write_text(
            "[defaults]\n"
            'folder = "src"\n'
            "recursive = true\n"
            'output = "console"\n'
            'extensions = ["py", "toml"]\n'
            'git = "changed"\n',
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.defaults.folder == Path("src")
        assert config.defaults.recursive is True
        assert config.defaults.output == OutputMode.CONSOLE
        assert config.defaults.extensions == ["py", "toml"]
        assert config.defaults.git == GitMode.CHANGED

    def test_empty_extensions_allowed(self, tmp_path: Path) -> None:
        """An empty extension list is kept (meaning all files)."""
        path = tmp_path / "config.toml"
        path.write_text("[defaults]\nextensions = []\n", encoding="utf-8")

        assert load_config(path).defaults.extensions == []

    def test_colors_section(self, tmp_path: Path) -> None:
        """The colors table is passed through unvalidated."""
        path = tmp_path / "config.toml"
        path.write_text('[colors]\ninfo = "#123456"\n', encoding="utf-8")

        assert load_config(path).colors == {"info": "#123456"}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("[defaults\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Invalid TOML syntax"):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Values outside the schema raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('[defaults]\ngit = "sometimes"\n', encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_unknown_section(self, tmp_path: Path) -> None:
        """Unknown top-level tables raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("[extras]\nx = 1\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)
