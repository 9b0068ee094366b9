"""Tests for avrflash settings loading."""

import pytest
import yaml

from avrflash.config.settings import (
    AvrflashSettings,
    get_config_search_paths,
    load_settings,
)
from avrflash.core.errors import ConfigError


class TestAvrflashSettings:
    """Tests for the settings model."""

    def test_defaults(self, isolated_env):
        settings = AvrflashSettings()

        assert settings.cargo == "cargo"
        assert settings.programmer == "avrdude"
        assert settings.metadata_key == "avrflash"
        assert settings.log_level == "WARNING"
        assert settings.effective_diagnostic_tool == "avrdude"
        assert settings.template_key_path == "package.metadata.avrflash.args"

    def test_diagnostic_tool_follows_programmer_name(self, isolated_env):
        settings = AvrflashSettings(programmer="/opt/avr/bin/avrdude.exe")

        assert settings.effective_diagnostic_tool == "avrdude"

    def test_explicit_diagnostic_tool(self, isolated_env):
        settings = AvrflashSettings(programmer="ravedude", diagnostic_tool="avrdude")

        assert settings.effective_diagnostic_tool == "avrdude"

    def test_log_level_is_normalized(self, isolated_env):
        assert AvrflashSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self, isolated_env):
        with pytest.raises(ValueError):
            AvrflashSettings(log_level="chatty")

    def test_environment_overrides_init(self, isolated_env, monkeypatch):
        monkeypatch.setenv("AVRFLASH_PROGRAMMER", "/usr/local/bin/avrdude")

        settings = AvrflashSettings(programmer="avrdude")

        assert settings.programmer == "/usr/local/bin/avrdude"


class TestLoadSettings:
    """Tests for finding and reading config files."""

    def test_no_config_file(self, isolated_env):
        settings = load_settings()

        assert settings.programmer == "avrdude"

    def test_current_directory_file(self, isolated_env):
        (isolated_env / "avrflash.yaml").write_text(
            yaml.dump({"programmer": "avrdude-7", "log_level": "info"})
        )

        settings = load_settings()

        assert settings.programmer == "avrdude-7"
        assert settings.log_level == "INFO"

    def test_xdg_config_file(self, isolated_env):
        config_dir = isolated_env / "xdg" / "avrflash"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("cargo: cross\n")

        assert load_settings().cargo == "cross"

    def test_cli_file_wins_over_current_directory(self, isolated_env):
        (isolated_env / "avrflash.yaml").write_text("programmer: from-cwd\n")
        cli_file = isolated_env / "custom.yaml"
        cli_file.write_text("programmer: from-cli\n")

        assert load_settings(cli_file).programmer == "from-cli"

    def test_environment_wins_over_file(self, isolated_env, monkeypatch):
        (isolated_env / "avrflash.yaml").write_text("programmer: from-file\n")
        monkeypatch.setenv("AVRFLASH_PROGRAMMER", "from-env")

        assert load_settings().programmer == "from-env"

    def test_empty_file_uses_defaults(self, isolated_env):
        (isolated_env / "avrflash.yaml").write_text("")

        assert load_settings().programmer == "avrdude"

    def test_missing_cli_file(self, isolated_env):
        with pytest.raises(ConfigError, match="config file not found"):
            load_settings(isolated_env / "missing.yaml")

    def test_invalid_yaml(self, isolated_env):
        (isolated_env / "avrflash.yaml").write_text("programmer: [unclosed\n")

        with pytest.raises(ConfigError, match="cannot read config file"):
            load_settings()

    def test_non_mapping_file(self, isolated_env):
        (isolated_env / "avrflash.yaml").write_text("- avrdude\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_settings()

    def test_unknown_key(self, isolated_env):
        (isolated_env / "avrflash.yaml").write_text("programer: typo\n")

        with pytest.raises(ConfigError, match="invalid avrflash configuration"):
            load_settings()

    def test_search_paths(self, isolated_env):
        root = isolated_env.resolve()

        paths = get_config_search_paths("custom.yaml")

        assert paths == [
            root / "custom.yaml",
            root / "avrflash.yaml",
            isolated_env / "xdg" / "avrflash" / "config.yaml",
        ]
