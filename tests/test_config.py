"""Tests for configuration file support."""

import sys
import warnings

import pytest

from sexp_engine.config import (
    Config,
    DefaultsConfig,
    ParserConfig,
    _find_project_config,
    _load_toml_file,
    generate_template,
    get_config_paths,
)
from sexp_engine.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class TestConfigDataclasses:
    """Test configuration dataclass defaults."""

    def test_defaults_config_defaults(self):
        """DefaultsConfig has correct defaults."""
        config = DefaultsConfig()
        assert config.verbose is False
        assert config.quiet is False

    def test_parser_config_defaults(self):
        """Parser is strict by default."""
        assert ParserConfig().strict is True

    def test_config_defaults(self):
        """Config has correct nested defaults."""
        config = Config()
        assert isinstance(config.defaults, DefaultsConfig)
        assert isinstance(config.parser, ParserConfig)


class TestConfigDiscovery:
    """Test config file discovery."""

    def test_find_project_config_in_current_dir(self, tmp_path):
        """Find config in current directory."""
        config_file = tmp_path / ".sexp-engine.toml"
        config_file.write_text("[parser]\nstrict = false\n")

        assert _find_project_config(tmp_path) == config_file.resolve()

    def test_find_project_config_alternate_name(self, tmp_path):
        """Find non-hidden config name."""
        config_file = tmp_path / "sexp-engine.toml"
        config_file.write_text("[parser]\nstrict = false\n")

        assert _find_project_config(tmp_path) == config_file.resolve()

    def test_find_project_config_walks_up(self, tmp_path):
        """Find config in a parent directory."""
        config_file = tmp_path / ".sexp-engine.toml"
        config_file.write_text("")
        subdir = tmp_path / "a" / "b"
        subdir.mkdir(parents=True)

        assert _find_project_config(subdir) == config_file.resolve()

    def test_find_project_config_stops_at_git(self, tmp_path):
        """Stop searching at the repository root."""
        (tmp_path / ".sexp-engine.toml").write_text("")
        repo = tmp_path / "repo"
        (repo / ".git").mkdir(parents=True)

        assert _find_project_config(repo) is None


class TestLoadToml:
    """Test TOML file loading."""

    def test_load_valid_toml(self, tmp_path):
        """Load valid TOML file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[defaults]\nverbose = true\n")

        assert _load_toml_file(config_file) == {"defaults": {"verbose": True}}

    def test_load_invalid_toml(self, tmp_path):
        """Raise ConfigurationError on invalid TOML."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("invalid [ toml syntax")

        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            _load_toml_file(config_file)

    def test_load_missing_file(self, tmp_path):
        """Raise ConfigurationError on missing file."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            _load_toml_file(tmp_path / "nonexistent.toml")


class TestConfigLoad:
    """Test Config.load() method."""

    def test_load_defaults_only(self, isolated_config):
        """Load returns defaults when no config files exist."""
        config = Config.load(isolated_config)
        assert config.parser.strict is True
        assert config.defaults.verbose is False
        assert config.get_source("parser.strict") == "default"

    def test_load_project_config(self, isolated_config):
        """Load project config."""
        (isolated_config / ".sexp-engine.toml").write_text("[parser]\nstrict = false\n")

        config = Config.load(isolated_config)
        assert config.parser.strict is False
        assert ".sexp-engine.toml" in config.get_source("parser.strict")

    def test_project_overrides_user(self, isolated_config, monkeypatch):
        """Project config overrides user config."""
        user_config = isolated_config / "user-config.toml"
        user_config.write_text("[defaults]\nquiet = true\n\n[parser]\nstrict = false\n")
        monkeypatch.setattr("sexp_engine.config.USER_CONFIG_PATH", user_config)
        (isolated_config / ".sexp-engine.toml").write_text("[parser]\nstrict = true\n")

        config = Config.load(isolated_config)
        assert config.parser.strict is True
        assert config.defaults.quiet is True
        assert "user-config.toml" in config.get_source("defaults.quiet")

    def test_non_bool_value_raises(self, isolated_config):
        """Settings must be booleans."""
        (isolated_config / ".sexp-engine.toml").write_text('[parser]\nstrict = "yes"\n')

        with pytest.raises(ConfigurationError, match="must be true or false"):
            Config.load(isolated_config)


class TestConfigWarnings:
    """Test warnings for unknown config keys."""

    def test_warn_unknown_section(self, isolated_config):
        """Warn on unknown top-level section."""
        (isolated_config / ".sexp-engine.toml").write_text('[unknown_section]\nkey = "value"\n')

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            Config.load(isolated_config)

            assert len(w) == 1
            assert "unknown_section" in str(w[0].message)

    def test_warn_unknown_key_in_section(self, isolated_config):
        """Warn on unknown key within known section."""
        (isolated_config / ".sexp-engine.toml").write_text("[parser]\nescapes = true\n")

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            Config.load(isolated_config)

            assert len(w) == 1
            assert "parser.escapes" in str(w[0].message)


class TestGenerateTemplate:
    """Test template generation."""

    def test_generate_template_valid_toml(self):
        """Generated template is valid TOML."""
        data = tomllib.loads(generate_template())
        assert "defaults" in data
        assert "parser" in data

    def test_generate_template_documents_options(self):
        """Template mentions every option."""
        template = generate_template()
        for option in ("verbose", "quiet", "strict"):
            assert option in template


class TestGetConfigPaths:
    """Test get_config_paths()."""

    def test_returns_none_for_missing_files(self, isolated_config):
        """Missing files report None."""
        paths = get_config_paths()
        assert paths == {"user": None, "project": None}

    def test_returns_project_path(self, isolated_config):
        """An existing project config is reported."""
        config_file = isolated_config / ".sexp-engine.toml"
        config_file.write_text("")

        assert get_config_paths()["project"] == config_file.resolve()
