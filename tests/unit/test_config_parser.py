"""
Unit tests for configuration parser.

Tests the YAML configuration parsing, validation, discovery and error
handling functionality of the ConfigParser class.
"""

import pytest
import tempfile
import shutil
import os
import yaml
from pathlib import Path
from unittest.mock import patch

from dirlist.config.parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config,
    create_config_template
)
from dirlist.models.config import BrowserConfig, LogLevel


class TestConfigParser:
    """Test cases for ConfigParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_root = Path(self.temp_dir)

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _write(self, name: str, content: str) -> Path:
        path = self.test_root / name
        path.write_text(content, encoding='utf-8')
        return path

    def test_init_default(self):
        """Test default initialization."""
        parser = ConfigParser()
        assert parser.strict_mode is False
        assert parser.DEFAULT_CONFIG_NAMES == [
            '.dirlist.yaml',
            '.dirlist.yml',
            'dirlist.yaml',
            'dirlist.yml'
        ]

    def test_load_config_with_valid_file(self):
        """Test loading configuration from valid YAML file."""
        config_path = self._write("config.yaml", yaml.dump({
            'listing': {'folders_only': True, 'max_results': 25},
            'logging': {'level': 'debug'},
        }))

        result = ConfigParser().load_config(config_path)

        assert isinstance(result, ConfigParseResult)
        assert isinstance(result.config, BrowserConfig)
        assert result.config_path == config_path
        assert result.is_default is False
        assert result.config.listing.folders_only is True
        assert result.config.listing.max_results == 25
        assert result.config.logging.level is LogLevel.DEBUG

    def test_load_config_file_not_found(self):
        """Test loading configuration from non-existent file."""
        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            ConfigParser().load_config(self.test_root / "nope.yaml")

    def test_load_config_invalid_yaml(self):
        """Test loading configuration with invalid YAML syntax."""
        config_path = self._write("bad.yaml", "listing: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML syntax"):
            ConfigParser().load_config(config_path)

    def test_load_config_not_a_mapping(self):
        """Test that the top level must be a YAML object."""
        config_path = self._write("list.yaml", "- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a YAML object"):
            ConfigParser().load_config(config_path)

    def test_load_config_empty_file(self):
        """Test that an empty file yields default settings."""
        config_path = self._write("empty.yaml", "   \n")

        result = ConfigParser().load_config(config_path)

        assert result.config == BrowserConfig()
        assert result.is_default is False

    def test_load_config_invalid_values(self):
        """Test that validation errors become ConfigurationError."""
        config_path = self._write("invalid.yaml", yaml.dump({'listing': {'max_results': 0}}))

        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            ConfigParser().load_config(config_path)

    def test_load_config_unknown_section(self):
        """Test that unknown top-level sections are rejected."""
        config_path = self._write("extra.yaml", yaml.dump({'vector_db': {'backend': 'x'}}))

        with pytest.raises(ConfigurationError, match="Unknown configuration sections: vector_db"):
            ConfigParser().load_config(config_path)

    def test_strict_mode_turns_warnings_into_errors(self):
        """Test that strict mode rejects configurations with warnings."""
        config_path = self._write("warn.yaml", yaml.dump({
            'sidebar': {'extra': [{'name': 'Gone', 'path': str(self.test_root / 'missing')}]},
        }))

        result = ConfigParser().load_config(config_path)
        assert len(result.warnings) == 1

        with pytest.raises(ConfigurationError, match="strict mode"):
            ConfigParser(strict_mode=True).load_config(config_path)

    def test_discovery_finds_config_file(self):
        """Test that default names are searched for."""
        self._write(".dirlist.yaml", yaml.dump({'listing': {'max_results': 7}}))
        parser = ConfigParser()

        with patch.object(parser, 'get_search_paths', return_value=[self.test_root]):
            result = parser.load_config()

        assert result.config_path == self.test_root / ".dirlist.yaml"
        assert result.is_default is False
        assert result.config.listing.max_results == 7

    def test_discovery_skips_broken_files(self):
        """Test that an unreadable candidate falls through to the next one."""
        self._write(".dirlist.yaml", "listing: [unclosed\n")
        self._write("dirlist.yml", yaml.dump({'logging': {'level': 'ERROR'}}))
        parser = ConfigParser()

        with patch.object(parser, 'get_search_paths', return_value=[self.test_root]):
            result = parser.load_config()

        assert result.config_path == self.test_root / "dirlist.yml"
        assert result.config.logging.level is LogLevel.ERROR

    def test_discovery_falls_back_to_defaults(self):
        """Test defaults when no configuration file exists."""
        parser = ConfigParser()

        with patch.object(parser, 'get_search_paths', return_value=[self.test_root]):
            result = parser.load_config()

        assert result.is_default is True
        assert result.config_path is None
        assert result.config == BrowserConfig()
        assert "No configuration file found, using default settings" in result.warnings

    def test_save_config(self):
        """Test that a saved configuration loads back unchanged."""
        config = BrowserConfig.from_dict({
            'listing': {'max_results': 3},
            'sidebar': {'home': self.temp_dir, 'include_optional': False},
        })
        output_path = self.test_root / "nested" / "saved.yaml"

        ConfigParser().save_config(config, output_path)

        content = output_path.read_text(encoding='utf-8')
        assert content.startswith("# dirlist configuration")
        assert "# Sidebar locations" in content
        assert ConfigParser().load_config(output_path).config == config

    def test_config_template_is_valid(self):
        """Test that the template parses and validates."""
        template = ConfigParser().get_config_template()
        data = yaml.safe_load(template)

        config = BrowserConfig.from_dict(data)

        assert config.listing.max_results == 200
        assert config.sidebar.extra[0].name == "Projects"


class TestConvenienceFunctions:
    """Test cases for module-level helpers."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_create_config_template(self):
        """Test writing the template to disk."""
        output_path = Path(self.temp_dir) / "sub" / "dirlist.yaml"

        create_config_template(output_path)

        assert output_path.exists()
        result = load_config(output_path)
        assert result.config.listing.max_results == 200

    def test_load_config_strict(self):
        """Test the strict_mode pass-through."""
        output_path = Path(self.temp_dir) / "dirlist.yaml"
        output_path.write_text(yaml.dump({'sidebar': {'home': str(Path(self.temp_dir) / 'none')}}))

        with pytest.raises(ConfigurationError):
            load_config(output_path, strict_mode=True)
