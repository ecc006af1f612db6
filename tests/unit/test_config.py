"""Unit tests for codec configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from heritage_xml.config import CodecConfig, ConfigLoader


class TestCodecConfig:
    """Test suite for CodecConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = CodecConfig()

        assert config.strict is False
        assert config.pretty_print is False
        assert config.indent == 2
        assert config.encoding == "UTF-8"
        assert config.xml_declaration is True
        assert config.lax_attribute_form is True

    def test_custom_config(self):
        """Test creating config with custom values."""
        config = CodecConfig(strict=True, pretty_print=True, indent=4, encoding="ISO-8859-1")

        assert config.strict is True
        assert config.pretty_print is True
        assert config.indent == 4
        assert config.encoding == "ISO-8859-1"

    def test_config_is_immutable(self):
        """Test that config is frozen and cannot be modified."""
        config = CodecConfig()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.strict = True

    def test_config_validation_indent(self):
        """Test validation of indent."""
        CodecConfig(indent=0)

        with pytest.raises(ValueError, match="indent must not be negative"):
            CodecConfig(indent=-1)

    def test_config_validation_encoding(self):
        """Test validation of encoding."""
        with pytest.raises(ValueError, match="encoding must not be empty"):
            CodecConfig(encoding="  ")

        with pytest.raises(ValueError, match="byte encoding"):
            CodecConfig(encoding="unicode")


class TestConfigFromEnv:
    """Test suite for environment overrides."""

    def test_defaults_without_env(self):
        assert CodecConfig.from_env() == CodecConfig()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("HERITAGE_XML_STRICT", "yes")
        monkeypatch.setenv("HERITAGE_XML_PRETTY_PRINT", "1")
        monkeypatch.setenv("HERITAGE_XML_INDENT", "4")
        monkeypatch.setenv("HERITAGE_XML_XML_DECLARATION", "off")
        monkeypatch.setenv("HERITAGE_XML_LAX_ATTRIBUTE_FORM", "false")

        config = CodecConfig.from_env()

        assert config.strict is True
        assert config.pretty_print is True
        assert config.indent == 4
        assert config.xml_declaration is False
        assert config.lax_attribute_form is False

    def test_blank_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("HERITAGE_XML_STRICT", "  ")

        assert CodecConfig.from_env().strict is False

    def test_invalid_boolean(self, monkeypatch):
        monkeypatch.setenv("HERITAGE_XML_STRICT", "maybe")

        with pytest.raises(ValueError, match="HERITAGE_XML_STRICT must be a boolean"):
            CodecConfig.from_env()


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_load_without_file(self, tmp_path: Path):
        """Test loading config when no TOML file exists."""
        config = ConfigLoader.load(tmp_path / "missing.toml")

        assert config == CodecConfig()

    def test_load_from_toml(self, tmp_path: Path):
        """Test loading config from a TOML file."""
        config_file = tmp_path / "heritage_xml.toml"
        config_file.write_text(
            "[marshal]\n"
            "pretty_print = true\n"
            "indent = 4\n"
            'encoding = "ISO-8859-1"\n'
            "xml_declaration = false\n"
            "\n"
            "[unmarshal]\n"
            'strict = "yes"\n'
            "lax_attribute_form = false\n",
            encoding="utf-8",
        )

        config = ConfigLoader.load(config_file)

        assert config.pretty_print is True
        assert config.indent == 4
        assert config.encoding == "ISO-8859-1"
        assert config.xml_declaration is False
        assert config.strict is True
        assert config.lax_attribute_form is False

    def test_toml_overrides_env(self, tmp_path: Path, monkeypatch):
        """Values in the file win over the environment; missing keys keep it."""
        monkeypatch.setenv("HERITAGE_XML_INDENT", "8")
        monkeypatch.setenv("HERITAGE_XML_STRICT", "true")
        config_file = tmp_path / "heritage_xml.toml"
        config_file.write_text("[marshal]\nindent = 3\n", encoding="utf-8")

        config = ConfigLoader.load(config_file)

        assert config.indent == 3
        assert config.strict is True

    def test_default_file_in_working_directory(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "heritage_xml.toml").write_text(
            "[unmarshal]\nstrict = true\n", encoding="utf-8"
        )

        assert ConfigLoader.load().strict is True

    def test_broken_toml_warns_and_keeps_defaults(self, tmp_path: Path):
        """Test that an unreadable file falls back with a warning."""
        config_file = tmp_path / "heritage_xml.toml"
        config_file.write_text("[marshal\npretty_print = ", encoding="utf-8")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file)

        assert config == CodecConfig()

    def test_invalid_value_warns(self, tmp_path: Path):
        config_file = tmp_path / "heritage_xml.toml"
        config_file.write_text("[marshal]\nindent = true\n", encoding="utf-8")

        with pytest.warns(UserWarning, match="marshal.indent must be an int"):
            config = ConfigLoader.load(config_file)

        assert config.indent == 2
