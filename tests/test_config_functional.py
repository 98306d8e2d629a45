"""Functional tests for Config - testing actual configuration behavior."""

import os
from pathlib import Path
from unittest.mock import patch

from janet_card_generator.config import Settings
from janet_card_generator.core import CardGenerator


class TestConfigFunctionality:
    """Test that Settings actually loads and manages settings correctly."""

    def test_config_uses_defaults_when_env_not_set(self, tmp_path, monkeypatch):
        """Test that defaults work when environment is empty."""
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            config = Settings()

            assert config.output_dir == Path("generated_cards")
            assert config.file_extension == ".janet"
            assert config.templates_file is None
            assert config.debug is False
            assert config.log_level == "INFO"

    def test_config_loads_from_environment_variables(self, tmp_path, monkeypatch):
        """Test that config reads prefixed environment variables."""
        monkeypatch.chdir(tmp_path)

        with patch.dict(
            os.environ,
            {
                "JANET_CARDS_OUTPUT_DIR": "out/cards",
                "JANET_CARDS_FILE_EXTENSION": ".jdn",
                "JANET_CARDS_TEMPLATES_FILE": "extra.yaml",
            },
        ):
            config = Settings()

            assert config.output_dir == Path("out/cards")
            assert config.file_extension == ".jdn"
            assert config.templates_file == Path("extra.yaml")

    def test_config_loads_from_env_file(self, tmp_path, monkeypatch):
        """Test that a .env file in the working directory is read."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(
            "JANET_CARDS_DEBUG=true\nJANET_CARDS_LOG_LEVEL=DEBUG\n", encoding="utf-8"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = Settings()

            assert config.debug is True
            assert config.log_level == "DEBUG"

    def test_config_does_not_create_directories(self, tmp_path, monkeypatch):
        """Test that building settings has no filesystem side effects."""
        monkeypatch.chdir(tmp_path)

        config = Settings()

        assert not (tmp_path / config.output_dir).exists()

    def test_config_case_insensitive(self, tmp_path, monkeypatch):
        """Test that environment variables are case insensitive."""
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {"janet_cards_debug": "true"}):
            config = Settings()
            assert config.debug is True

    def test_config_app_metadata_is_correct(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = Settings()

        assert config.app_name == "Janet Card Generator"
        assert config.app_version == "0.1.0"

    def test_generator_follows_settings(self, tmp_path, monkeypatch):
        """Test that the generator picks up configured output settings."""
        custom = Settings(output_dir=tmp_path / "cards", file_extension=".jdn")
        monkeypatch.setattr("janet_card_generator.core.settings", custom)

        path = CardGenerator().generate_card("Ice Knight", "basic_unit")

        assert path == tmp_path / "cards" / "ice_knight.jdn"
        assert path.exists()
