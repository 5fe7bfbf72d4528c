"""Tests for configuration loading."""

import pytest

from eventstatus.config import DATA_DIR, Config, load_config


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "eventstatus.conf"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")

        assert config == Config()
        assert config.timezone == "UTC"
        assert config.log_level == "WARNING"

    def test_parses_keys(self, config_file):
        config_file.write_text(
            "# eventstatus settings\n"
            "EVENTS_FILE=/srv/events.json\n"
            "TIMEZONE=America/Toronto\n"
            "LOG_LEVEL=debug\n"
        )

        config = load_config(config_file)

        assert config.events_file == "/srv/events.json"
        assert config.timezone == "America/Toronto"
        assert config.log_level == "DEBUG"

    def test_quoted_values_with_comments(self, config_file):
        config_file.write_text(
            'EVENTS_FILE="/srv/my events.json" # shared file\n'
            "TIMEZONE='Europe/Paris'\n"
        )

        config = load_config(config_file)

        assert config.events_file == "/srv/my events.json"
        assert config.timezone == "Europe/Paris"

    def test_unquoted_inline_comment(self, config_file):
        config_file.write_text("TIMEZONE=Asia/Tokyo # office\n")

        assert load_config(config_file).timezone == "Asia/Tokyo"

    def test_ignores_unknown_and_malformed_lines(self, config_file):
        config_file.write_text("SOMETHING_ELSE=1\nnot a setting\n\n")

        assert load_config(config_file) == Config()

    def test_unknown_log_level_keeps_default(self, config_file, caplog):
        config_file.write_text("LOG_LEVEL=loud\n")

        config = load_config(config_file)

        assert config.log_level == "WARNING"
        assert "Ignoring unknown LOG_LEVEL" in caplog.text


class TestEventsPath:
    def test_expands_user_path(self):
        config = Config(events_file="~/events.json")
        assert "~" not in str(config.events_path)

    def test_falls_back_to_data_dir(self):
        assert Config().events_path == DATA_DIR / "events.json"
