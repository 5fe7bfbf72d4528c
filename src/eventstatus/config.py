"""Configuration management for eventstatus."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

EVENTSTATUS_HOME = Path(os.environ.get("EVENTSTATUS_HOME", Path.home() / "eventstatus"))
CONFIG_FILE = EVENTSTATUS_HOME / "config" / "eventstatus.conf"
DATA_DIR = EVENTSTATUS_HOME / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """eventstatus configuration."""

    events_file: str = ""
    timezone: str = "UTC"
    log_level: str = "WARNING"

    @property
    def events_path(self) -> Path:
        """Resolved events file, falling back to the data directory."""
        if self.events_file:
            return Path(self.events_file).expanduser()
        return DATA_DIR / "events.json"


def _strip_value(value: str) -> str:
    """Strip quotes, or inline comments on unquoted values."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from eventstatus.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "events_file":
                config.events_file = value
            case "timezone":
                config.timezone = value
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value}")

    return config
