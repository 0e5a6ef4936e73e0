"""Configuration management for Recess."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

RECESS_HOME = Path(os.environ.get("RECESS_HOME", Path.home() / ".recess"))
CONFIG_FILE = RECESS_HOME / "config" / "recess.conf"
DATA_DIR = RECESS_HOME / "data"


@dataclass
class Config:
    """Recess configuration."""

    blocks_file: str = ""
    # Language service settings
    llm_provider: str = "grok"
    llm_api_key: str = ""
    llm_api_url: str = "https://api.x.ai/v1/chat/completions"
    llm_model: str = "grok-3-mini"
    llm_timeout: float = 8.0
    llm_failure_cooldown: float = 60.0

    @property
    def blocks_path(self) -> Path:
        if self.blocks_file:
            return Path(self.blocks_file).expanduser()
        return DATA_DIR / "blocks.json"


def _parse_seconds(key: str, value: str, default: float) -> float:
    try:
        seconds = float(value)
    except ValueError:
        logger.warning(f"Invalid {key.upper()} value {value!r}, using {default}")
        return default
    if seconds <= 0:
        logger.warning(f"{key.upper()} must be positive, using {default}")
        return default
    return seconds


def load_config(path: Path | None = None) -> Config:
    """Load configuration from recess.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = value.strip()

            # Handle quoted values with inline comments: "value" # comment
            if value[:1] in ('"', "'"):
                quote = value[0]
                end_quote = value.find(quote, 1)
                value = value[1:end_quote] if end_quote != -1 else value[1:]
            elif "#" in value:
                value = value.split("#")[0].strip()

            match key:
                case "blocks_file":
                    config.blocks_file = value
                case "llm_provider":
                    config.llm_provider = value.lower()
                case "llm_api_key":
                    config.llm_api_key = value
                case "llm_api_url":
                    config.llm_api_url = value
                case "llm_model":
                    config.llm_model = value
                case "llm_timeout":
                    config.llm_timeout = _parse_seconds(key, value, config.llm_timeout)
                case "llm_failure_cooldown":
                    config.llm_failure_cooldown = _parse_seconds(key, value, config.llm_failure_cooldown)
                case _:
                    logger.warning(f"Unknown config key: {key}")

    if not config.llm_api_key:
        config.llm_api_key = os.environ.get("GROK_API_KEY", "")

    return config
