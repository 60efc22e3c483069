"""
Configuration for Lead Watch.

Holds the process-wide constants (results source, Telegram API base URL,
tracked candidate) and loads the bot credentials from a JSON file.
"""

import json
import logging
import os
from typing import Any, Dict

from leadwatch.errors import ConfigError
from leadwatch.models import BotConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_SNAPSHOT_PATH = "old.json"
DEFAULT_TIMEOUT = 10

# Env Vars
SOURCE_URL: str = os.environ.get(
    "LEADWATCH_SOURCE_URL",
    "https://e22c.gmanetwork.com/n/PRESIDENT_PHILIPPINES.json",
)
REFERER: str = "https://www.gmanetwork.com/"
TELEGRAM_API_URL: str = os.environ.get(
    "LEADWATCH_TELEGRAM_API_URL", "https://api.telegram.org"
)
TARGET_CANDIDATE: str = os.environ.get("LEADWATCH_TARGET", "ROBREDO, LENI (IND)")


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> BotConfig:
    """Loads the bot token and recipient chat id from a JSON file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data: Any = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found at {config_path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    config = BotConfig(
        bot_id=_required_str(data, "bot_id", config_path),
        recipient=_required_str(data, "recipient", config_path),
    )
    logger.debug("Loaded bot config from %s.", config_path)
    return config


def _required_str(data: Dict[str, Any], key: str, config_path: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Config file {config_path} is missing '{key}'")
    return value
