"""
Configuration management for hf-models.

Handles the API token, the catalog endpoint, and CLI defaults.
Settings persist as JSON under ~/.config/hf_models/.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional

from .formatters import OUTPUT_FORMATS


# Default configuration file location
CONFIG_DIR = Path.home() / ".config" / "hf_models"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_API_URL = "https://huggingface.co/api/models"
TOKEN_ENV_VAR = "HF_TOKEN"


class ConfigManager:
    """
    Centralized configuration manager for hf-models.

    Manages:
    - Hugging Face API token (HF_TOKEN takes precedence)
    - Catalog API base URL
    - Default listing limit and output format

    Example:
        >>> config = ConfigManager()
        >>> config.set_token("hf_xxx")
        >>> config.get_token()
    """

    _instance: Optional["ConfigManager"] = None

    def __new__(cls) -> "ConfigManager":
        """Singleton pattern - ensure only one config manager exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.config: Dict[str, Any] = self._load_config()
        self._initialized = True

    def _default_config(self) -> Dict[str, Any]:
        """
        Return default configuration values.

        Returns:
            Default configuration dictionary
        """
        return {
            "token": "",
            "api_url": DEFAULT_API_URL,
            "default_limit": 20,
            "output_format": "table",
        }

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from disk, merging with defaults.

        Stored values whose type differs from the default are ignored.

        Returns:
            Configuration dictionary
        """
        if not CONFIG_FILE.exists():
            return self._default_config()

        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                return self._default_config()
            # User config takes precedence
            config = self._default_config()
            for key, value in user_config.items():
                if key not in config or self._valid_value(key, value, config[key]):
                    config[key] = value
            return config
        except (json.JSONDecodeError, IOError):
            return self._default_config()

    @staticmethod
    def _valid_value(key: str, value: Any, default: Any) -> bool:
        """Check a stored value has the same type as its default."""
        if type(value) is not type(default):
            return False
        if key == "output_format":
            return value in OUTPUT_FORMATS
        return True

    def save(self) -> None:
        """Save current configuration to disk."""
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(self.config, f, indent=4, ensure_ascii=False)

    def get_token(self) -> str:
        """
        Resolve the API token.

        Returns:
            HF_TOKEN if set, else the stored token, else ""
        """
        return os.environ.get(TOKEN_ENV_VAR) or self.config.get("token") or ""

    def set_token(self, token: str) -> None:
        """Store an API token."""
        self.config["token"] = token
        self.save()

    def get_api_url(self) -> str:
        return self.config.get("api_url") or DEFAULT_API_URL

    def set_api_url(self, url: str) -> None:
        """
        Set the catalog API base URL.

        Args:
            url: Base URL of the model listing endpoint
        """
        self.config["api_url"] = url.rstrip("/")
        self.save()

    @property
    def default_limit(self) -> int:
        return int(self.config.get("default_limit", 20))

    @property
    def output_format(self) -> str:
        return self.config.get("output_format", "table")

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self.config = self._default_config()
        self.save()

    @property
    def config_file_path(self) -> Path:
        """Return the path to the configuration file."""
        return CONFIG_FILE


def get_config() -> ConfigManager:
    """
    Get the global ConfigManager instance.

    Returns:
        ConfigManager singleton instance
    """
    return ConfigManager()
