"""
Configuration management for feedwatch.

Handles loading, validation, and management of configuration settings
from YAML files, environment variables, and CLI arguments.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any

import yaml
from dotenv import load_dotenv

from ..utils.helpers import validate_url
from .constants import (
    DEFAULT_HTTP_HEADERS,
    DEFAULT_LOG_FILE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TARGET_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    MIN_TIMEOUT,
    VALID_CRAWL_MODES,
    VALID_LOG_LEVELS,
    is_valid_mode,
)

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Config:
    """Configuration class for feedwatch settings."""

    # Target settings
    target_url: str = field(default_factory=lambda: os.getenv("TARGET_URL", DEFAULT_TARGET_URL))
    crawl_mode: str = field(default_factory=lambda: os.getenv("CRAWL_MODE", "auto"))

    # HTTP settings
    timeout: int = field(default_factory=lambda: int(os.getenv("TIMEOUT", str(DEFAULT_TIMEOUT))))
    max_retries: int = field(default_factory=lambda: int(os.getenv("MAX_RETRIES", str(DEFAULT_MAX_RETRIES))))
    user_agent: str = field(default_factory=lambda: os.getenv("USER_AGENT", DEFAULT_USER_AGENT))

    # Parser settings
    strict_parsing: bool = field(default_factory=lambda: _env_flag("STRICT_PARSING", "false"))
    max_items: int = field(default_factory=lambda: int(os.getenv("MAX_ITEMS", "0")))

    # Notification settings
    notify_console: bool = field(default_factory=lambda: _env_flag("NOTIFY_CONSOLE", "false"))
    notify_log: bool = field(default_factory=lambda: _env_flag("NOTIFY_LOG", "true"))

    # Logging settings
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", DEFAULT_LOG_FILE))

    # HTTP headers, rebuilt from user_agent
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()
        self._setup_headers()

    def _validate(self) -> None:
        """Validate configuration values."""
        if not validate_url(self.target_url):
            raise ValueError(f"Invalid target_url: {self.target_url}")

        if not is_valid_mode(self.crawl_mode, VALID_CRAWL_MODES):
            raise ValueError(f"Invalid crawl_mode: {self.crawl_mode}")

        if not is_valid_mode(self.log_level, VALID_LOG_LEVELS):
            raise ValueError(f"Invalid log_level: {self.log_level}")

        if self.timeout < MIN_TIMEOUT:
            raise ValueError(f"timeout must be at least {MIN_TIMEOUT} seconds")

        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        if self.max_items < 0:
            raise ValueError("max_items must not be negative")

        if not self.user_agent:
            raise ValueError("user_agent must not be empty")

    def _setup_headers(self) -> None:
        """Setup default HTTP headers."""
        headers = dict(DEFAULT_HTTP_HEADERS)
        headers.update(self.headers)
        headers["User-Agent"] = self.user_agent
        self.headers = headers

    @classmethod
    def from_file(cls, config_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config instance
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def save_to_file(self, config_path: str | Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config_path: Path to save YAML configuration file
        """
        path = Path(config_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "target_url": self.target_url,
            "crawl_mode": self.crawl_mode,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "user_agent": self.user_agent,
            "strict_parsing": self.strict_parsing,
            "max_items": self.max_items,
            "notify_console": self.notify_console,
            "notify_log": self.notify_log,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    def __repr__(self) -> str:
        """String representation of configuration."""
        return f"Config(target_url={self.target_url}, crawl_mode={self.crawl_mode})"
