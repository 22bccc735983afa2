"""Configuration management for TaskFlow."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field

PORT_ENV_VAR = "PORT"


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    debug: bool = Field(default=False)
    max_content_length: int = Field(default=10 * 1024 * 1024)
    cors_origins: str = Field(default="*")


class APIConfig(BaseModel):
    """Client-side API configuration."""

    endpoint: str = Field(default="http://localhost:3001")
    timeout: int = Field(default=30)
    retry: int = Field(default=3)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")


class Config(BaseModel):
    """Main configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ConfigManager:
    """Manages TaskFlow configuration profiles."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("taskflow-api"))
        self.config_file = self.config_dir / f"{profile}.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except Exception:
                # If config is corrupted, return default
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

        # Re-validate through the model so bad values never reach disk
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is not None:
                self.set(key, default_value)
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def server_port(self) -> int:
        """Port to listen on; the PORT environment variable wins over the file."""
        env_port = os.environ.get(PORT_ENV_VAR)
        if env_port:
            return int(env_port)
        return self.config.server.port

    def list_profiles(self) -> list[str]:
        """List all available profiles."""
        profiles = []
        for config_file in self.config_dir.glob("*.json"):
            if not config_file.name.startswith("."):
                profiles.append(config_file.stem)
        return sorted(profiles)


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
