"""
Configuration management for RNG Coin.
Supports config.json with environment variable overrides.
Relative paths are resolved against the project root.
"""

import os
from pathlib import Path
from typing import Optional

import orjson
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

load_dotenv()

# Project root directory (parent of the 'rng_coin' package)
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = Path(__file__).parent

# Route paths, shared by the routers and the landing page links
INDEX_PATHS = ("/", "/index")
COIN_PATH = "/rng/coin"
COINS_PATH = COIN_PATH + "/{flips}"


def get_env(key: str, default: str = None) -> Optional[str]:
    """Get environment variable with optional default."""
    return os.environ.get(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes", "on")


def get_env_int(key: str, default: int = 0) -> int:
    """Get integer environment variable."""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


# ==================== Configuration Models ====================

class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    name: str = "RNG Coin"


class CoinConfig(BaseModel):
    """Bounds for the multi-flip route, [min_flips, max_flips)."""
    min_flips: int = 2
    max_flips: int = 101
    example_flips: int = 5  # Used for the landing page link

    @model_validator(mode="after")
    def check_bounds(self):
        if self.max_flips <= self.min_flips:
            raise ValueError("max_flips must be greater than min_flips")
        if not self.min_flips <= self.example_flips < self.max_flips:
            raise ValueError("example_flips must be within [min_flips, max_flips)")
        return self


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_to_file: bool = False
    formatter: str = "color"
    log_file: str = "data/app.log"

    def get_log_path(self) -> Path:
        return PROJECT_ROOT / self.log_file


class AppConfig(BaseModel):
    """Main application configuration."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    coin: CoinConfig = Field(default_factory=CoinConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ==================== Configuration Loading ====================

def get_config_path() -> Path:
    config_file = get_env("CONFIG_FILE")
    if config_file:
        return Path(config_file)
    return PROJECT_ROOT / "config.json"


def load_config() -> AppConfig:
    """
    Load configuration from config.json with environment variable overrides.
    Environment variables take precedence over config.json values.
    """
    config_path = get_config_path()

    data = {}
    if config_path.exists():
        data = orjson.loads(config_path.read_bytes())

    server = data.setdefault("server", {})
    coin = data.setdefault("coin", {})
    logging_conf = data.setdefault("logging", {})

    if get_env("SERVER_HOST"):
        server["host"] = get_env("SERVER_HOST")
    # PORT is the conventional container variable; SERVER_PORT wins if both are set
    if get_env("PORT"):
        server["port"] = get_env_int("PORT", server.get("port", 3000))
    if get_env("SERVER_PORT"):
        server["port"] = get_env_int("SERVER_PORT", server.get("port", 3000))
    if get_env("DEBUG"):
        server["debug"] = get_env_bool("DEBUG")

    if get_env("COIN_MIN_FLIPS"):
        coin["min_flips"] = get_env_int("COIN_MIN_FLIPS", coin.get("min_flips", 2))
    if get_env("COIN_MAX_FLIPS"):
        coin["max_flips"] = get_env_int("COIN_MAX_FLIPS", coin.get("max_flips", 101))
    if get_env("COIN_EXAMPLE_FLIPS"):
        coin["example_flips"] = get_env_int("COIN_EXAMPLE_FLIPS", coin.get("example_flips", 5))

    if get_env("LOG_LEVEL"):
        logging_conf["level"] = get_env("LOG_LEVEL")
    if get_env("LOG_TO_FILE"):
        logging_conf["log_to_file"] = get_env_bool("LOG_TO_FILE")
    if get_env("LOG_FORMATTER"):
        logging_conf["formatter"] = get_env("LOG_FORMATTER")
    if get_env("LOG_FILE"):
        logging_conf["log_file"] = get_env("LOG_FILE")

    return AppConfig(**data)


# Global config instance
settings = load_config()
