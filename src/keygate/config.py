"""Configuration for the keygate gateway.

Reads from config/keygate.ini if present, environment variables override.
Credentials never checked into version control.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "keygate.ini"


@dataclass(frozen=True)
class KeygateConfig:
    """Gateway configuration. Immutable once loaded."""

    api_key: str = ""
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> KeygateConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}

    if path.exists():
        parser = configparser.ConfigParser()
        parser.read(path)
        if parser.has_section("gateway"):
            for ini_key, config_key in [
                ("api_key", "api_key"),
                ("host", "host"),
                ("log_level", "log_level"),
            ]:
                val = parser.get("gateway", ini_key, fallback=None)
                if val is not None:
                    kwargs[config_key] = val
            port_str = parser.get("gateway", "port", fallback=None)
            if port_str is not None:
                kwargs["port"] = int(port_str)

    env_map = {
        "KEYGATE_API_KEY": "api_key",
        "KEYGATE_HOST": "host",
        "KEYGATE_PORT": "port",
        "KEYGATE_LOG_LEVEL": "log_level",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is not None:
            if config_key == "port":
                kwargs[config_key] = int(val)
            else:
                kwargs[config_key] = val

    if "log_level" in kwargs:
        kwargs["log_level"] = kwargs["log_level"].upper()
    return KeygateConfig(**kwargs)
