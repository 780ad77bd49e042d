import os
from typing import Mapping, Optional

DEFAULT_PORT = 3000
HOST = "0.0.0.0"


class ConfigError(ValueError):
    """Raised when the environment holds a value the listener cannot use"""


def load_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """Read the listening port from PORT, falling back to 3000 when unset or empty"""
    if environ is None:
        environ = os.environ

    raw = (environ.get("PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT

    # ASCII digits only: int() would also take "+80", "3_000" and non-ASCII digits
    if not (raw.isascii() and raw.isdigit()):
        raise ConfigError(f"PORT must be an integer, got {raw!r}")

    port = int(raw)
    if not 1 <= port <= 65535:
        raise ConfigError(f"PORT out of range (1-65535): {port}")
    return port


class AppConfig:
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.host = HOST
        self.port = load_port(environ)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached config so the next call re-reads the environment"""
    global _app_config
    _app_config = None
