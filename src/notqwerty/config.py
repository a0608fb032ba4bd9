"""Configuration values, read from the environment."""
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .errors import ConfigError

DEFAULT_MIN_LENGTH = 8

ENV_MIN_LENGTH = "NOTQWERTY_MIN_LENGTH"
ENV_WORDLISTS = "NOTQWERTY_WORDLISTS"
ENV_LOG_FILE = "NOTQWERTY_LOG_FILE"


@dataclass
class Settings:
    min_length: int = DEFAULT_MIN_LENGTH
    wordlists: List[str] = field(default_factory=list)
    log_file: Optional[str] = None


def _parse_min_length(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_MIN_LENGTH} must be an integer, got {raw!r}")
    if value < 0:
        raise ConfigError(f"{ENV_MIN_LENGTH} must not be negative, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    settings = Settings()

    raw_min = env.get(ENV_MIN_LENGTH, "").strip()
    if raw_min:
        settings.min_length = _parse_min_length(raw_min)

    raw_lists = env.get(ENV_WORDLISTS, "")
    settings.wordlists = [p.strip() for p in raw_lists.split(os.pathsep) if p.strip()]

    settings.log_file = env.get(ENV_LOG_FILE) or None
    return settings
