"""
notqwerty - reject weak passwords before an application accepts them.
"""

from .errors import ConfigError, NotQwertyError, WordlistError
from .repetition import is_trivial_repetition
from .strength import (
    Accepted, Rejected, TooShort, WeakPassword, evaluate, strong_password,
)
from .wordlist import DEFAULT_KEY, WordSet, WordlistRegistry, get_default_registry

__version__ = "1.0.0"

__all__ = [
    "Accepted", "Rejected", "TooShort", "WeakPassword",
    "evaluate", "strong_password", "is_trivial_repetition",
    "WordSet", "WordlistRegistry", "get_default_registry", "DEFAULT_KEY",
    "NotQwertyError", "WordlistError", "ConfigError",
]
