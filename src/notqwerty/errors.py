"""
Custom exceptions for notqwerty.

Rejected passwords are reported through evaluation results, not exceptions.
These errors only cover failures at the package boundary.
"""

class NotQwertyError(Exception):
    """Base exception for notqwerty."""
    pass

class WordlistError(NotQwertyError):
    """Word list file could not be read."""
    pass

class ConfigError(NotQwertyError):
    """Invalid configuration value."""
    pass
