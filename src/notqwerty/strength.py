"""
Password strength check.

This does not rate passwords. It rejects the ones that are too short, that
are a short unit repeated (``abcabcabcabc``), or that appear in one of the
registered word lists, and accepts everything else.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union

from .config import DEFAULT_MIN_LENGTH
from .messages import default_message
from .repetition import is_trivial_repetition
from .wordlist import WordlistRegistry, get_default_registry


@dataclass(frozen=True)
class TooShort:
    """Password is shorter than the configured minimum."""
    minimum: int
    actual: int
    tag = "too_short"


@dataclass(frozen=True)
class WeakPassword:
    """Password is a trivial repetition or a known weak password."""
    tag = "weak_password"


Reason = Union[TooShort, WeakPassword]


@dataclass(frozen=True)
class Accepted:
    password: str = field(repr=False)
    ok = True


@dataclass(frozen=True)
class Rejected:
    reason: Reason
    ok = False


EvaluationResult = Union[Accepted, Rejected]


def _is_easy_guess(password: str, registry: WordlistRegistry) -> bool:
    key = password.lower()
    return is_trivial_repetition(key) or registry.query(key)


def evaluate(password: str, min_length: int = DEFAULT_MIN_LENGTH,
             registry: Optional[WordlistRegistry] = None) -> EvaluationResult:
    """Check a password against the length, repetition and word list rules.

    Args:
        password: candidate password.
        min_length: minimum number of characters.
        registry: word lists to check against, the process-wide registry
            if omitted.

    Returns:
        Accepted with the password as given, or Rejected with the reason.
    """
    if len(password) < min_length:
        return Rejected(TooShort(min_length, len(password)))

    if registry is None:
        registry = get_default_registry()
    if _is_easy_guess(password, registry):
        return Rejected(WeakPassword())

    return Accepted(password)


def strong_password(password: str, min_length: int = DEFAULT_MIN_LENGTH,
                    registry: Optional[WordlistRegistry] = None,
                    messages: Optional[Callable[[Reason], str]] = None) -> Tuple[bool, str]:
    """Check a password and return (True, password) or (False, message)."""
    result = evaluate(password, min_length, registry)
    if isinstance(result, Accepted):
        return True, result.password

    render = messages or default_message
    return False, render(result.reason)
