"""
Registry of known-weak password lists.

Each list is held as an immutable WordSet under a registration key,
conventionally the base name of the file it came from. The registry always
holds the bundled ``common_passwords.txt`` list once initialized, and that
entry cannot be removed.
"""

import os
import threading
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Callable, FrozenSet, Iterable, List, Mapping, Optional

from cryptography.hazmat.primitives import hashes

from .errors import WordlistError
from .logger import security_logger

DEFAULT_KEY = "common_passwords.txt"


def normalize_lines(lines: Iterable[str]) -> FrozenSet[str]:
    """Lowercase each line, dropping surrounding whitespace and blank lines."""
    return frozenset(line.strip().lower() for line in lines if line.strip())


def read_wordlist_lines(path: str) -> List[str]:
    """Read a UTF-8 word list file into a list of raw lines."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise WordlistError(f"Cannot read wordlist {path}: {e}") from e


def load_default_words() -> List[str]:
    """Lines of the word list bundled with the package."""
    source = resources.files("notqwerty").joinpath("wordlists").joinpath(DEFAULT_KEY)
    return source.read_text(encoding='utf-8').splitlines()


@dataclass(frozen=True)
class WordSet:
    """Immutable set of lowercase words registered under one key."""
    key: str
    words: FrozenSet[str]

    @classmethod
    def from_lines(cls, key: str, lines: Iterable[str]) -> 'WordSet':
        return cls(key, normalize_lines(lines))

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    @property
    def fingerprint(self) -> str:
        """SHA-256 hex digest of the sorted words, for telling list versions apart."""
        digest = hashes.Hash(hashes.SHA256())
        for word in sorted(self.words):
            digest.update(word.encode('utf-8') + b'\n')
        return digest.finalize().hex()


class WordlistRegistry:
    """Named word sets queried together.

    Writers are serialized by a lock and publish a fresh read-only mapping in
    a single assignment. Readers grab the current mapping without locking, so
    a query sees either the state before or after a change, never a mix.
    """

    def __init__(self, default_key: str = DEFAULT_KEY,
                 default_source: Optional[Callable[[], Iterable[str]]] = None):
        self.default_key = default_key
        self._default_source = default_source or load_default_words
        self._lock = threading.Lock()
        self._entries: Mapping[str, WordSet] = MappingProxyType({})
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self):
        """Load the default list. Only the first call has any effect."""
        with self._lock:
            if self._initialized:
                return
            default = WordSet.from_lines(self.default_key, self._default_source())
            entries = {self.default_key: default}
            entries.update(self._entries)
            self._entries = MappingProxyType(entries)
            self._initialized = True
        security_logger.log_wordlist_change("loaded", self.default_key, len(default))

    def add(self, key: str, words: Iterable[str]):
        """Register words under key, replacing any list already there."""
        if not key:
            raise ValueError("Wordlist key must not be empty")
        if key == self.default_key:
            security_logger.log_security_event(
                "Ignored attempt to replace default wordlist", key)
            return

        word_set = WordSet.from_lines(key, words)
        with self._lock:
            entries = dict(self._entries)
            entries[key] = word_set
            self._entries = MappingProxyType(entries)
        security_logger.log_wordlist_change("added", key, len(word_set))

    def remove(self, key: str):
        """Drop the list under key. The default list and unknown keys are ignored."""
        if key == self.default_key:
            return
        with self._lock:
            if key not in self._entries:
                return
            entries = dict(self._entries)
            del entries[key]
            self._entries = MappingProxyType(entries)
        security_logger.log_wordlist_change("removed", key)

    def push_file(self, path: str) -> str:
        """Load a word list file under its base name and return that key."""
        key = os.path.basename(path)
        self.add(key, read_wordlist_lines(path))
        return key

    def pop(self, key: str):
        self.remove(key)

    def query(self, word: str) -> bool:
        """True if word, ignoring case, is in any registered list."""
        word = word.lower()
        entries = self._entries
        return any(word in word_set for word_set in entries.values())

    def list_keys(self) -> List[str]:
        return list(self._entries)

    def get(self, key: str) -> Optional[WordSet]:
        return self._entries.get(key)


_default_registry: Optional[WordlistRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> WordlistRegistry:
    """Process-wide registry, initialized with the bundled list on first use."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = WordlistRegistry()
        registry = _default_registry
    registry.initialize()
    return registry
