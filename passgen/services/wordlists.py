"""
Word list loading for passphrase generation
Line-delimited files first, BIP39 lists from the mnemonic package second
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from mnemonic import Mnemonic

from passgen.services.generator import InvalidArgument

logger = logging.getLogger("passgen.wordlists")

WordList = Tuple[str, ...]

DEFAULT_WORDLIST_DIR = Path(__file__).parent.parent / "resources"


class WordListError(Exception):
    """A word list could not be loaded"""


class WordListUnavailable(Exception):
    """A requested word list is unknown or failed to load"""

    def __init__(self, name: str, reason: str = "not configured"):
        self.name = name
        self.reason = reason
        super().__init__(f"Word list '{name}' is unavailable: {reason}")


def load_wordlist_file(path: Path) -> WordList:
    """Read one word per line, skipping blank lines"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = tuple(line.strip() for line in f if line.strip())
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not read {path.name}: {type(e).__name__}") from e

    if not words:
        raise WordListError(f"{path.name} contains no words")
    return words


def load_bip39_wordlist(language: str) -> WordList:
    """Official 2048-word BIP39 list for a language"""
    if language not in Mnemonic.list_languages():
        raise WordListError(f"No BIP39 word list for '{language}'")
    return tuple(Mnemonic(language).wordlist)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one named list"""
    name: str
    words: WordList = ()
    source: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_named_wordlist(name: str, directory: Path) -> LoadResult:
    """
    Resolve a list by name
    <directory>/<name>.txt wins over the BIP39 list of the same name
    """
    path = directory / f"{name}.txt"
    try:
        if path.is_file():
            return LoadResult(name=name, words=load_wordlist_file(path), source=str(path))
        return LoadResult(name=name, words=load_bip39_wordlist(name), source=f"bip39:{name}")
    except WordListError as e:
        return LoadResult(name=name, error=str(e))


class WordListRegistry:
    """Word lists loaded once, immutable afterwards"""

    def __init__(self, results: Iterable[LoadResult]):
        self._results: Dict[str, LoadResult] = {r.name: r for r in results}

    @classmethod
    def load(cls, names: Iterable[str], directory: Path = DEFAULT_WORDLIST_DIR) -> "WordListRegistry":
        results = []
        for name in names:
            result = load_named_wordlist(name, directory)
            if result.ok:
                logger.info("wordlist_loaded name=%s size=%s source=%s", name, len(result.words), result.source)
            else:
                logger.error("wordlist_failed name=%s reason=%s", name, result.error)
            results.append(result)
        return cls(results)

    @property
    def results(self) -> Tuple[LoadResult, ...]:
        return tuple(self._results.values())

    @property
    def available(self) -> Tuple[str, ...]:
        return tuple(name for name, r in self._results.items() if r.ok)

    def get(self, name: str) -> WordList:
        result = self._results.get(name)
        if result is None:
            raise WordListUnavailable(name)
        if not result.ok:
            raise WordListUnavailable(name, result.error)
        return result.words

    def combine(self, names: Iterable[str]) -> WordList:
        """Concatenate lists in the order given"""
        names = list(names)
        if not names:
            raise InvalidArgument("Please select at least one language")
        combined: Tuple[str, ...] = ()
        for name in names:
            combined += self.get(name)
        return combined
