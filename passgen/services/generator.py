"""
Cryptographically secure credential sampling
Uses only the system CSPRNG via the secrets module
"""

import secrets
from enum import Enum
from typing import Sequence


class InvalidArgument(ValueError):
    """Raised when a generator precondition is violated"""


class SamplingMode(str, Enum):
    """How random indices are drawn"""
    UNBIASED = "unbiased"
    LEGACY = "legacy"


def generate_password(
    charset: Sequence[str],
    length: int,
    mode: SamplingMode = SamplingMode.UNBIASED,
) -> str:
    """
    Draw `length` characters from charset

    UNBIASED uses secrets.choice (rejection sampling).
    LEGACY maps each random byte to charset[b % len(charset)],
    which carries a slight modulo bias unless len(charset) divides 256.
    """
    if not charset:
        raise InvalidArgument("charset must contain at least one character")
    if length < 0:
        raise InvalidArgument("length must be >= 0")

    if mode == SamplingMode.LEGACY:
        buffer = secrets.token_bytes(length)
        return ''.join(charset[b % len(charset)] for b in buffer)

    return ''.join(secrets.choice(charset) for _ in range(length))


def _legacy_word_index(word_count: int) -> int:
    # Signed little-endian int32; abs(-2**31) is 2**31 here, no overflow
    value = int.from_bytes(secrets.token_bytes(4), 'little', signed=True)
    return abs(value) % word_count


def generate_passphrase(
    words: Sequence[str],
    word_count: int,
    separator: str,
    mode: SamplingMode = SamplingMode.UNBIASED,
) -> str:
    """
    Join `word_count` randomly chosen words with separator

    LEGACY reproduces the reference output, including the right-trim of
    the separator's characters (whitespace when the separator is empty).
    """
    if not words:
        raise InvalidArgument("word list must contain at least one word")
    if word_count < 0:
        raise InvalidArgument("word_count must be >= 0")

    if mode == SamplingMode.LEGACY:
        joined = ''.join(
            words[_legacy_word_index(len(words))] + separator
            for _ in range(word_count)
        )
        return joined.rstrip(separator) if separator else joined.rstrip()

    return separator.join(secrets.choice(words) for _ in range(word_count))
