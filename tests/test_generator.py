from collections import Counter

import pytest

from passgen.charsets import DIGITS, LOWERCASE, SYMBOLS, build_charset
from passgen.services import generator
from passgen.services.generator import (
    InvalidArgument,
    SamplingMode,
    generate_passphrase,
    generate_password,
)

WORDS = ["alpha", "bravo", "charlie", "delta", "echo"]


def fixed_bytes(*chunks):
    """token_bytes replacement returning the given chunks in order"""
    pending = list(chunks)

    def token_bytes(n):
        chunk = pending.pop(0)
        assert len(chunk) == n
        return chunk

    return token_bytes


@pytest.mark.parametrize("mode", list(SamplingMode))
@pytest.mark.parametrize("length", [1, 6, 16, 64, 256])
def test_password_has_exact_length_and_charset_members(mode, length):
    charset = build_charset()
    password = generate_password(charset, length, mode)

    assert len(password) == length
    assert set(password) <= set(charset)


@pytest.mark.parametrize("mode", list(SamplingMode))
def test_zero_length_password_is_empty(mode):
    assert generate_password(DIGITS, 0, mode) == ""


@pytest.mark.parametrize("mode", list(SamplingMode))
def test_empty_charset_is_rejected(mode):
    with pytest.raises(InvalidArgument):
        generate_password([], 10, mode)


def test_negative_length_is_rejected():
    with pytest.raises(InvalidArgument):
        generate_password(DIGITS, -1)


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgument, ValueError)


def test_single_character_charset():
    assert generate_password("x", 5) == "xxxxx"


def test_password_characters_are_uniform():
    # Chi-squared over 100k draws, 9 degrees of freedom.
    # 40 is far beyond the 0.01% critical value (33.7).
    sample = generate_password(DIGITS, 100_000)
    counts = Counter(sample)
    expected = len(sample) / len(DIGITS)

    chi_squared = sum((counts[c] - expected) ** 2 / expected for c in DIGITS)

    assert set(counts) == set(DIGITS)
    assert chi_squared < 40


def test_password_uses_all_symbols_eventually():
    sample = generate_password(SYMBOLS, 5000)
    assert set(sample) == set(SYMBOLS)


def test_legacy_password_maps_bytes_modulo_charset(monkeypatch):
    monkeypatch.setattr(generator.secrets, "token_bytes", fixed_bytes(bytes([0, 9, 10, 255])))

    assert generate_password(DIGITS, 4, SamplingMode.LEGACY) == "0905"


def test_legacy_password_indexes_lowercase(monkeypatch):
    monkeypatch.setattr(generator.secrets, "token_bytes", fixed_bytes(bytes([25, 26, 51, 52])))

    assert generate_password(LOWERCASE, 4, SamplingMode.LEGACY) == "zaza"


@pytest.mark.parametrize("mode", list(SamplingMode))
@pytest.mark.parametrize("word_count", [1, 3, 12])
def test_passphrase_has_exact_word_count(mode, word_count):
    passphrase = generate_passphrase(WORDS, word_count, "-", mode)
    parts = passphrase.split("-")

    assert len(parts) == word_count
    assert all(part in WORDS for part in parts)
    assert not passphrase.startswith("-")
    assert not passphrase.endswith("-")


@pytest.mark.parametrize("mode", list(SamplingMode))
def test_zero_word_passphrase_is_empty(mode):
    assert generate_passphrase(WORDS, 0, "-", mode) == ""


@pytest.mark.parametrize("mode", list(SamplingMode))
def test_empty_word_list_is_rejected(mode):
    with pytest.raises(InvalidArgument):
        generate_passphrase([], 3, "-", mode)


def test_negative_word_count_is_rejected():
    with pytest.raises(InvalidArgument):
        generate_passphrase(WORDS, -2, "-")


def test_multi_character_separator():
    passphrase = generate_passphrase(WORDS, 4, " + ")
    parts = passphrase.split(" + ")

    assert len(parts) == 4
    assert all(part in WORDS for part in parts)


def test_empty_separator_concatenates_words():
    passphrase = generate_passphrase(["ab"], 3, "")
    assert passphrase == "ababab"


def test_unbiased_passphrase_keeps_word_endings_matching_separator():
    # Words ending in the separator character stay intact
    assert generate_passphrase(["papa"], 2, "a") == "papaapapa"


def test_passphrase_words_are_uniform():
    passphrase = generate_passphrase(WORDS, 50_000, " ")
    counts = Counter(passphrase.split(" "))
    expected = 50_000 / len(WORDS)

    chi_squared = sum((counts[w] - expected) ** 2 / expected for w in WORDS)

    # 4 degrees of freedom; 0.01% critical value is 23.5
    assert chi_squared < 30


def test_legacy_passphrase_reads_signed_little_endian_int32(monkeypatch):
    monkeypatch.setattr(generator.secrets, "token_bytes", fixed_bytes(
        (1).to_bytes(4, "little", signed=True),
        (-1).to_bytes(4, "little", signed=True),
        (7).to_bytes(4, "little", signed=True),
    ))

    result = generate_passphrase(["alpha", "beta", "gamma"], 3, "-", SamplingMode.LEGACY)

    assert result == "beta-beta-beta"


def test_legacy_passphrase_handles_minimum_int32(monkeypatch):
    # abs(-2**31) is taken as 2**31; 2**31 % 3 == 2
    monkeypatch.setattr(generator.secrets, "token_bytes", fixed_bytes(b"\x00\x00\x00\x80"))

    result = generate_passphrase(["alpha", "beta", "gamma"], 1, "-", SamplingMode.LEGACY)

    assert result == "gamma"


def test_legacy_passphrase_trims_separator_characters(monkeypatch):
    monkeypatch.setattr(generator.secrets, "token_bytes", fixed_bytes(b"\x00\x00\x00\x00"))

    assert generate_passphrase(["papa"], 1, "a", SamplingMode.LEGACY) == "pap"


def test_legacy_passphrase_with_empty_separator_trims_whitespace(monkeypatch):
    monkeypatch.setattr(generator.secrets, "token_bytes", fixed_bytes(
        b"\x00\x00\x00\x00", b"\x00\x00\x00\x00",
    ))

    assert generate_passphrase(["word "], 2, "", SamplingMode.LEGACY) == "word word"
