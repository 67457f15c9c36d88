import logging

import pytest

from passgen.services.generator import InvalidArgument
from passgen.services.wordlists import (
    DEFAULT_WORDLIST_DIR,
    LoadResult,
    WordListError,
    WordListRegistry,
    WordListUnavailable,
    load_bip39_wordlist,
    load_named_wordlist,
    load_wordlist_file,
)


def test_load_wordlist_file_strips_and_skips_blank_lines(tmp_path):
    path = tmp_path / "custom.txt"
    path.write_text("  apple\n\nbanana  \n\t\ncherry\n", encoding="utf-8")

    assert load_wordlist_file(path) == ("apple", "banana", "cherry")


def test_load_wordlist_file_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n \n", encoding="utf-8")

    with pytest.raises(WordListError) as exc:
        load_wordlist_file(path)

    assert "no words" in str(exc.value)


def test_load_wordlist_file_reports_missing_file(tmp_path):
    with pytest.raises(WordListError) as exc:
        load_wordlist_file(tmp_path / "missing.txt")

    assert "missing.txt" in str(exc.value)


def test_load_bip39_english():
    words = load_bip39_wordlist("english")

    assert len(words) == 2048
    assert words[0] == "abandon"


def test_load_bip39_unknown_language():
    with pytest.raises(WordListError):
        load_bip39_wordlist("german")


def test_bundled_german_list_loads():
    result = load_named_wordlist("german", DEFAULT_WORDLIST_DIR)

    assert result.ok
    assert len(result.words) > 250
    assert "apfel" in result.words
    assert result.source.endswith("german.txt")


def test_file_takes_precedence_over_bip39(tmp_path):
    (tmp_path / "english.txt").write_text("one\ntwo\n", encoding="utf-8")

    result = load_named_wordlist("english", tmp_path)

    assert result.words == ("one", "two")
    assert result.source == str(tmp_path / "english.txt")


def test_bip39_used_when_no_file(tmp_path):
    result = load_named_wordlist("english", tmp_path)

    assert result.source == "bip39:english"
    assert len(result.words) == 2048


def test_registry_records_failures_without_raising(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="passgen.wordlists"):
        registry = WordListRegistry.load(["english", "elvish"], tmp_path)

    assert registry.available == ("english",)
    failed = [r for r in registry.results if not r.ok]
    assert [r.name for r in failed] == ["elvish"]
    assert "wordlist_failed name=elvish" in caplog.text


def test_combine_concatenates_in_request_order(registry):
    combined = registry.combine(["german", "english"])

    assert combined[:3] == ("apfel", "baum", "haus")
    assert combined[3] == "alpha"
    assert len(combined) == 11


def test_combine_rejects_unknown_list(registry):
    with pytest.raises(WordListUnavailable) as exc:
        registry.combine(["english", "latin"])

    assert exc.value.name == "latin"


def test_combine_rejects_failed_list_with_reason(registry):
    with pytest.raises(WordListUnavailable) as exc:
        registry.combine(["klingon"])

    assert "contains no words" in str(exc.value)


def test_combine_requires_a_selection(registry):
    with pytest.raises(InvalidArgument):
        registry.combine([])


def test_load_result_ok_flag():
    assert LoadResult(name="a", words=("x",)).ok
    assert not LoadResult(name="a", error="broken").ok
