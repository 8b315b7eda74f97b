"""Tests for PassphraseComposer and the bundled word list."""

from __future__ import annotations

import pytest

from guardian.core.models import PassphraseRequest, SecretKind
from guardian.data.wordlist import BUNDLED_WORDLIST, WordList, load_wordlist
from guardian.generators.passphrase import PassphraseComposer

from conftest import SequenceRandom


class TestPassphraseComposer:
    @pytest.mark.parametrize("count", [2, 5, 10])
    def test_word_count(self, count):
        secret = PassphraseComposer().generate(PassphraseRequest(word_count=count))
        words = secret.value.split("-")
        assert len(words) == count
        assert secret.word_count == count
        assert secret.kind is SecretKind.PASSPHRASE
        assert all(w in BUNDLED_WORDLIST for w in words)

    @pytest.mark.parametrize("requested, expected", [(0, 2), (1, 2), (11, 10), (99, 10)])
    def test_word_count_clamped(self, requested, expected):
        secret = PassphraseComposer().generate(PassphraseRequest(word_count=requested))
        assert secret.word_count == expected
        assert len(secret.value.split("-")) == expected

    def test_custom_separator(self):
        secret = PassphraseComposer().generate(PassphraseRequest(word_count=4, separator="."))
        assert secret.value.count(".") == 3

    def test_empty_separator_concatenates(self):
        words = WordList(words=("alpha", "beta"))
        rng = SequenceRandom([0, 1, 1])
        secret = PassphraseComposer(words, rng).generate(
            PassphraseRequest(word_count=3, separator="")
        )
        assert secret.value == "alphabetabeta"

    def test_draws_span_whole_list(self):
        rng = SequenceRandom([])
        PassphraseComposer(rng=rng).generate(PassphraseRequest(word_count=3))
        assert rng.calls == [(0, len(BUNDLED_WORDLIST) - 1)] * 3

    def test_separator_longer_than_one_rejected(self):
        with pytest.raises(ValueError):
            PassphraseRequest(separator="--")


class TestWordList:
    def test_bundled_keeps_duplicates(self):
        assert BUNDLED_WORDLIST.words.count("ember") > 1

    def test_normalised_lowercase(self):
        assert WordList(words=(" Alpha ", "BETA", "")).words == ("alpha", "beta")

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            WordList(words=())

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# comment\nOne\n\n  two\n", encoding="utf-8")
        assert load_wordlist(path).words == ("one", "two")

    def test_empty_path_is_bundled(self):
        assert load_wordlist("") is BUNDLED_WORDLIST
