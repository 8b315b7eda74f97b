"""Tests for PasswordComposer."""

from __future__ import annotations

import string

import pytest

from guardian.core.models import CharacterClass, PasswordRequest, SecretKind
from guardian.generators.password import PasswordComposer
from guardian.generators.pools import AMBIGUOUS_GLYPHS, DEFAULT_SYMBOLS

from conftest import SequenceRandom

_CLASS_CHARS = {
    CharacterClass.LOWER: set(string.ascii_lowercase),
    CharacterClass.UPPER: set(string.ascii_uppercase),
    CharacterClass.DIGIT: set(string.digits),
    CharacterClass.SYMBOL: set(DEFAULT_SYMBOLS),
}


@pytest.fixture
def composer():
    return PasswordComposer()


class TestLength:
    @pytest.mark.parametrize("length", [8, 16, 33, 128])
    def test_exact_length(self, composer, length):
        secret = composer.generate(PasswordRequest(length=length))
        assert len(secret.value) == length
        assert secret.kind is SecretKind.PASSWORD

    def test_zero_and_negative_length(self, composer):
        assert composer.generate(PasswordRequest(length=0)).value == ""
        assert composer.generate(PasswordRequest(length=-4)).value == ""


class TestCoverage:
    def test_every_selected_class_present(self, composer):
        for _ in range(200):
            value = composer.generate(PasswordRequest(length=8)).value
            for chars in _CLASS_CHARS.values():
                assert set(value) & chars

    def test_only_selected_classes(self, composer):
        request = PasswordRequest(
            length=40,
            classes=frozenset({CharacterClass.DIGIT, CharacterClass.UPPER}),
            exclude_ambiguous=False,
        )
        value = composer.generate(request).value
        assert set(value) <= _CLASS_CHARS[CharacterClass.DIGIT] | _CLASS_CHARS[CharacterClass.UPPER]

    def test_empty_selection_is_lowercase(self, composer):
        request = PasswordRequest(length=30, classes=frozenset())
        assert set(composer.generate(request).value) <= _CLASS_CHARS[CharacterClass.LOWER]

    def test_length_below_class_count(self):
        # Two guaranteed draws, from the lower and upper pools only
        rng = SequenceRandom([0, 0, 0])
        value = PasswordComposer(rng=rng).generate(
            PasswordRequest(length=2, exclude_ambiguous=False)
        ).value
        assert len(value) == 2
        assert sorted(value) == ["A", "a"]


class TestAmbiguity:
    def test_ambiguous_glyphs_excluded(self, composer):
        banned = set("".join(AMBIGUOUS_GLYPHS.values()))
        for _ in range(50):
            value = composer.generate(PasswordRequest(length=64)).value
            assert not set(value) & banned

    def test_ambiguous_allowed_when_requested(self, composer):
        request = PasswordRequest(
            length=128,
            classes=frozenset({CharacterClass.DIGIT}),
            exclude_ambiguous=False,
        )
        seen: set[str] = set()
        for _ in range(10):
            seen |= set(composer.generate(request).value)
        assert seen == set(string.digits)


class TestDraws:
    def test_fill_draws_from_concatenated_pools(self):
        rng = SequenceRandom([])
        PasswordComposer(rng=rng).generate(PasswordRequest(length=6, exclude_ambiguous=False))
        # 4 guaranteed draws, 2 fill draws over 26+26+10+24, 5 shuffle draws
        assert rng.calls[:4] == [(0, 25), (0, 25), (0, 9), (0, 23)]
        assert rng.calls[4:6] == [(0, 85), (0, 85)]
        assert rng.calls[6:] == [(0, 5), (0, 4), (0, 3), (0, 2), (0, 1)]
