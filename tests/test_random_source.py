"""Tests for SecureRandom and Shuffler."""

from __future__ import annotations

import pytest

from guardian.generators import random_source
from guardian.generators.random_source import EntropySourceError, SecureRandom, Shuffler

from conftest import SequenceRandom


class TestUniformInt:
    def test_stays_in_closed_range(self):
        rng = SecureRandom()
        values = {rng.uniform_int(3, 7) for _ in range(500)}
        assert values <= set(range(3, 8))

    def test_hits_both_endpoints(self):
        rng = SecureRandom()
        values = {rng.uniform_int(0, 1) for _ in range(200)}
        assert values == {0, 1}

    def test_degenerate_range(self):
        assert SecureRandom().uniform_int(5, 5) == 5

    def test_negative_bounds(self):
        rng = SecureRandom()
        assert all(-3 <= rng.uniform_int(-3, -1) <= -1 for _ in range(50))

    def test_inverted_range_raises(self):
        with pytest.raises(ValueError, match="Empty range"):
            SecureRandom().uniform_int(2, 1)

    def test_os_failure_becomes_entropy_error(self, monkeypatch):
        def broken(_n):
            raise OSError("getrandom failed")

        monkeypatch.setattr(random_source.secrets, "randbelow", broken)
        with pytest.raises(EntropySourceError) as excinfo:
            SecureRandom().uniform_int(0, 10)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_choice_single_candidate(self):
        assert SecureRandom().choice("x") == "x"


class TestShuffler:
    def test_is_a_permutation(self):
        items = list(range(20))
        shuffled = Shuffler().shuffle(list(items))
        assert sorted(shuffled) == items

    def test_shuffles_in_place(self):
        items = ["a", "b", "c"]
        assert Shuffler().shuffle(items) is items

    def test_empty_and_single(self):
        shuffler = Shuffler()
        assert shuffler.shuffle([]) == []
        assert shuffler.shuffle(["only"]) == ["only"]

    def test_fisher_yates_draw_ranges(self):
        rng = SequenceRandom([])
        Shuffler(rng).shuffle(list("abcd"))
        assert rng.calls == [(0, 3), (0, 2), (0, 1)]

    def test_scripted_swaps(self):
        # i=2 swaps with 0, i=1 swaps with 0
        rng = SequenceRandom([0, 0])
        assert Shuffler(rng).shuffle(["a", "b", "c"]) == ["b", "c", "a"]
