"""Statistical tests for the generators via UniformityAuditor."""

from __future__ import annotations

import pytest

from guardian.analyzers.uniformity import UniformityAuditor
from guardian.core.models import CharacterClass
from guardian.generators.password import PasswordComposer
from guardian.generators.random_source import Shuffler

from conftest import SequenceRandom

# Loose enough that a correct generator essentially never fails
SIGNIFICANCE = 1e-6


@pytest.fixture
def auditor():
    return UniformityAuditor(significance=SIGNIFICANCE)


class TestCharacterAudit:
    @pytest.mark.parametrize("char_class", list(CharacterClass))
    def test_single_class_is_uniform(self, auditor, char_class):
        result = auditor.audit_characters(char_class, samples=3000)
        assert result.passed
        assert result.samples == 3000 * 8

    def test_filtered_pool(self, auditor):
        result = auditor.audit_characters(CharacterClass.DIGIT, samples=500, exclude_ambiguous=True)
        assert result.categories == 6
        assert result.passed

    def test_too_few_samples(self, auditor):
        with pytest.raises(ValueError, match="too few"):
            auditor.audit_characters(CharacterClass.LOWER, samples=1)

    def test_biased_source_rejected(self):
        # Always drawing the minimum makes every password "aaaaaaaa"
        rng = SequenceRandom([])
        auditor = UniformityAuditor(
            composer=PasswordComposer(rng=rng),
            shuffler=Shuffler(rng),
            significance=0.01,
        )
        result = auditor.audit_characters(CharacterClass.LOWER, samples=100)
        assert not result.passed
        assert result.p_value < 0.01


class TestShuffleAudit:
    @pytest.mark.parametrize("size", [2, 3, 4])
    def test_permutations_uniform(self, auditor, size):
        result = auditor.audit_shuffle(size=size, samples=6000)
        assert result.passed
        assert result.test_name == f"shuffle[n={size}]"

    @pytest.mark.parametrize("size", [1, 8])
    def test_size_bounds(self, auditor, size):
        with pytest.raises(ValueError):
            auditor.audit_shuffle(size=size)

    def test_naive_shuffle_detected(self):
        class NaiveShuffler(Shuffler):
            # j drawn over the whole list: n^n outcomes, not n!
            def shuffle(self, items):
                for i in range(len(items)):
                    j = self._rng.uniform_int(0, len(items) - 1)
                    items[i], items[j] = items[j], items[i]
                return items

        auditor = UniformityAuditor(shuffler=NaiveShuffler(), significance=1e-4)
        result = auditor.audit_shuffle(size=3, samples=60_000)
        assert not result.passed
