"""Tests for the reference secret set."""

from __future__ import annotations

from guardian.data.reference import (
    BUNDLED_REFERENCE_SET,
    ReferenceSecretSet,
    load_reference_set,
)


def test_bundled_size():
    assert len(BUNDLED_REFERENCE_SET) == 15


def test_membership_is_case_sensitive():
    assert "password" in BUNDLED_REFERENCE_SET
    assert "Password" not in BUNDLED_REFERENCE_SET


def test_from_file_is_verbatim(tmp_path):
    path = tmp_path / "weak.txt"
    path.write_text("Hunter2\n\n secret \n", encoding="utf-8")
    refs = load_reference_set(path)
    assert isinstance(refs, ReferenceSecretSet)
    assert "Hunter2" in refs
    assert " secret " in refs
    assert "hunter2" not in refs
    assert len(refs) == 2


def test_empty_path_is_bundled():
    assert load_reference_set(None) is BUNDLED_REFERENCE_SET
