"""
Tests for atomic output writes.
"""

import pytest

from graphql_to_elm.pipeline import AtomicWriter, OutputWriteError

MODULE = "module Shapes exposing (..)\n"


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "out" / "Shapes.elm"
    AtomicWriter().write(target, MODULE)
    assert target.read_text(encoding="utf-8") == MODULE


def test_write_replaces_existing_file(tmp_path):
    target = tmp_path / "Shapes.elm"
    target.write_text("old")
    AtomicWriter().write(target, MODULE)
    assert target.read_text(encoding="utf-8") == MODULE


def test_invalid_content_is_not_written(tmp_path):
    target = tmp_path / "Shapes.elm"
    target.write_text("old")
    with pytest.raises(OutputWriteError):
        AtomicWriter().write(target, "type Color = Red")
    assert target.read_text() == "old"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["Shapes.elm"]


def test_unbalanced_parentheses(tmp_path):
    with pytest.raises(OutputWriteError, match="unbalanced"):
        AtomicWriter().write(tmp_path / "Shapes.elm", "module Shapes exposing (..\n")


def test_validation_can_be_skipped(tmp_path):
    target = tmp_path / "raw.elm"
    AtomicWriter().write(target, "anything", validate=False)
    assert target.read_text() == "anything"


def test_custom_validator(tmp_path):
    calls = []
    writer = AtomicWriter(validate_elm=calls.append)
    writer.write(tmp_path / "Shapes.elm", MODULE)
    assert calls == [MODULE]


def test_non_atomic_write_validates_first(tmp_path):
    target = tmp_path / "Shapes.elm"
    with pytest.raises(OutputWriteError):
        AtomicWriter().write(target, "type Color = Red", atomic=False)
    assert not target.exists()


def test_non_atomic_write(tmp_path):
    target = tmp_path / "out" / "Shapes.elm"
    AtomicWriter().write(target, MODULE, atomic=False)
    assert target.read_text(encoding="utf-8") == MODULE


@pytest.mark.parametrize("atomic", [True, False])
def test_os_errors_become_output_write_errors(tmp_path, atomic):
    blocker = tmp_path / "blocker"
    blocker.write_text("a regular file")
    with pytest.raises(OutputWriteError, match="Cannot write") as exc_info:
        AtomicWriter().write(blocker / "Shapes.elm", MODULE, atomic=atomic)
    assert isinstance(exc_info.value.__cause__, OSError)
