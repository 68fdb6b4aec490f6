"""Unit tests for the indexing pipeline."""

import shutil
import tempfile
from pathlib import Path

import pytest

from word_tracker.components.bstree import BSTree
from word_tracker.components.word import Word
from word_tracker.core.indexer import index_file, index_lines, record_token


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


def lookup(tree, text):
    node = tree.search(Word(text))
    assert node is not None, f"{text!r} not indexed"
    return node.get_element()


def test_record_token_inserts_new_word_with_first_occurrence():
    tree = BSTree()
    word = record_token(tree, "Cat", "a.txt", 3)

    assert tree.size() == 1
    assert word.get_text() == "cat"
    assert word.get_occurrences() == {"a.txt": [3]}
    assert word.get_frequency() == 1
    assert tree.get_root().get_element() is word


def test_record_token_mutates_stored_word():
    tree = BSTree()
    first = record_token(tree, "cat", "a.txt", 1)
    second = record_token(tree, "CAT", "b.txt", 2)

    assert second is first
    assert tree.size() == 1
    assert first.get_occurrences() == {"a.txt": [1], "b.txt": [2]}
    assert first.get_frequency() == 2


def test_index_lines_scenario():
    tree = BSTree()
    count = index_lines(tree, ["The cat sat.", "The dog sat."], "a.txt")

    assert count == 6
    assert tree.size() == 4
    assert lookup(tree, "the").get_occurrences() == {"a.txt": [1, 2]}
    assert lookup(tree, "the").get_frequency() == 2
    assert lookup(tree, "sat").get_occurrences() == {"a.txt": [1, 2]}
    assert lookup(tree, "sat").get_frequency() == 2
    assert lookup(tree, "cat").get_occurrences() == {"a.txt": [1]}
    assert lookup(tree, "cat").get_frequency() == 1
    assert lookup(tree, "dog").get_occurrences() == {"a.txt": [2]}
    assert lookup(tree, "dog").get_frequency() == 1
    assert [w.get_text() for w in tree.inorder_iterator()] == ["cat", "dog", "sat", "the"]


def test_index_lines_counts_repeats_on_one_line():
    tree = BSTree()
    index_lines(tree, ["", "no no no"], "a.txt")

    assert lookup(tree, "no").get_occurrences() == {"a.txt": [2, 2, 2]}
    assert lookup(tree, "no").get_frequency() == 3


def test_frequency_matches_occurrences_for_every_word():
    tree = BSTree()
    index_lines(tree, ["a b a", "b c", "a"], "one.txt")
    index_lines(tree, ["c c", "a"], "two.txt")

    for word in tree.inorder_iterator():
        total = sum(len(lines) for lines in word.get_occurrences().values())
        assert word.get_frequency() == total


def test_index_file(temp_dir):
    path = Path(temp_dir) / "poem.txt"
    path.write_text("Roses are red,\nviolets are blue.\n", encoding="utf-8")

    tree = BSTree()
    count = index_file(tree, path)

    assert count == 6
    assert lookup(tree, "are").get_occurrences() == {str(path): [1, 2]}


def test_index_file_missing_propagates(temp_dir):
    with pytest.raises(FileNotFoundError):
        index_file(BSTree(), Path(temp_dir) / "missing.txt")
