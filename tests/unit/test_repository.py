"""Unit tests for the repository snapshot."""

import logging
import shutil
import struct
import tempfile
import zlib
from pathlib import Path

import pytest

from word_tracker.components.bstree import BSTree
from word_tracker.components.repository import (
    HEADER,
    MAGIC,
    decode_tree,
    encode_tree,
    load_repository,
    save_repository,
)
from word_tracker.core.errors import RepositoryError
from word_tracker.core.indexer import index_lines


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo_path(temp_dir):
    return Path(temp_dir) / "repository.ser"


@pytest.fixture
def tree():
    t = BSTree()
    index_lines(t, ["The cat sat.", "The dog sat."], "a.txt")
    index_lines(t, ["Über cats nap"], "b.txt")
    return t


def snapshot(tree):
    return [
        (w.get_text(), w.get_occurrences(), w.get_frequency())
        for w in tree.inorder_iterator()
    ]


def test_save_and_load_round_trip(tree, repo_path):
    save_repository(tree, repo_path)
    restored = load_repository(repo_path)

    assert snapshot(restored) == snapshot(tree)
    assert restored.size() == tree.size()


def test_round_trip_preserves_shape(tree, repo_path):
    save_repository(tree, repo_path)
    restored = load_repository(repo_path)

    assert [w.get_text() for w in restored.preorder_iterator()] == [
        w.get_text() for w in tree.preorder_iterator()
    ]
    assert restored.get_height() == tree.get_height()


def test_empty_tree_round_trip(repo_path):
    save_repository(BSTree(), repo_path)
    restored = load_repository(repo_path)
    assert restored.is_empty()


def test_save_leaves_no_temp_file(tree, repo_path):
    save_repository(tree, repo_path)
    assert repo_path.exists()
    assert not repo_path.with_name(repo_path.name + ".tmp").exists()


def test_load_missing_file_gives_empty_tree(repo_path):
    assert load_repository(repo_path).is_empty()


def test_load_corrupt_file_gives_empty_tree(tree, repo_path, caplog):
    save_repository(tree, repo_path)
    data = bytearray(repo_path.read_bytes())
    data[HEADER.size + 5] ^= 0xFF
    repo_path.write_bytes(bytes(data))

    with caplog.at_level(logging.WARNING):
        restored = load_repository(repo_path)

    assert restored.is_empty()
    assert "Could not load repository" in caplog.text


def test_load_garbage_and_truncated_files(tree, repo_path):
    repo_path.write_bytes(b"not a snapshot at all")
    assert load_repository(repo_path).is_empty()

    repo_path.write_bytes(encode_tree(tree)[:-3])
    assert load_repository(repo_path).is_empty()

    repo_path.write_bytes(b"")
    assert load_repository(repo_path).is_empty()


def test_load_directory_gives_empty_tree(temp_dir):
    assert load_repository(temp_dir).is_empty()


def _wrap(payload: bytes) -> bytes:
    body = HEADER.pack(MAGIC, 1, len(payload)) + payload
    return body + struct.pack("<I", zlib.crc32(body))


def test_decode_rejects_bad_magic(tree):
    data = bytearray(encode_tree(tree))
    data[0] ^= 0x01
    with pytest.raises(RepositoryError, match="magic"):
        decode_tree(bytes(data))


def test_decode_rejects_inconsistent_frequency():
    payload = b'{"words": [{"text": "x", "occurrences": {"a.txt": [1]}, "frequency": 3}]}'
    with pytest.raises(RepositoryError):
        decode_tree(_wrap(payload))


def test_decode_rejects_duplicate_words():
    payload = (
        b'{"words": [{"text": "x", "occurrences": {"a": [1]}, "frequency": 1},'
        b' {"text": "x", "occurrences": {"a": [2]}, "frequency": 1}]}'
    )
    with pytest.raises(RepositoryError, match="Duplicate"):
        decode_tree(_wrap(payload))


@pytest.mark.parametrize("payload", [b"[1, 2]", b'{"words": {"x": 1}}', b"{", b'{"other": []}'])
def test_decode_rejects_malformed_payloads(payload):
    with pytest.raises(RepositoryError):
        decode_tree(_wrap(payload))


def test_save_failure_raises_and_keeps_tree(tree, temp_dir):
    target = Path(temp_dir) / "missing-dir" / "repository.ser"
    before = snapshot(tree)

    with pytest.raises(RepositoryError):
        save_repository(tree, target)

    assert snapshot(tree) == before


def test_surrogate_escaped_filename_round_trip(repo_path):
    """Non-UTF-8 filenames decoded with surrogateescape survive a save/load."""
    tree = BSTree()
    index_lines(tree, ["cat"], "caf\udce9.txt")

    save_repository(tree, repo_path)
    restored = load_repository(repo_path)

    assert snapshot(restored) == [("cat", {"caf\udce9.txt": [1]}, 1)]


def test_snapshot_payload_is_ascii(tree):
    payload = encode_tree(tree)[HEADER.size:-4]

    assert payload.isascii()
    assert "\\u00fcber" in payload.decode("ascii")
