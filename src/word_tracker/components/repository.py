"""Whole-tree repository snapshot.

Saves and restores a complete BSTree of Words in one blocking operation.
"""

from __future__ import annotations

import json
import logging
import os
import struct
import zlib
from pathlib import Path

from ..core.errors import RepositoryError
from .bstree import BSTree
from .word import Word

logger = logging.getLogger(__name__)

# Snapshot format:
# [magic (4B)] [version (4B)] [payload_len (8B)] [payload (JSON, UTF-8)] [crc32 (4B)]
# The payload lists words in pre-order so reloading rebuilds the same shape.
MAGIC = 0x57524B01  # "WRK" + version
FORMAT_VERSION = 1
HEADER = struct.Struct("<IIQ")
TRAILER = struct.Struct("<I")


def encode_tree(tree: BSTree[Word]) -> bytes:
    """Serialize a tree into snapshot bytes."""
    records = [word.to_dict() for word in tree.preorder_iterator()]
    # ASCII escaping keeps surrogate-escaped filenames lossless
    payload = json.dumps({"words": records}).encode("ascii")
    body = HEADER.pack(MAGIC, FORMAT_VERSION, len(payload)) + payload
    return body + TRAILER.pack(zlib.crc32(body))


def decode_tree(data: bytes) -> BSTree[Word]:
    """Rebuild a tree from snapshot bytes; raise RepositoryError if invalid."""
    if len(data) < HEADER.size + TRAILER.size:
        raise RepositoryError("Snapshot truncated")

    magic, version, payload_len = HEADER.unpack_from(data, 0)
    if magic != MAGIC:
        raise RepositoryError(f"Invalid magic: {magic:x}")
    if version != FORMAT_VERSION:
        raise RepositoryError(f"Unsupported snapshot version {version}")

    end = HEADER.size + payload_len
    if len(data) != end + TRAILER.size:
        raise RepositoryError(
            f"Snapshot length mismatch: expected {end + TRAILER.size}, got {len(data)}"
        )

    (stored_crc,) = TRAILER.unpack_from(data, end)
    computed_crc = zlib.crc32(data[:end])
    if stored_crc != computed_crc:
        raise RepositoryError(f"CRC mismatch: expected {computed_crc:x}, got {stored_crc:x}")

    try:
        document = json.loads(data[HEADER.size:end].decode("utf-8"))
        records = document["words"]
        words = [Word.from_dict(record) for record in records]
    except (UnicodeDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
        raise RepositoryError(f"Invalid snapshot payload: {e}") from e

    tree: BSTree[Word] = BSTree()
    for word in words:
        if not tree.add(word):
            raise RepositoryError(f"Duplicate word in snapshot: {word.get_text()!r}")
    return tree


def load_repository(path: str | Path) -> BSTree[Word]:
    """Load a saved tree.

    A missing, unreadable or corrupt snapshot is not fatal: an empty
    tree is returned instead.
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No repository at {path}, starting with an empty tree")
        return BSTree()

    try:
        with open(path, "rb") as f:
            data = f.read()
        tree = decode_tree(data)
    except (OSError, RepositoryError) as e:
        logger.warning(f"Could not load repository {path}: {e}; starting with an empty tree")
        return BSTree()

    logger.info(f"Loaded {tree.size()} words from {path}")
    return tree


def save_repository(tree: BSTree[Word], path: str | Path) -> None:
    """Save the whole tree atomically via write-temp-then-rename.

    Raises RepositoryError if the snapshot cannot be written; the tree
    itself is left as it was.
    """
    path = Path(path)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        data = encode_tree(tree)
        with open(temp_path, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except (OSError, UnicodeError) as e:
        logger.error(f"Failed to save repository {path}: {e}")
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            logger.debug(f"Could not remove temporary file {temp_path}")
        raise RepositoryError(f"Failed to save repository {path}: {e}") from e

    logger.info(f"Saved {tree.size()} words to {path}")
