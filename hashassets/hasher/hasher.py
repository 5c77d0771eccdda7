from __future__ import annotations

import hashlib
from pathlib import Path

DIGEST_LENGTH = 8
_CHUNK_SIZE = 8192


def _short(digest) -> str:
    return digest.hexdigest()[:DIGEST_LENGTH]


def content_hash(data: bytes) -> str:
    """Return the short fingerprint embedded in hashed filenames."""

    return _short(hashlib.sha256(data))


def hash_file(path: Path) -> str:
    h = hashlib.sha256()
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            h.update(chunk)
    return _short(h)


__all__ = ["DIGEST_LENGTH", "content_hash", "hash_file"]
