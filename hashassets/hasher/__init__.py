"""Content fingerprints for static assets."""

from .hasher import DIGEST_LENGTH, content_hash, hash_file

__all__ = [
    "DIGEST_LENGTH",
    "content_hash",
    "hash_file",
]
