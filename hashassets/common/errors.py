"""Exceptions raised while fingerprinting assets."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class AssetHashError(Exception):
    """Base class for every failure that aborts a hashing run."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigurationError(AssetHashError):
    pass


class DuplicateAssetKeyError(ConfigurationError):
    def __init__(self, key: str, first: Path, second: Path) -> None:
        super().__init__(
            f"Manifest key {key!r} produced by both {first} and {second}",
            path=second,
        )
        self.key = key
        self.first = first
        self.second = second


class CleanupError(AssetHashError):
    pass


class AssetIOError(AssetHashError):
    pass


class ManifestWriteError(AssetHashError):
    pass


__all__ = [
    "AssetHashError",
    "AssetIOError",
    "CleanupError",
    "ConfigurationError",
    "DuplicateAssetKeyError",
    "ManifestWriteError",
]
