from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from hashassets.common.errors import DuplicateAssetKeyError, ManifestWriteError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.json"


@dataclass(frozen=True)
class ManifestEntry:
    key: str
    value: str
    source: Path


def build_manifest(entries: Iterable[ManifestEntry]) -> Mapping[str, str]:
    """Fold per-file entries into a read-only mapping, keeping their order."""

    manifest = {}
    sources = {}
    for entry in entries:
        if entry.key in sources:
            raise DuplicateAssetKeyError(entry.key, sources[entry.key], entry.source)
        sources[entry.key] = entry.source
        manifest[entry.key] = entry.value
    return MappingProxyType(manifest)


def render_manifest(manifest: Mapping[str, str]) -> str:
    return json.dumps(dict(manifest), indent=2) + "\n"


def write_manifest(manifest: Mapping[str, str], assets_dir: Path) -> Path:
    output_path = Path(assets_dir) / MANIFEST_FILENAME
    try:
        output_path.write_text(render_manifest(manifest), encoding="utf-8")
    except OSError as exc:
        raise ManifestWriteError(f"Failed to write manifest {output_path}: {exc}", path=output_path) from exc
    logger.info("Wrote manifest with %d entries to %s", len(manifest), output_path)
    return output_path


__all__ = [
    "MANIFEST_FILENAME",
    "ManifestEntry",
    "build_manifest",
    "render_manifest",
    "write_manifest",
]
