from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from hashassets.common.config import GeneratorOptions
from hashassets.common.errors import AssetIOError, ConfigurationError, DuplicateAssetKeyError
from hashassets.common.paths import (
    AssetClassification,
    classify,
    compile_hashed_pattern,
    hashed_output_path,
    relative_to_assets,
)
from hashassets.hasher import hash_file

from .cleaner import clean_hashed_directories
from .manifest import ManifestEntry, build_manifest, write_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    hashed_count: int
    manifest: Mapping[str, str]
    manifest_path: Optional[Path] = None
    skipped: Tuple[Path, ...] = ()
    cleaned: Tuple[Path, ...] = ()


def discover_assets(assets_dir: Path, extensions: Sequence[str]) -> List[Path]:
    """Collect ``<assets_dir>/<ext>/**/*.<ext>`` for every pairing of tracked extensions.

    Both the top-level group directory and the file suffix must be tracked.
    Hidden files and directories are ignored and symlinked directories are
    not followed.
    """

    suffixes = {f".{ext}" for ext in extensions}
    found: List[Path] = []
    for ext in dict.fromkeys(extensions):
        group_dir = Path(assets_dir) / ext
        if not group_dir.is_dir():
            continue
        for root, dirs, files in os.walk(group_dir):
            dirs[:] = sorted(d for d in dirs if not d.startswith("."))
            for name in sorted(files):
                if name.startswith("."):
                    continue
                if os.path.splitext(name)[1] in suffixes:
                    found.append(Path(root) / name)
    return found


class AssetHasher:
    def __init__(self, options: GeneratorOptions) -> None:
        self.options = options
        self.assets_dir = Path(os.path.abspath(options.assets_dir.expanduser()))
        self._hashed_re = compile_hashed_pattern(options.hashed_pattern)

    def generate(self) -> GenerationResult:
        if not self.assets_dir.is_dir():
            raise ConfigurationError(f"Assets directory not found: {self.assets_dir}", path=self.assets_dir)

        assets = discover_assets(self.assets_dir, self.options.extensions)
        logger.debug("Discovered %d candidate file(s) under %s", len(assets), self.assets_dir)
        plan = self._plan(assets)

        cleaned = clean_hashed_directories(self.options.extensions, self.assets_dir, self.options.suffix)

        entries: List[ManifestEntry] = []
        skipped: List[Path] = []
        for item in plan:
            if item.already_hashed:
                logger.info(
                    "skipping %s, seems to be hashed already",
                    item.path.relative_to(self.assets_dir).as_posix(),
                )
                skipped.append(item.path)
                continue
            entries.append(self._process(item))

        manifest = build_manifest(entries)
        manifest_path: Optional[Path] = None
        if entries:
            manifest_path = write_manifest(manifest, self.assets_dir)
        else:
            logger.info("No files hashed; manifest in %s left untouched", self.assets_dir)

        return GenerationResult(
            hashed_count=len(entries),
            manifest=manifest,
            manifest_path=manifest_path,
            skipped=tuple(skipped),
            cleaned=tuple(cleaned),
        )

    def _plan(self, assets: Sequence[Path]) -> List[AssetClassification]:
        # Classification is read-only, so key errors surface before anything is deleted.
        plan: List[AssetClassification] = []
        owners: Dict[str, Path] = {}
        for path in assets:
            item = classify(
                path,
                self.options.extensions,
                self.options.suffix,
                root=self.assets_dir,
                hashed_pattern=self._hashed_re,
            )
            if not item.already_hashed:
                if item.key in owners:
                    raise DuplicateAssetKeyError(item.key, owners[item.key], path)
                owners[item.key] = path
            plan.append(item)
        return plan

    def _process(self, item: AssetClassification) -> ManifestEntry:
        source = item.path
        try:
            digest = hash_file(source)
        except OSError as exc:
            raise AssetIOError(f"Failed to read {source}: {exc}", path=source) from exc

        target = hashed_output_path(source, item.output_directory, digest)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as exc:
            raise AssetIOError(f"Failed to copy {source} to {target}: {exc}", path=source) from exc

        value = relative_to_assets(target)
        logger.debug("%s -> %s", item.key, value)
        return ManifestEntry(key=item.key, value=value, source=source)


def generate(options: GeneratorOptions) -> GenerationResult:
    return AssetHasher(options).generate()


__all__ = [
    "AssetHasher",
    "GenerationResult",
    "discover_assets",
    "generate",
]
