"""Generator package: fingerprint assets into hashed directories and write the manifest."""

from hashassets.common.config import GeneratorOptions

from .cleaner import clean_hashed_directories
from .generator import AssetHasher, GenerationResult, discover_assets, generate
from .manifest import MANIFEST_FILENAME, ManifestEntry, build_manifest, write_manifest

__all__ = [
    "AssetHasher",
    "GenerationResult",
    "GeneratorOptions",
    "MANIFEST_FILENAME",
    "ManifestEntry",
    "build_manifest",
    "clean_hashed_directories",
    "discover_assets",
    "generate",
    "write_manifest",
]
