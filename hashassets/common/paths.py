"""Path helpers shared by the generator: hashed-name detection, output
directories and manifest keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .errors import ConfigurationError

# A separator, an 8 character fingerprint, then the real extension.
HASHED_FILENAME_PATTERN = r"([.-])(\w{8})\.(\w+)$"
ASSETS_MARKER = "assets/"

PatternLike = Union[str, re.Pattern[str]]


@dataclass(frozen=True)
class AssetClassification:
    path: Path
    already_hashed: bool
    output_directory: Path
    key: str


def compile_hashed_pattern(pattern: Optional[PatternLike] = None) -> re.Pattern[str]:
    if pattern is None:
        pattern = HASHED_FILENAME_PATTERN
    if not isinstance(pattern, str):
        return pattern
    try:
        return re.compile(pattern, re.ASCII)
    except re.error as exc:
        raise ConfigurationError(f"Invalid hashed filename pattern {pattern!r}: {exc}") from exc


_DEFAULT_HASHED_RE = compile_hashed_pattern()


def is_hashed_filename(name: str, pattern: Optional[PatternLike] = None) -> bool:
    """Return True when ``name`` already carries a fingerprint, e.g. ``app.ab12cd34.js``.

    This is a structural heuristic only: a legitimately dotted name such as
    ``release-20231201.tar`` matches as well and is treated as hashed.
    """

    regex = _DEFAULT_HASHED_RE if pattern is None else compile_hashed_pattern(pattern)
    return regex.search(name) is not None


def relative_to_assets(path: Union[str, Path]) -> str:
    """Return the tail of ``path`` starting at its last ``assets/`` segment."""

    text = Path(path).as_posix()
    index = text.rfind(ASSETS_MARKER)
    if index < 0:
        raise ConfigurationError(
            f"Cannot derive manifest key for {text}: path has no '{ASSETS_MARKER}' segment",
            path=path,
        )
    return text[index:]


def output_directory(
    path: Union[str, Path],
    extensions: Sequence[str],
    suffix: str,
    root: Optional[Path] = None,
) -> Path:
    """Map the directory of ``path`` to its ``<ext>-<suffix>`` sibling.

    Below ``root`` the group directory is the first segment under it. Other
    paths fall back to the first tracked extension, in configured order, that
    appears as a whole directory segment.
    """

    directory = Path(path).parent
    if root is not None:
        try:
            relative = directory.relative_to(root)
        except ValueError:
            relative = None
        if relative is not None and relative.parts and relative.parts[0] in extensions:
            group, *rest = relative.parts
            return Path(root, f"{group}-{suffix}", *rest)

    parts = directory.parts
    for ext in extensions:
        if ext in parts:
            index = parts.index(ext)
            return Path(*parts[:index], f"{ext}-{suffix}", *parts[index + 1 :])
    return directory


def hashed_output_path(path: Union[str, Path], directory: Path, digest: str) -> Path:
    source = Path(path)
    return directory / f"{source.stem}.{digest}{source.suffix}"


def classify(
    path: Union[str, Path],
    extensions: Sequence[str],
    suffix: str,
    *,
    root: Optional[Path] = None,
    hashed_pattern: Optional[PatternLike] = None,
) -> AssetClassification:
    source = Path(path)
    return AssetClassification(
        path=source,
        already_hashed=is_hashed_filename(source.name, hashed_pattern),
        output_directory=output_directory(source, extensions, suffix, root=root),
        key=relative_to_assets(source),
    )


__all__ = [
    "ASSETS_MARKER",
    "AssetClassification",
    "HASHED_FILENAME_PATTERN",
    "classify",
    "compile_hashed_pattern",
    "hashed_output_path",
    "is_hashed_filename",
    "output_directory",
    "relative_to_assets",
]
