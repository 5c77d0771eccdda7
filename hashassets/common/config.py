"""Run configuration: defaults, YAML config files and CLI overrides."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import yaml

from .errors import ConfigurationError
from .paths import HASHED_FILENAME_PATTERN, compile_hashed_pattern

DEFAULT_ASSETS_DIR = Path("assets")
DEFAULT_EXTENSIONS: Tuple[str, ...] = ("js", "css")
DEFAULT_SUFFIX = "hashed"
CONFIG_SECTION = "hashassets"

_KNOWN_KEYS = {"assets_dir", "extensions", "suffix", "hashed_pattern"}


def normalise_extensions(values: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """Split comma lists, strip dots and whitespace, drop blanks and repeats."""

    if isinstance(values, str):
        values = [values]
    elif not isinstance(values, (list, tuple)):
        raise ConfigurationError(f"Extensions must be a string or a list of strings, got {values!r}")
    result: List[str] = []
    for value in values:
        if not isinstance(value, str):
            raise ConfigurationError(f"Extension must be a string, got {value!r}")
        for item in value.split(","):
            ext = item.strip().lstrip(".")
            if ext and ext not in result:
                result.append(ext)
    return tuple(result)


@dataclass(frozen=True)
class GeneratorOptions:
    assets_dir: Path
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    suffix: str = DEFAULT_SUFFIX
    hashed_pattern: str = HASHED_FILENAME_PATTERN

    def __post_init__(self) -> None:
        object.__setattr__(self, "assets_dir", Path(self.assets_dir))
        extensions = normalise_extensions(self.extensions)
        if not extensions:
            raise ConfigurationError("At least one file extension must be tracked")
        for ext in extensions:
            if "/" in ext or "\\" in ext:
                raise ConfigurationError(f"Extension {ext!r} must not contain a path separator")
        object.__setattr__(self, "extensions", extensions)

        suffix = (self.suffix or "").strip()
        if not suffix:
            raise ConfigurationError("Suffix label must not be empty")
        if "/" in suffix or "\\" in suffix:
            raise ConfigurationError(f"Suffix label {suffix!r} must not contain a path separator")
        object.__setattr__(self, "suffix", suffix)

        compile_hashed_pattern(self.hashed_pattern)


def load_config(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}", path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file {path} is not valid YAML: {exc}", path=path) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping", path=path)
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' section in {path} must be a mapping", path=path)
    # A shared top-level file may hold other tools' keys; a dedicated section may not.
    unknown = set(section) - _KNOWN_KEYS
    if unknown and section is not data:
        raise ConfigurationError(
            f"Unknown option(s) in {path}: {', '.join(sorted(unknown))}", path=path
        )
    config = {key: value for key, value in section.items() if key in _KNOWN_KEYS}
    assets_dir = config.get("assets_dir")
    if assets_dir is not None:
        candidate = Path(str(assets_dir)).expanduser()
        if not candidate.is_absolute():
            candidate = path.parent / candidate
        config["assets_dir"] = candidate
    return config


def resolve_options(
    config_path: Optional[Path] = None,
    *,
    assets_dir: Optional[Path] = None,
    extensions: Optional[Iterable[str]] = None,
    suffix: Optional[str] = None,
    hashed_pattern: Optional[str] = None,
) -> GeneratorOptions:
    """Merge explicit values over the config file over the defaults."""

    config = load_config(config_path) if config_path is not None else {}
    overrides = {
        "assets_dir": assets_dir,
        "extensions": list(extensions) if extensions else None,
        "suffix": suffix,
        "hashed_pattern": hashed_pattern,
    }
    for key, value in overrides.items():
        if value is not None:
            config[key] = value
    return GeneratorOptions(
        assets_dir=Path(config.get("assets_dir", DEFAULT_ASSETS_DIR)),
        extensions=config.get("extensions", DEFAULT_EXTENSIONS),
        suffix=str(config.get("suffix", DEFAULT_SUFFIX)),
        hashed_pattern=str(config.get("hashed_pattern", HASHED_FILENAME_PATTERN)),
    )


__all__ = [
    "DEFAULT_ASSETS_DIR",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_SUFFIX",
    "GeneratorOptions",
    "load_config",
    "normalise_extensions",
    "resolve_options",
]
