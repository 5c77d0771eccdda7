from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer

from hashassets import DIST_NAME, __version__
from hashassets.common.config import GeneratorOptions, resolve_options
from hashassets.common.errors import AssetHashError, ConfigurationError

from .generator import GenerationResult, generate

app = typer.Typer(help="Copy static assets into hashed directories and write manifest.json.")


def run(options: GeneratorOptions) -> GenerationResult:
    typer.echo(f"{DIST_NAME} v{__version__}")
    typer.echo("hashing build assets...")
    typer.echo(f"included file extensions: {', '.join(options.extensions)}")
    result = generate(options)
    typer.echo(f"{result.hashed_count} asset files hashed in {_display_path(options.assets_dir)}")
    return result


@app.command()
def build(
    assets_dir: Optional[Path] = typer.Option(
        None,
        "--assets-dir",
        "-d",
        help="Directory with one sub-directory per extension (default: assets).",
    ),
    extensions: Optional[List[str]] = typer.Option(
        None,
        "--ext",
        "-e",
        help="Tracked extension; repeat or comma-separate (default: js, css).",
    ),
    suffix: Optional[str] = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Label appended to hashed output directories (default: hashed).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file providing assets_dir, extensions, suffix or hashed_pattern.",
    ),
    hashed_pattern: Optional[str] = typer.Option(
        None,
        "--hashed-pattern",
        help="Regular expression marking a filename as already hashed.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log discovery and every manifest entry.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log warnings and errors.",
    ),
) -> None:
    if verbose and quiet:
        raise typer.BadParameter("--verbose and --quiet cannot be combined")
    _configure_logging(verbose=verbose, quiet=quiet)

    try:
        options = resolve_options(
            config,
            assets_dir=assets_dir,
            extensions=extensions,
            suffix=suffix,
            hashed_pattern=hashed_pattern,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        run(options)
    except AssetHashError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger().setLevel(level)


def _display_path(path: Path) -> str:
    resolved = Path(os.path.abspath(path.expanduser()))
    try:
        return resolved.relative_to(Path.cwd()).as_posix() or "."
    except ValueError:
        return str(resolved)


if __name__ == "__main__":  # pragma: no cover
    app()
