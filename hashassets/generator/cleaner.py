from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Sequence

from hashassets.common.errors import CleanupError

logger = logging.getLogger(__name__)


def clean_hashed_directories(extensions: Sequence[str], assets_dir: Path, suffix: str) -> List[Path]:
    """Remove every ``<assets_dir>/<ext>-<suffix>`` tree and return the ones deleted.

    Missing directories are skipped. Any other failure aborts immediately;
    directories removed earlier in the loop stay removed.
    """

    removed: List[Path] = []
    for ext in extensions:
        dir_path = Path(assets_dir) / f"{ext}-{suffix}"
        try:
            shutil.rmtree(dir_path)
        except FileNotFoundError:
            logger.info("Skipping: %s - does not exist", dir_path)
            continue
        except OSError as exc:
            raise CleanupError(f"Failed to delete {dir_path}: {exc}", path=dir_path) from exc
        logger.info("Deleted: %s", dir_path)
        removed.append(dir_path)
    return removed


__all__ = ["clean_hashed_directories"]
