"""Directory creation helper used before a log file is first opened."""

import logging
import os

from textlog.errors import DirectoryCreationError

logger = logging.getLogger(__name__)


def create_directory_tree(path: str) -> None:
    """Create *path* and any missing parents. Existing directories are fine."""
    if not path:
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(f"Cannot create log directory {path}: {e}") from e
    logger.debug("Ensured log directory %s", path)
