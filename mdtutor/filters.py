"""Desirability filters for tutorial tree building.

Pure predicates deciding whether a candidate path becomes part of the
tree. A rejection is never an error: it is logged at INFO and the
candidate is skipped.
"""

import logging
import os
import stat
from typing import Optional

from .adapters.filesystem import FilePath
from .config import FilterConfig

logger = logging.getLogger(__name__)

_DEFAULT_FILTER = FilterConfig()


def _stat(path: FilePath) -> Optional[os.stat_result]:
    try:
        return os.stat(str(path))
    except OSError as e:
        logger.info("Stat error on %s: %s", path, e)
        return None


def is_desirable_file(path, config: Optional[FilterConfig] = None) -> bool:
    """Check if a path should become a Lesson.

    The path must be an existing regular file with the configured
    extension whose base name does not start with a rejected character.

    Args:
        path: Candidate path (str, os.PathLike or FilePath)
        config: Filter settings (defaults to markdown files)

    Returns:
        True if the file is desirable
    """
    config = config or _DEFAULT_FILTER
    path = FilePath(path)

    st = _stat(path)
    if st is None:
        return False
    if stat.S_ISDIR(st.st_mode):
        logger.info("Ignoring NON-file %s", path)
        return False
    if not stat.S_ISREG(st.st_mode):
        logger.info("Ignoring irregular file %s", path)
        return False
    if path.ext() != config.extension:
        logger.info("Ignoring non markdown file %s", path)
        return False
    if config.has_bad_leading_char(path.base()):
        logger.info("Ignoring because bad leading char: %s", path)
        return False
    return True


def is_desirable_dir(path, config: Optional[FilterConfig] = None) -> bool:
    """Check if a path should be scanned as a Course.

    The path must be an existing directory. The special names ".", "./"
    and ".." always pass; any other dot directory (.git, .idea, ...) is
    rejected.

    Args:
        path: Candidate path (str, os.PathLike or FilePath)
        config: Filter settings

    Returns:
        True if the directory is desirable
    """
    config = config or _DEFAULT_FILTER
    path = FilePath(path)

    st = _stat(path)
    if st is None:
        return False
    if not stat.S_ISDIR(st.st_mode):
        logger.info("Ignoring NON-dir %s", path)
        return False
    if str(path) in config.special_dirs or path.base() in config.special_dirs:
        return True
    if path.base().startswith("."):
        logger.info("Ignoring dot dir %s", path)
        return False
    return True
