"""Tutorial tree construction.

The loader walks a root path (or a list of roots) with the desirability
filters and builds an immutable tree of Lessons and Courses.

Directories that contribute nothing are pruned: scan_dir() returns None
for them instead of an empty Course, and the parent simply leaves them
out. Any read failure aborts the whole build.
"""

import logging
from typing import Iterable, List, Optional

from .adapters.filesystem import FilePath
from .config import LoaderConfig
from .core.node import Course, Lesson, TopCourse, Tutorial
from .errors import NoInputError
from .filters import is_desirable_dir, is_desirable_file

logger = logging.getLogger(__name__)


class TutorialLoader:
    """Builds tutorial trees from the filesystem.

    Example:
        >>> loader = TutorialLoader()
        >>> tree = loader.load_one("docs/benelux")
        >>> [child.name() for child in tree.children()]
        ['01_history.md', '02_economy.md', '03_belgium']
    """

    def __init__(self, config: Optional[LoaderConfig] = None):
        """Initialize the loader.

        Args:
            config: Loader settings (defaults to LoaderConfig.default())

        Raises:
            ValueError: If the configuration is inconsistent
        """
        self.config = config or LoaderConfig.default()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    def _is_file(self, path: FilePath) -> bool:
        return is_desirable_file(path, self.config.filter)

    def _is_dir(self, path: FilePath) -> bool:
        return is_desirable_dir(path, self.config.filter)

    def scan_file(self, path) -> Lesson:
        """Read a file into a Lesson.

        Raises:
            ReadError: If the file cannot be read
        """
        path = FilePath(path)
        return Lesson(path, path.read(self.config.encoding, self.config.decode_errors))

    def scan_dir(self, path) -> Optional[Course]:
        """Recursively build a Course from a directory.

        Returns:
            The Course, or None if nothing below the directory survived
            filtering

        Raises:
            ReadDirError: If a directory cannot be listed
            ReadError: If a lesson cannot be read
        """
        path = FilePath(path)
        items: List[Tutorial] = []
        for entry in path.read_dir():
            child = path.join(entry)
            if self._is_file(child):
                items.append(self.scan_file(child))
            elif self._is_dir(child):
                course = self.scan_dir(child)
                if course is not None:
                    items.append(course)
        if not items:
            logger.debug("Pruning empty directory %s", path)
            return None
        return Course(path, items)

    def _scan_candidate(self, path: FilePath) -> Optional[Tutorial]:
        if self._is_file(path):
            return self.scan_file(path)
        if self._is_dir(path):
            return self.scan_dir(path)
        return None

    def load_one(self, root) -> Tutorial:
        """Build a tree from a single file or directory.

        A file yields a bare Lesson. A directory yields a TopCourse that
        carries the root path but no name.

        Raises:
            NoInputError: If the root is neither a desirable file nor a
                desirable directory, or everything below it was pruned
            ReadError, ReadDirError: On filesystem failures
        """
        root = FilePath(root)
        logger.debug("Loading tutorial from %s", root)
        if self._is_file(root):
            return self.scan_file(root)
        if self._is_dir(root):
            course = self.scan_dir(root)
            if course is not None:
                return TopCourse(root, course.children())
        raise NoInputError(f"Cannot process {root}")

    def load_many(self, paths: Iterable) -> Tutorial:
        """Build a tree from several files and directories.

        With one path this is load_one(). Otherwise every path is scanned
        independently and the survivors become children of a TopCourse
        with an empty path.

        Raises:
            NoInputError: If no paths are given or all of them prune away
            ReadError, ReadDirError: On filesystem failures
        """
        roots = [FilePath(p) for p in paths]
        if not roots:
            raise NoInputError("No paths given")
        if len(roots) == 1:
            return self.load_one(roots[0])

        items: List[Tutorial] = []
        for root in roots:
            node = self._scan_candidate(root)
            if node is not None:
                items.append(node)
        if not items:
            raise NoInputError("Nothing useful found")
        return TopCourse(FilePath(""), items)


def load_one(root, config: Optional[LoaderConfig] = None) -> Tutorial:
    """Build a tree from one path with a fresh TutorialLoader."""
    return TutorialLoader(config).load_one(root)


def load_many(paths: Iterable, config: Optional[LoaderConfig] = None) -> Tutorial:
    """Build a tree from several paths with a fresh TutorialLoader."""
    return TutorialLoader(config).load_many(paths)
