"""Exceptions raised while building a tutorial tree.

Every build failure is terminal: the loader never returns a partial tree.
Filter rejections are not errors and never show up here.
"""

from typing import Optional


class TutorialError(Exception):
    """Base class for all tutorial build failures."""
    pass


class ReadError(TutorialError):
    """Raised when a lesson file cannot be read."""

    def __init__(self, path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Unable to read {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ReadDirError(TutorialError):
    """Raised when a course directory cannot be listed."""

    def __init__(self, path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Unable to list {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class NoInputError(TutorialError):
    """Raised when there is nothing to build a tree from.

    Covers an empty path list, a single path that is neither a desirable
    file nor a desirable directory, and input that prunes to nothing.
    """
    pass
