"""Filesystem source for mdtutor.

FilePath is the only place the loader touches the disk for reading.
Filters stat paths on their own, see mdtutor.filters.
"""

import os
from typing import List, Union

from ..errors import ReadError, ReadDirError


class FilePath:
    """A raw filesystem path with the few operations the loader needs.

    The path string is kept exactly as given (no normalisation), so a
    tree built from ``"docs"`` reports ``"docs/intro.md"`` and not an
    absolute path.
    """

    __slots__ = ('_raw',)

    def __init__(self, path: Union[str, os.PathLike, 'FilePath'] = ""):
        if isinstance(path, FilePath):
            path = path._raw
        self._raw = os.fspath(path)

    def read(self, encoding: str = 'utf-8', errors: str = 'replace') -> str:
        """Return the full text of the file.

        Args:
            encoding: Text encoding of the file
            errors: Decode error handler passed to open(); with the default
                'replace' undecodable bytes become U+FFFD

        Raises:
            ReadError: If the file cannot be opened, or cannot be decoded
                under a strict error handler
        """
        try:
            with open(self._raw, 'r', encoding=encoding, errors=errors) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(self._raw, e) from e

    def read_dir(self) -> List[str]:
        """Return the names of the immediate entries, sorted by name.

        Raises:
            ReadDirError: If the directory cannot be listed
        """
        try:
            return sorted(os.listdir(self._raw))
        except OSError as e:
            raise ReadDirError(self._raw, e) from e

    def join(self, child: str) -> 'FilePath':
        """Return the path of a child entry."""
        if not self._raw:
            return FilePath(child)
        return FilePath(os.path.join(self._raw, child))

    def base(self) -> str:
        """Return the last path element.

        Trailing separators are ignored; an empty path yields ``"."``
        and a path made only of separators yields the separator.
        """
        if not self._raw:
            return "."
        stripped = self._raw.rstrip(os.sep)
        if os.altsep:
            stripped = stripped.rstrip(os.altsep)
        if not stripped:
            return os.sep
        return os.path.basename(stripped)

    def ext(self) -> str:
        """Return the extension of the base name, including the dot."""
        return os.path.splitext(self.base())[1]

    def __fspath__(self) -> str:
        return self._raw

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"FilePath({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilePath):
            return self._raw == other._raw
        if isinstance(other, str):
            return self._raw == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    def __bool__(self) -> bool:
        return bool(self._raw)
