"""Configuration system for mdtutor.

This module defines how callers tune tree building and rendering:
which files count as lessons, how the debug dump is laid out, and
how the navigation fragment is indented.
"""

import codecs
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class FilterConfig:
    """Configuration for deciding which paths enter the tree."""

    extension: str = ".md"                # Only files with this extension become lessons
    bad_leading_chars: str = "~.#"        # Editor backups, dotfiles, scratch files
    special_dirs: Tuple[str, ...] = (".", "./", "..")  # Always desirable

    def has_bad_leading_char(self, name: str) -> bool:
        """Check if a base name starts with a rejected character.

        Args:
            name: Base name of a candidate file

        Returns:
            True if the first character is rejected
        """
        return bool(name) and name[0] in self.bad_leading_chars


@dataclass(frozen=True)
class DebugConfig:
    """Layout of the indented debug dump."""

    sample_length: int = 60   # Characters of lesson content shown
    indent_step: int = 3      # Columns added per course level


@dataclass(frozen=True)
class NavConfig:
    """Layout of the HTML navigation fragment."""

    indent: str = "  "        # One nesting level


@dataclass
class LoaderConfig:
    """Complete configuration for building a tutorial tree.

    The TutorialLoader validates this before touching the filesystem.
    """

    filter: FilterConfig = field(default_factory=FilterConfig)
    encoding: str = "utf-8"
    decode_errors: str = "replace"        # Codec error handler for lesson text

    @classmethod
    def default(cls) -> 'LoaderConfig':
        """Create the stock markdown configuration."""
        return cls()

    @classmethod
    def with_extension(cls, extension: str) -> 'LoaderConfig':
        """Create a config that accepts lessons with another extension.

        Args:
            extension: Extension including the leading dot, e.g. ".markdown"

        Returns:
            LoaderConfig using that extension
        """
        return cls(filter=FilterConfig(extension=extension))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.filter.extension:
            errors.append("extension cannot be empty")
        elif not self.filter.extension.startswith("."):
            errors.append("extension must start with '.'")

        if not self.encoding:
            errors.append("encoding cannot be empty")

        try:
            codecs.lookup_error(self.decode_errors)
        except LookupError:
            errors.append(f"unknown decode error handler: {self.decode_errors!r}")

        return errors
