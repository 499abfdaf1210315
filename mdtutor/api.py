"""High-level API for mdtutor.

This module provides simple, functional interfaces for the common cases:
build a tree, dump it, render its navigation, or pull labelled blocks
out of it. These functions wrap the loader and visitor classes.
"""

import io
import os
from typing import Iterable, Iterator, List, Optional, Union

from .config import DebugConfig, LoaderConfig, NavConfig
from .core.node import Course, Lesson, TopCourse, Tutorial
from .core.visitor import TutorialVisitor
from .lexer import Lexer
from .loader import TutorialLoader
from .model import Label, ParsedFile
from .parser import ContentParser
from .printers.debug import DebugPrinter
from .printers.nav import NavPrinter


def load_tutorial(
    paths: Union[str, Iterable],
    config: Optional[LoaderConfig] = None,
) -> Tutorial:
    """Build a tutorial tree from one path or a list of paths.

    Args:
        paths: A single path, or an iterable of paths
        config: Loader settings

    Returns:
        Root node of the tree (a Lesson for a single file, else a TopCourse)

    Example:
        >>> tree = load_tutorial("docs/benelux")
        >>> print(debug_string(tree))
    """
    loader = TutorialLoader(config)
    if isinstance(paths, (str, os.PathLike)):
        return loader.load_one(paths)
    return loader.load_many(paths)


def debug_string(tree: Tutorial, config: Optional[DebugConfig] = None) -> str:
    """Return the indented debug dump of a tree."""
    buf = io.StringIO()
    tree.accept(DebugPrinter(buf, config))
    return buf.getvalue()


def nav_html(tree: Tutorial, config: Optional[NavConfig] = None) -> str:
    """Return the HTML left-navigation fragment for a tree."""
    buf = io.StringIO()
    tree.accept(NavPrinter(buf, config))
    return buf.getvalue()


def parse_tutorial(
    tree: Tutorial,
    label: Label,
    lexer: Optional[Lexer] = None,
) -> List[ParsedFile]:
    """Collect the blocks under ``label`` from every lesson of a tree."""
    parser = ContentParser(label, lexer)
    tree.accept(parser)
    return parser.files()


def extract_blocks(
    paths: Union[str, Iterable],
    label: Label,
    lexer: Optional[Lexer] = None,
    config: Optional[LoaderConfig] = None,
) -> List[ParsedFile]:
    """Build a tree from ``paths`` and collect its blocks under ``label``.

    Raises:
        TutorialError: If the tree cannot be built
    """
    return parse_tutorial(load_tutorial(paths, config), label, lexer)


class _LessonCollector(TutorialVisitor):
    def __init__(self):
        self.lessons: List[Lesson] = []

    def visit_lesson(self, lesson: Lesson) -> None:
        self.lessons.append(lesson)

    def visit_course(self, course: Course) -> None:
        self.visit_children(course)

    def visit_top_course(self, top: TopCourse) -> None:
        self.visit_children(top)


def iter_lessons(tree: Tutorial) -> Iterator[Lesson]:
    """Yield every lesson of a tree in document order."""
    collector = _LessonCollector()
    tree.accept(collector)
    yield from collector.lessons


def count_lessons(tree: Tutorial) -> int:
    """Count the lessons of a tree."""
    return sum(1 for _ in iter_lessons(tree))
