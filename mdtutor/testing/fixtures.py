"""Test fixtures for mdtutor consumers.

These helpers build tutorial layouts on disk and record how a tree is
walked, so projects embedding mdtutor can test against real files.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..core.node import Course, Lesson, TopCourse, Tutorial
from ..core.visitor import TutorialVisitor

Layout = Dict[str, Union[str, 'Layout']]


def make_tutorial_tree(root: Union[str, os.PathLike], layout: Layout) -> Path:
    """Materialise a nested dict of files and directories under ``root``.

    String values become files with that text; dict values become
    directories (an empty dict gives an empty directory).

    Example:
        make_tutorial_tree(tmp, {
            "README.md": "# Overview",
            "belgium": {"beer.md": "# Beer", ".git": {}},
        })

    Returns:
        The root as a Path
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        target = root / name
        if isinstance(value, dict):
            make_tutorial_tree(target, value)
        else:
            target.write_text(value, encoding="utf-8")
    return root


def tree_shape(node: Tutorial) -> Tuple[Any, ...]:
    """Return a nested tuple of (kind, name, children) for comparisons."""
    return (
        type(node).__name__,
        node.name(),
        tuple(tree_shape(child) for child in node.children()),
    )


class RecordingVisitor(TutorialVisitor):
    """Records the order in which nodes are visited.

    Each entry is ``(kind, path)`` with kind one of "lesson", "course"
    or "top".
    """

    def __init__(self):
        self.visits: List[Tuple[str, str]] = []

    def lesson_paths(self) -> List[str]:
        return [path for kind, path in self.visits if kind == "lesson"]

    def visit_lesson(self, lesson: Lesson) -> None:
        self.visits.append(("lesson", str(lesson.path())))

    def visit_course(self, course: Course) -> None:
        self.visits.append(("course", str(course.path())))
        self.visit_children(course)

    def visit_top_course(self, top: TopCourse) -> None:
        self.visits.append(("top", str(top.path())))
        self.visit_children(top)
