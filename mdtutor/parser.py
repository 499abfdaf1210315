"""Extraction of labelled blocks from every lesson in a tree."""

from typing import List, Optional

from .core.node import Course, Lesson, TopCourse
from .core.visitor import TutorialVisitor
from .lexer import Lexer, parse
from .model import Label, ParsedFile


class ContentParser(TutorialVisitor):
    """Collects the blocks carrying one label, lesson by lesson.

    Each lesson's text goes through the lexer. All block lists except
    the one for the configured label are discarded; a lesson without
    blocks under that label contributes nothing.
    """

    def __init__(self, label: Label, lexer: Optional[Lexer] = None):
        self.label = label
        self.lexer = lexer or parse
        self._parsed_files: List[ParsedFile] = []

    def files(self) -> List[ParsedFile]:
        """Return the parsed files accumulated so far, in document order."""
        return list(self._parsed_files)

    def visit_lesson(self, lesson: Lesson) -> None:
        blocks = self.lexer(lesson.content()).get(self.label)
        if blocks:
            self._parsed_files.append(ParsedFile(lesson.path(), tuple(blocks)))

    def visit_course(self, course: Course) -> None:
        self.visit_children(course)

    def visit_top_course(self, top: TopCourse) -> None:
        self.visit_children(top)
