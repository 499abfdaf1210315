"""Indented plain-text dump of a tutorial tree."""

from typing import Optional, TextIO

from ..config import DebugConfig
from ..core.node import Course, Lesson, TopCourse
from ..core.visitor import TutorialVisitor
from ..util import sample_string


class DebugPrinter(TutorialVisitor):
    """Writes one line per lesson and course.

    Lessons show a short sample of their text:

        intro.md --- # Introduction  Welcome to the tutorial...
        belgium
           beer.md --- # Beer...

    The root prints nothing of its own.
    """

    def __init__(self, writer: TextIO, config: Optional[DebugConfig] = None):
        self.writer = writer
        self.config = config or DebugConfig()
        self.indent = 0

    def _spaces(self) -> str:
        return " " * self.indent if self.indent > 0 else ""

    def visit_lesson(self, lesson: Lesson) -> None:
        sample = sample_string(lesson.content(), self.config.sample_length)
        self.writer.write(f"{self._spaces()}{lesson.name()} --- {sample}...\n")

    def visit_course(self, course: Course) -> None:
        self.writer.write(f"{self._spaces()}{course.name()}\n")
        self.indent += self.config.indent_step
        try:
            self.visit_children(course)
        finally:
            self.indent -= self.config.indent_step

    def visit_top_course(self, top: TopCourse) -> None:
        self.visit_children(top)
