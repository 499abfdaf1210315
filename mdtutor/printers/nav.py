"""HTML left-navigation rendering of a tutorial tree.

The emitted fragment is consumed by a page script that wires clicks to
``toggle(id)`` (expand/collapse a course) and ``assureActive(label)``
(select a lesson). Ids and markup must therefore stay exactly as
written here.

For a course "hey" holding one unnamed lesson the output is:

    <div class='lnav1' data-name="hey">
      <div onclick="toggle('n1')">hey</div>
      <div id='n1' style='display: block;'>
        <div class='lnav1' data-name=".">
          <div onclick="assureActive('L0')">.</div>
          <div id='n2' style='display: none;'>
          </div>
        </div>
      </div>
    </div>
"""

import html
from typing import Optional, TextIO, Tuple

from ..config import NavConfig
from ..core.node import Course, Lesson, TopCourse, Tutorial
from ..core.visitor import TutorialVisitor


class NavPrinter(TutorialVisitor):
    """Writes the collapsible navigation fragment for a tree.

    Every rendered node takes the next ``n<k>`` id, starting at 1. Lessons,
    and any branch without children, take the next ``L<i>`` handle,
    starting at 0. Only the outermost node starts expanded.
    """

    def __init__(self, writer: TextIO, config: Optional[NavConfig] = None):
        self.writer = writer
        self.config = config or NavConfig()
        self.count = 0
        self.lesson_count = 0
        self.depth = 0

    def _line(self, depth: int, text: str) -> None:
        self.writer.write(self.config.indent * depth + text + "\n")

    @staticmethod
    def _display_name(node: Tutorial) -> str:
        return html.escape(node.name() or ".")

    def _open(self, node: Tutorial) -> Tuple[int, str, str]:
        self.count += 1
        name = self._display_name(node)
        state = "block" if self.depth == 0 else "none"
        self._line(self.depth, f"<div class='lnav1' data-name=\"{name}\">")
        return self.count, name, state

    def _render_leaf(self, node: Tutorial) -> None:
        node_id, name, state = self._open(node)
        index = self.lesson_count
        self.lesson_count += 1
        inner = self.depth + 1
        self._line(inner, f"<div onclick=\"assureActive('L{index}')\">{name}</div>")
        self._line(inner, f"<div id='n{node_id}' style='display: {state};'>")
        self._line(inner, "</div>")
        self._line(self.depth, "</div>")

    def _render_branch(self, node: Tutorial) -> None:
        if not node.children():
            self._render_leaf(node)
            return
        node_id, name, state = self._open(node)
        inner = self.depth + 1
        self._line(inner, f"<div onclick=\"toggle('n{node_id}')\">{name}</div>")
        self._line(inner, f"<div id='n{node_id}' style='display: {state};'>")
        self.depth += 2
        try:
            self.visit_children(node)
        finally:
            self.depth -= 2
        self._line(inner, "</div>")
        self._line(self.depth, "</div>")

    def visit_lesson(self, lesson: Lesson) -> None:
        self._render_leaf(lesson)

    def visit_course(self, course: Course) -> None:
        self._render_branch(course)

    def visit_top_course(self, top: TopCourse) -> None:
        self._render_branch(top)
