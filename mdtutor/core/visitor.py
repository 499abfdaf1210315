"""Visitor protocol for tutorial trees.

Visitors define what happens at each node during a walk. Nodes call back
into exactly one visit method matching their own kind, so new traversal
behaviours can be added without touching the node classes.

Walks are pre-order and depth-first: a branch handles itself before its
children, and children are visited in stored order.
"""

from abc import ABC, abstractmethod

from .node import Course, Lesson, TopCourse, Tutorial


class TutorialVisitor(ABC):
    """Abstract base class for operations over a tutorial tree.

    A visitor instance owns all of its state (writer, counters,
    accumulators) and is meant for one traversal. The tree itself is
    only read.
    """

    @abstractmethod
    def visit_lesson(self, lesson: Lesson) -> None:
        """Handle a leaf node."""
        pass

    @abstractmethod
    def visit_course(self, course: Course) -> None:
        """Handle a named branch node."""
        pass

    @abstractmethod
    def visit_top_course(self, top: TopCourse) -> None:
        """Handle the unnamed root node."""
        pass

    def visit_children(self, node: Tutorial) -> None:
        """Dispatch to every child of ``node`` in order."""
        for child in node.children():
            child.accept(self)
