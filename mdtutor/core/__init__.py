"""Core abstractions for mdtutor.

This module contains the tutorial node model and the visitor protocol
that every traversal behaviour implements.
"""

from .node import Tutorial, Lesson, Course, TopCourse
from .visitor import TutorialVisitor

__all__ = [
    "Tutorial",
    "Lesson",
    "Course",
    "TopCourse",
    "TutorialVisitor",
]
