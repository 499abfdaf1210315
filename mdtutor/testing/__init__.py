"""Testing utilities for mdtutor consumers."""

from .fixtures import RecordingVisitor, make_tutorial_tree, tree_shape

__all__ = ['RecordingVisitor', 'make_tutorial_tree', 'tree_shape']
