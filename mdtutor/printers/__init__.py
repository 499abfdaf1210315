"""Visitors that render a tutorial tree as text."""

from .debug import DebugPrinter
from .nav import NavPrinter

__all__ = ['DebugPrinter', 'NavPrinter']
