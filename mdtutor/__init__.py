"""mdtutor - markdown tutorial trees.

mdtutor reads a directory hierarchy of markdown files into an immutable
tutorial tree and walks it with interchangeable visitors:

    from mdtutor import load_tutorial, debug_string, nav_html, parse_tutorial

    tree = load_tutorial("docs/benelux")
    print(debug_string(tree))            # indented dump
    html = nav_html(tree)                # left-nav fragment
    files = parse_tutorial(tree, "test") # labelled code blocks
"""

import logging

__version__ = "0.1.0"

from .adapters.filesystem import FilePath
from .config import DebugConfig, FilterConfig, LoaderConfig, NavConfig
from .core.node import Course, Lesson, TopCourse, Tutorial
from .core.visitor import TutorialVisitor
from .errors import NoInputError, ReadDirError, ReadError, TutorialError
from .filters import is_desirable_dir, is_desirable_file
from .loader import TutorialLoader, load_many, load_one
from .model import ANY_LABEL, Block, Label, ParsedFile
from .parser import ContentParser
from .printers import DebugPrinter, NavPrinter
from .api import (
    count_lessons,
    debug_string,
    extract_blocks,
    iter_lessons,
    load_tutorial,
    nav_html,
    parse_tutorial,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Model
    "Tutorial",
    "Lesson",
    "Course",
    "TopCourse",
    "TutorialVisitor",
    "FilePath",
    "Block",
    "ParsedFile",
    "Label",
    "ANY_LABEL",
    # Building
    "TutorialLoader",
    "load_one",
    "load_many",
    "is_desirable_file",
    "is_desirable_dir",
    # Visitors
    "DebugPrinter",
    "NavPrinter",
    "ContentParser",
    # Config
    "LoaderConfig",
    "FilterConfig",
    "DebugConfig",
    "NavConfig",
    # Errors
    "TutorialError",
    "ReadError",
    "ReadDirError",
    "NoInputError",
    # API
    "load_tutorial",
    "debug_string",
    "nav_html",
    "parse_tutorial",
    "extract_blocks",
    "iter_lessons",
    "count_lessons",
]
