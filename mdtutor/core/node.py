"""Tutorial tree nodes for mdtutor.

A tutorial is a tree of three node kinds:

    Lesson     one markdown file (leaf, carries the file text)
    Course     one directory holding at least one lesson or course
    TopCourse  the unnamed root of a built tree

Nodes are plain data containers. They are built once by the loader and
never mutated afterwards. Behaviour over the tree lives in visitors
(see mdtutor.core.visitor), which nodes dispatch to through accept().
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Tuple

from ..adapters.filesystem import FilePath

if TYPE_CHECKING:
    from .visitor import TutorialVisitor


class Tutorial(ABC):
    """Abstract base class for every node in a tutorial tree.

    This class defines the capability set shared by all three variants.
    Children are ordered; their order is document order and is preserved
    by every visitor.
    """

    __slots__ = ()

    @abstractmethod
    def name(self) -> str:
        """Return the display name of this node.

        Lessons and courses use the base name of their path. The root
        of a tree is always unnamed.
        """
        pass

    @abstractmethod
    def path(self) -> FilePath:
        """Return the filesystem path this node was built from."""
        pass

    @abstractmethod
    def content(self) -> str:
        """Return the text of this node (empty for branches)."""
        pass

    @abstractmethod
    def children(self) -> Tuple['Tutorial', ...]:
        """Return child nodes in document order."""
        pass

    @abstractmethod
    def accept(self, visitor: 'TutorialVisitor') -> None:
        """Dispatch to the visitor method matching this node's kind."""
        pass

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(path={str(self.path())!r})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same kind, path, text and children."""
        if not isinstance(other, Tutorial):
            return NotImplemented
        return (type(self) is type(other)
                and self.path() == other.path()
                and self.content() == other.content()
                and self.children() == other.children())

    def __hash__(self) -> int:
        return hash((type(self).__name__, str(self.path()), self.content(), self.children()))


class Lesson(Tutorial):
    """A single markdown file.

    A lesson must have a name, may have any content, and never has children.
    """

    __slots__ = ('_path', '_content')

    def __init__(self, path, content: str):
        self._path = FilePath(path)
        self._content = content

    def name(self) -> str:
        return self._path.base()

    def path(self) -> FilePath:
        return self._path

    def content(self) -> str:
        return self._content

    def children(self) -> Tuple[Tutorial, ...]:
        return ()

    def accept(self, visitor: 'TutorialVisitor') -> None:
        visitor.visit_lesson(self)


class Course(Tutorial):
    """A directory with an ordered, non-empty list of lessons and courses.

    The loader drops directories that end up empty instead of building
    an empty Course, so constructing one without children is an error.
    """

    __slots__ = ('_path', '_children')

    def __init__(self, path, children: Iterable[Tutorial]):
        self._path = FilePath(path)
        self._children = tuple(children)
        if not self._children:
            raise ValueError(f"Course {self._path!s} must have at least one child")

    def name(self) -> str:
        return self._path.base()

    def path(self) -> FilePath:
        return self._path

    def content(self) -> str:
        return ""

    def children(self) -> Tuple[Tutorial, ...]:
        return self._children

    def accept(self, visitor: 'TutorialVisitor') -> None:
        visitor.visit_course(self)


class TopCourse(Tutorial):
    """The root of a tutorial tree.

    A TopCourse is a Course with no name. Its path is the root directory
    when built from one directory, and the empty path when assembled from
    several independent roots.
    """

    __slots__ = ('_path', '_children')

    def __init__(self, path, children: Iterable[Tutorial]):
        self._path = FilePath(path)
        self._children = tuple(children)

    def name(self) -> str:
        return ""

    def path(self) -> FilePath:
        return self._path

    def content(self) -> str:
        return ""

    def children(self) -> Tuple[Tutorial, ...]:
        return self._children

    def accept(self, visitor: 'TutorialVisitor') -> None:
        visitor.visit_top_course(self)
