"""Value types produced when extracting content from lessons."""

from dataclasses import dataclass, field
from typing import Tuple

from .adapters.filesystem import FilePath

Label = str

# Every extracted block is also filed under this label.
ANY_LABEL: Label = "__all__"


@dataclass(frozen=True)
class Block:
    """A fenced code block and the labels attached to it.

    Attributes:
        code: Block body without the fence lines
        labels: Labels from the comment preceding the fence, in order
    """
    code: str
    labels: Tuple[Label, ...] = ()

    def name(self) -> str:
        """First label, or empty if the block was unlabelled."""
        return self.labels[0] if self.labels else ""


@dataclass(frozen=True)
class ParsedFile:
    """The blocks one lesson contributes for a given label."""
    path: FilePath
    blocks: Tuple[Block, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'blocks', tuple(self.blocks))
