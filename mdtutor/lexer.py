"""Default block lexer for lesson content.

Extracts fenced code blocks from markdown. A block is labelled by an
HTML comment on the last non-blank line before its opening fence:

    <!-- @install @test -->
    ```
    pip install mdtutor
    ```

The block above is returned under "install", "test" and ANY_LABEL.
Unlabelled blocks appear under ANY_LABEL only. A fence left open at end
of input is closed there.
"""

import re
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .model import ANY_LABEL, Block, Label

# A lexer maps lesson text to label -> blocks in document order.
Lexer = Callable[[str], Mapping[Label, Sequence[Block]]]

_FENCE_RE = re.compile(r'^\s{0,3}(`{3,}|~{3,})')
_COMMENT_RE = re.compile(r'^\s*<!--(.*?)-->\s*$')
_LABEL_RE = re.compile(r'@([\w-]+)')


def _labels_from_comment(line: str) -> Optional[Tuple[Label, ...]]:
    match = _COMMENT_RE.match(line)
    if not match:
        return None
    labels: List[Label] = []
    for label in _LABEL_RE.findall(match.group(1)):
        if label not in labels:
            labels.append(label)
    return tuple(labels)


def parse(content: str) -> Dict[Label, List[Block]]:
    """Extract labelled code blocks from markdown text.

    Args:
        content: Full lesson text

    Returns:
        Mapping of label to blocks in document order; empty when the text
        holds no fenced blocks
    """
    result: Dict[Label, List[Block]] = {}
    pending: Tuple[Label, ...] = ()
    fence: Optional[str] = None
    labels: Tuple[Label, ...] = ()
    body: List[str] = []

    def emit():
        block = Block(code="".join(body), labels=labels)
        result.setdefault(ANY_LABEL, []).append(block)
        for label in labels:
            result.setdefault(label, []).append(block)

    for line in content.splitlines(keepends=True):
        if fence is not None:
            stripped = line.strip()
            if stripped.startswith(fence) and stripped.strip(fence[0]) == "":
                emit()
                fence = None
                body = []
            else:
                body.append(line)
            continue

        match = _FENCE_RE.match(line)
        if match:
            fence = match.group(1)
            labels = pending
            pending = ()
            continue

        if not line.strip():
            continue
        comment_labels = _labels_from_comment(line)
        pending = comment_labels if comment_labels else ()

    if fence is not None:
        emit()
    return result
