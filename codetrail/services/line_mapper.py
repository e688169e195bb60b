"""Maps character offsets reported by a syntax-tree parser to source lines."""

from bisect import bisect_left
from typing import Iterable, Optional, Tuple, Union

from ..models import CodeElementRange, LineIndex
from ..protocols.syntax_node_protocol import SyntaxNodeProtocol


def build_index(text: str) -> LineIndex:
    """Scan text once and record the offset of every newline character."""
    offsets = []
    pos = text.find("\n")
    while pos != -1:
        offsets.append(pos)
        pos = text.find("\n", pos + 1)
    # Offsets are produced in ascending order, no validation pass needed
    return LineIndex.model_construct(
        newline_offsets=tuple(offsets), text_length=len(text)
    )


def _check_offset(index: LineIndex, offset: int) -> None:
    if offset < 0 or offset > index.text_length:
        raise ValueError(
            f"Offset {offset} outside text of length {index.text_length}"
        )


def line_of(index: LineIndex, offset: int) -> int:
    """Return the 1-based line containing offset.

    A newline character belongs to the line it terminates. ``offset`` may equal
    the text length so exclusive end positions can be mapped too.
    """
    _check_offset(index, offset)
    return bisect_left(index.newline_offsets, offset) + 1


def position_of(index: LineIndex, offset: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) pair for offset."""
    _check_offset(index, offset)
    line = bisect_left(index.newline_offsets, offset) + 1
    line_start = index.newline_offsets[line - 2] + 1 if line > 1 else 0
    return line, offset - line_start + 1


def element_range(
    index: LineIndex,
    nodes: Union[SyntaxNodeProtocol, Iterable[SyntaxNodeProtocol], None],
) -> CodeElementRange:
    """Return the line span covered by one node or by a group of nodes."""
    if nodes is None:
        return CodeElementRange()
    if isinstance(nodes, SyntaxNodeProtocol):
        nodes = [nodes]

    start: Optional[int] = None
    end: Optional[int] = None
    for node in nodes:
        start = node.start_offset if start is None else min(start, node.start_offset)
        end = node.end_offset if end is None else max(end, node.end_offset)

    if start is None or end is None:
        return CodeElementRange()

    return CodeElementRange(
        start_line=line_of(index, start),
        end_line=line_of(index, end),
        start_position=start,
        end_position=end,
    )
