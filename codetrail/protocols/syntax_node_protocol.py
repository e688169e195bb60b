"""Syntax node protocol interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SyntaxNodeProtocol(Protocol):
    """Node produced by a syntax-tree parser, positioned by character offsets."""

    @property
    def start_offset(self) -> int:
        """Offset of the first character of the node."""
        ...

    @property
    def end_offset(self) -> int:
        """Offset one past the last character of the node."""
        ...
