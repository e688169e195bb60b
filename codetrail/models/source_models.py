"""Models describing source text and positions inside it."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from .git_models import FileContent


class LineIndex(BaseModel):
    """Sorted newline offsets of one text snapshot.

    Instances come from ``build_index``, which scans the whole text before
    returning, so every index a caller holds is complete.
    """

    model_config = ConfigDict(frozen=True)

    newline_offsets: Tuple[int, ...] = ()
    text_length: int = 0

    @property
    def line_count(self) -> int:
        return len(self.newline_offsets) + 1


class CodeElementRange(BaseModel):
    """Line and offset span of a syntax node or a group of nodes."""

    start_line: int = -1
    end_line: int = -1
    start_position: int = -1
    end_position: int = -1

    def __str__(self) -> str:
        return (
            f"Lines: ({self.start_line}, {self.end_line}), "
            f"Positions: ({self.start_position}, {self.end_position})"
        )


class SourceSnapshot(BaseModel):
    """File content at a commit together with its line index."""

    content: FileContent
    line_index: LineIndex

    @property
    def commit_id(self) -> str:
        return self.content.commit_id

    @property
    def file_path(self) -> str:
        return self.content.file_path

    @property
    def text(self) -> str:
        return self.content.text
