"""Git-related model classes."""

from typing import Optional

from pydantic import BaseModel

from ..schemas import ChangeType


class FileContent(BaseModel):
    """Text of one file at one commit."""

    commit_id: str
    file_path: str
    text: str


class DiffResult(BaseModel):
    """Represents the single diff entry touching a path between two commits."""

    change_type: ChangeType
    old_path: Optional[str] = None  # None for added files
    new_path: Optional[str] = None  # None for deleted files

    @property
    def is_rename(self) -> bool:
        return self.change_type == ChangeType.RENAMED

    @property
    def previous_path(self) -> Optional[str]:
        """Path the file had in the older commit, if it was different."""
        if self.old_path is None or self.old_path == self.new_path:
            return None
        return self.old_path
