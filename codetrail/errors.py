"""Exceptions raised by the repository-access core."""

from typing import List, Sequence


class CodeTrailError(Exception):
    """Base exception for codetrail errors."""


class NotFoundError(CodeTrailError):
    """Requested object does not exist in the repository."""


class RevisionNotFoundError(NotFoundError):
    """A revision string could not be resolved to a commit."""

    def __init__(self, revision: str):
        self.revision = revision
        super().__init__(f"Revision not found: {revision}")


class PathNotFoundError(NotFoundError):
    """The requested path is not a file in the commit tree."""

    def __init__(self, commit_id: str, file_path: str):
        self.commit_id = commit_id
        self.file_path = file_path
        super().__init__(f"Path {file_path!r} not found at commit {commit_id}")


class AmbiguousDiffError(CodeTrailError):
    """More than one diff entry matched a single path."""

    def __init__(self, file_path: str, old_commit: str, new_commit: str, entries: Sequence):
        self.file_path = file_path
        self.old_commit = old_commit
        self.new_commit = new_commit
        self.entries: List = list(entries)
        super().__init__(
            f"{len(self.entries)} diff entries match {file_path!r} "
            f"between {old_commit} and {new_commit}"
        )


class CacheIOError(CodeTrailError):
    """The result cache could not be written to its backing file."""


class RepositoryUnavailableError(CodeTrailError):
    """The configured path is not an accessible git repository."""
