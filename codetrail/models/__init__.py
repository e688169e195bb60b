"""Models for the application."""

from .git_models import DiffResult, FileContent
from .path_models import ReconciledPath
from .source_models import CodeElementRange, LineIndex, SourceSnapshot

__all__ = [
    "CodeElementRange",
    "DiffResult",
    "FileContent",
    "LineIndex",
    "ReconciledPath",
    "SourceSnapshot",
]
