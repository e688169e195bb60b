import logging
from typing import Optional

from git import Commit, Repo
from git.exc import BadName, BadObject

from ..errors import PathNotFoundError, RevisionNotFoundError
from ..models import FileContent, SourceSnapshot
from .line_mapper import build_index

logger = logging.getLogger(__name__)


def resolve_commit(repo: Repo, commit_id: str) -> Commit:
    """Resolve a revision string to a commit object."""
    try:
        return repo.commit(commit_id)
    except (BadName, BadObject, ValueError) as e:
        raise RevisionNotFoundError(commit_id) from e


def get_file_content(repo: Repo, commit_id: str, file_path: Optional[str]) -> Optional[str]:
    """Get content of a file as it was at commit_id.

    Returns None for a None path without touching the repository.
    """
    if file_path is None:
        return None

    commit = resolve_commit(repo, commit_id)
    try:
        blob = commit.tree / file_path
    except KeyError as e:
        raise PathNotFoundError(commit.hexsha, file_path) from e
    if blob.type != "blob":
        raise PathNotFoundError(commit.hexsha, file_path)

    # Bytes that are not valid UTF-8 become U+FFFD instead of failing the read
    return blob.data_stream.read().decode("utf-8", errors="replace")


def resolve_file(repo: Repo, commit_id: str, file_path: Optional[str]) -> Optional[FileContent]:
    """Same as get_file_content, wrapped in a FileContent record."""
    text = get_file_content(repo, commit_id, file_path)
    if text is None:
        return None
    return FileContent(commit_id=commit_id, file_path=file_path, text=text)


def load_snapshot(repo: Repo, commit_id: str, file_path: Optional[str]) -> Optional[SourceSnapshot]:
    """Load a file at a commit and build its line index.

    A path missing at that commit gives None, which callers read as "the file
    does not exist there" and follow up with a rename lookup.
    """
    try:
        content = resolve_file(repo, commit_id, file_path)
    except PathNotFoundError:
        logger.debug("No %s at %s", file_path, commit_id)
        return None
    if content is None:
        return None
    return SourceSnapshot(content=content, line_index=build_index(content.text))
