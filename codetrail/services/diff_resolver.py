import logging
from typing import Optional

from git import Repo

from ..errors import AmbiguousDiffError
from ..models import DiffResult
from ..schemas import ChangeType
from .content_resolver import resolve_commit

logger = logging.getLogger(__name__)

DEFAULT_RENAME_THRESHOLD = 50


def _change_type_of(item) -> ChangeType:
    try:
        return ChangeType(item.change_type)
    except ValueError:
        logger.warning(
            "Unknown change type %r for %s, treating as modified",
            item.change_type,
            item.b_path or item.a_path,
        )
        return ChangeType.MODIFIED


def _to_diff_result(item) -> DiffResult:
    change_type = _change_type_of(item)
    # GitPython reports the same path on both sides for raw added/deleted entries
    old_path = None if change_type == ChangeType.ADDED else item.a_path
    new_path = None if change_type == ChangeType.DELETED else item.b_path
    return DiffResult(change_type=change_type, old_path=old_path, new_path=new_path)


def diff_file(
    repo: Repo,
    old_commit_id: str,
    new_commit_id: str,
    file_path: str,
    rename_threshold: int = DEFAULT_RENAME_THRESHOLD,
) -> Optional[DiffResult]:
    """Return how file_path changed between two commits, following renames.

    None means the path is untouched. A file renamed into or out of file_path
    is reported as a rename whose other side is the matching path.
    """
    old_commit = resolve_commit(repo, old_commit_id)
    new_commit = resolve_commit(repo, new_commit_id)
    if old_commit.hexsha == new_commit.hexsha:
        return None

    diff_items = old_commit.diff(
        new_commit, find_renames=f"{rename_threshold}%"
    )
    matches = [
        item
        for item in diff_items
        if file_path in (item.a_path, item.b_path)
    ]

    if not matches:
        return None
    if len(matches) > 1:
        logger.error(
            "Ambiguous diff for %s between %s and %s: %d entries",
            file_path,
            old_commit.hexsha,
            new_commit.hexsha,
            len(matches),
        )
        raise AmbiguousDiffError(
            file_path,
            old_commit.hexsha,
            new_commit.hexsha,
            [_to_diff_result(item) for item in matches],
        )

    return _to_diff_result(matches[0])


def get_parent_id(repo: Repo, commit_id: str) -> Optional[str]:
    """Return the first parent of commit_id, or None for a root commit."""
    commit = resolve_commit(repo, commit_id)
    if not commit.parents:
        return None
    return commit.parents[0].hexsha
