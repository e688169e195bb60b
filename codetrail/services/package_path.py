"""Correlates file paths with qualified type names across history.

Directory layout does not always mirror the qualified name of the types a file
declares: nested types share their enclosing type's file, source roots move, and
letter casing drifts between commits. The key built here replaces the package
portion of the path with a delimiter so that the same source root keeps the
same key no matter how the package directories below it are spelled.
"""

import logging
import posixpath

from ..models import ReconciledPath

logger = logging.getLogger(__name__)

DELIMITER = "$"


def longest_common_substring(first: str, second: str) -> str:
    """Return the longest contiguous substring shared by both strings.

    Only two rows of the dynamic-programming table are kept alive. Ties go to
    the match that ends first in ``first``.
    """
    if not first or not second:
        return ""

    previous = [0] * (len(second) + 1)
    best_length = 0
    best_end = 0
    for i in range(1, len(first) + 1):
        current = [0] * (len(second) + 1)
        char = first[i - 1]
        for j in range(1, len(second) + 1):
            if char == second[j - 1]:
                current[j] = previous[j - 1] + 1
                if current[j] > best_length:
                    best_length = current[j]
                    best_end = i
        previous = current
    return first[best_end - best_length : best_end]


def _normalize_path(file_path: str) -> str:
    return file_path.replace("\\", "/").lower()


def _directory_of(path: str) -> str:
    # A path whose last segment has no extension is already a directory,
    # which keeps fallback keys stable when reconciled again
    if "." not in path.rsplit("/", 1)[-1]:
        return path.rstrip("/")
    return posixpath.dirname(path)


def reconcile(file_path: str, qualified_name: str) -> ReconciledPath:
    """Build the canonical key for a type declared in file_path."""
    path = _normalize_path(file_path)
    if DELIMITER in path:
        # Already a canonical key
        return ReconciledPath(key=path, matched=True)

    directory = _directory_of(path)
    if not isinstance(qualified_name, str):
        logger.debug("No qualified name for %s, keeping directory", file_path)
        return ReconciledPath(key=directory, matched=False)

    common = longest_common_substring(
        directory, qualified_name.replace(".", "/").lower()
    )
    dotted_common = common.replace("/", ".")
    if common and qualified_name.lower().startswith(dotted_common):
        key = path.replace(common, DELIMITER)
        return ReconciledPath(key=key[: key.rindex(DELIMITER) + 1], matched=True)

    logger.debug(
        "No shared prefix between %s and %s, keeping directory", file_path, qualified_name
    )
    return ReconciledPath(key=directory, matched=False)


def reconcile_path(file_path: str, qualified_name: str) -> str:
    return reconcile(file_path, qualified_name).key


def package_of(file_path: str, qualified_name: str) -> str:
    """Infer the package of qualified_name from the directories of file_path.

    Best effort: returns an empty string when nothing can be inferred.
    """
    try:
        directory = _directory_of(_normalize_path(file_path))
        qualified = qualified_name.replace(".", "/").lower()
        common = longest_common_substring(directory, qualified).strip("/")
        if not common:
            return ""
        # Only whole name segments on both sides count
        segment = f"/{common}/"
        if not f"/{qualified}/".startswith(segment) or segment not in f"/{directory}/":
            return ""
        return qualified_name[: len(common)]
    except Exception as e:
        logger.debug(
            "Failed to infer package for %r / %r: %s", file_path, qualified_name, e
        )
        return ""
