"""Services for the application."""

from .content_resolver import get_file_content, load_snapshot, resolve_file
from .diff_resolver import diff_file, get_parent_id
from .factory import (
    create_result_cache,
    create_result_cache_from_settings,
    open_repository,
    open_repository_from_settings,
)
from .line_mapper import build_index, element_range, line_of, position_of
from .package_path import package_of, reconcile, reconcile_path
from .result_cache import ResultCache, cache_key

__all__ = [
    "ResultCache",
    "build_index",
    "cache_key",
    "create_result_cache",
    "create_result_cache_from_settings",
    "diff_file",
    "element_range",
    "get_file_content",
    "get_parent_id",
    "line_of",
    "load_snapshot",
    "open_repository",
    "open_repository_from_settings",
    "package_of",
    "position_of",
    "reconcile",
    "reconcile_path",
    "resolve_file",
]
