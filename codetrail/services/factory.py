"""Factory for creating repository handles and result caches."""

import logging
from pathlib import Path
from typing import Union

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from ..config.settings import Settings
from ..errors import RepositoryUnavailableError
from .result_cache import ResultCache

logger = logging.getLogger(__name__)


def open_repository(repo_path: Union[str, Path]) -> Repo:
    """
    Open an existing local repository.

    Args:
        repo_path: Path to the working tree or bare repository

    Returns:
        GitPython Repo handle; the caller owns it and closes it when done
    """
    try:
        repo = Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryUnavailableError(f"Not a git repository: {repo_path}") from e
    logger.info("Opened repository at %s", repo_path)
    return repo


def create_result_cache(cache_path: Union[str, Path]) -> ResultCache:
    return ResultCache(cache_path)


def open_repository_from_settings(settings: Settings) -> Repo:
    """
    Open the repository named by application settings.

    Args:
        settings: Application settings

    Returns:
        GitPython Repo handle
    """
    return open_repository(settings.CODETRAIL_REPO_PATH)


def create_result_cache_from_settings(settings: Settings) -> ResultCache:
    return create_result_cache(settings.CODETRAIL_CACHE_PATH)
