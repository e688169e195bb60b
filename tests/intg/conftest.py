from pathlib import Path
from typing import Dict, Generator, Iterable, Optional, Union

import pytest
from git import Actor, Repo

AUTHOR = Actor("Test Author", "author@example.com")

BAR_SOURCE = """package org.foo;

import java.util.ArrayList;
import java.util.List;

public class Bar {
    private final List<String> names = new ArrayList<>();

    public void add(String name) {
        if (name == null) {
            throw new IllegalArgumentException("name");
        }
        names.add(name);
    }

    public int size() {
        return names.size();
    }

    public static class Inner {
        int value;
    }
}
"""


class RepoBuilder:
    """Builds a throwaway repository one commit at a time."""

    def __init__(self, root: Path):
        self.root = root
        self.repo = Repo.init(root)

    def commit(
        self,
        message: str,
        write: Optional[Dict[str, Union[str, bytes]]] = None,
        remove: Iterable[str] = (),
    ) -> str:
        for file_path, text in (write or {}).items():
            full_path = self.root / file_path
            full_path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(text, bytes):
                full_path.write_bytes(text)
            else:
                full_path.write_text(text, encoding="utf-8")
            self.repo.index.add([file_path])
        remove = list(remove)
        if remove:
            self.repo.index.remove(remove, working_tree=True)
        commit = self.repo.index.commit(message, author=AUTHOR, committer=AUTHOR)
        return commit.hexsha


@pytest.fixture
def repo_builder(tmp_path: Path) -> Generator[RepoBuilder, None, None]:
    builder = RepoBuilder(tmp_path / "repo")
    yield builder
    builder.repo.close()


@pytest.fixture
def bar_source() -> str:
    return BAR_SOURCE
