"""Unit tests for commit content resolution."""

from unittest.mock import MagicMock, Mock

import pytest
from git import Repo
from git.exc import BadName

from codetrail.errors import NotFoundError, PathNotFoundError, RevisionNotFoundError
from codetrail.models import FileContent
from codetrail.services.content_resolver import (
    get_file_content,
    load_snapshot,
    resolve_file,
)


class TestGetFileContent:
    """Test cases for get_file_content."""

    def setup_method(self):
        """Set up a repository double holding one commit."""
        self.mock_blob = Mock()
        self.mock_blob.type = "blob"
        self.mock_blob.data_stream.read.return_value = "class Bär {}\n".encode("utf-8")

        self.mock_commit = Mock()
        self.mock_commit.hexsha = "abc123"
        self.mock_commit.tree = MagicMock()
        self.mock_commit.tree.__truediv__.return_value = self.mock_blob

        self.mock_repo = Mock(spec=Repo)
        self.mock_repo.commit.return_value = self.mock_commit

    def test_none_path_does_not_touch_repository(self):
        """Test that a None path returns None with no repository access."""
        repo = Mock(spec=Repo)

        result = get_file_content(repo, "abc123", None)

        assert result is None
        assert repo.mock_calls == []

    def test_returns_decoded_blob(self):
        """Test that the blob at the path is returned as UTF-8 text."""
        result = get_file_content(self.mock_repo, "abc123", "src/Bar.java")

        assert result == "class Bär {}\n"
        self.mock_repo.commit.assert_called_once_with("abc123")
        self.mock_commit.tree.__truediv__.assert_called_once_with("src/Bar.java")

    def test_invalid_utf8_is_replaced(self):
        """Test that undecodable bytes do not make the read fail."""
        self.mock_blob.data_stream.read.return_value = b"// caf\xe9\n"

        result = get_file_content(self.mock_repo, "abc123", "src/Bar.java")

        assert result == "// caf\ufffd\n"

    def test_missing_path_raises_not_found(self):
        """Test that a path absent from the tree raises PathNotFoundError."""
        self.mock_commit.tree.__truediv__.side_effect = KeyError("src/Gone.java")

        with pytest.raises(PathNotFoundError) as exc_info:
            get_file_content(self.mock_repo, "abc123", "src/Gone.java")

        assert exc_info.value.file_path == "src/Gone.java"
        assert exc_info.value.commit_id == "abc123"

    def test_directory_path_raises_not_found(self):
        """Test that a path naming a tree is not treated as file content."""
        self.mock_blob.type = "tree"

        with pytest.raises(PathNotFoundError):
            get_file_content(self.mock_repo, "abc123", "src")

    def test_unknown_revision_raises_not_found(self):
        """Test that an unresolvable revision raises RevisionNotFoundError."""
        self.mock_repo.commit.side_effect = BadName("deadbeef")

        with pytest.raises(RevisionNotFoundError) as exc_info:
            get_file_content(self.mock_repo, "deadbeef", "src/Bar.java")

        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.revision == "deadbeef"

    def test_repeated_calls_return_same_text(self):
        """Test that resolution is a pure read."""
        first = get_file_content(self.mock_repo, "abc123", "src/Bar.java")
        second = get_file_content(self.mock_repo, "abc123", "src/Bar.java")

        assert first == second
        assert self.mock_repo.commit.call_count == 2


class TestResolveFile:
    """Test cases for resolve_file and load_snapshot."""

    def setup_method(self):
        """Set up a repository double whose only file has three lines."""
        mock_blob = Mock()
        mock_blob.type = "blob"
        mock_blob.data_stream.read.return_value = b"a\nb\nc"

        self.mock_commit = Mock()
        self.mock_commit.hexsha = "abc123"
        self.mock_commit.tree = MagicMock()
        self.mock_commit.tree.__truediv__.return_value = mock_blob

        self.mock_repo = Mock(spec=Repo)
        self.mock_repo.commit.return_value = self.mock_commit

    def test_resolve_file_returns_record(self):
        """Test that resolve_file wraps the text in a FileContent."""
        result = resolve_file(self.mock_repo, "abc123", "notes.txt")

        assert result == FileContent(commit_id="abc123", file_path="notes.txt", text="a\nb\nc")

    def test_resolve_file_none_path(self):
        """Test that resolve_file passes the None path through."""
        assert resolve_file(self.mock_repo, "abc123", None) is None

    def test_load_snapshot_builds_line_index(self):
        """Test that a snapshot carries an index for its own text."""
        snapshot = load_snapshot(self.mock_repo, "abc123", "notes.txt")

        assert snapshot.text == "a\nb\nc"
        assert snapshot.file_path == "notes.txt"
        assert snapshot.line_index.newline_offsets == (1, 3)
        assert snapshot.line_index.line_count == 3

    def test_load_snapshot_missing_path(self):
        """Test that a missing file gives no snapshot instead of an error."""
        self.mock_commit.tree.__truediv__.side_effect = KeyError("gone.txt")

        assert load_snapshot(self.mock_repo, "abc123", "gone.txt") is None
