"""
Unit tests for deletion strategies.
"""

import errno

import pytest
from filething.infrastructure.filesystem import (
    FailingRemover,
    MissingRemover,
    RecordingRemover,
    os_remove,
)


class TestOsRemove:
    """Tests for os_remove."""

    def test_removes_file(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("content")

        os_remove(str(path))

        assert not path.exists()

    def test_missing_file_raises_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            os_remove(str(tmp_path / "missing.txt"))


class TestRecordingRemover:
    """Tests for RecordingRemover."""

    def test_records_calls(self):
        remover = RecordingRemover()
        remover("/a")
        remover("/b")
        assert remover.calls == ["/a", "/b"]

    def test_does_not_touch_filesystem(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("content")

        RecordingRemover()(str(path))

        assert path.exists()


class TestFailingRemover:
    """Tests for FailingRemover."""

    def test_raises_given_error(self):
        error = OSError("I failed")
        remover = FailingRemover(error)

        with pytest.raises(OSError) as exc_info:
            remover("/a")

        assert exc_info.value is error
        assert remover.calls == ["/a"]


class TestMissingRemover:
    """Tests for MissingRemover."""

    def test_raises_enoent(self):
        remover = MissingRemover()

        with pytest.raises(FileNotFoundError) as exc_info:
            remover("/a")

        assert exc_info.value.errno == errno.ENOENT
        assert exc_info.value.filename == "/a"

    def test_error_is_an_os_error(self):
        with pytest.raises(OSError):
            MissingRemover()("/a")
