"""
Tests for file service — the only code that removes files.
Verifies per-file independence of batch deletion and safe trash handling.
"""
import sys
import pytest
from unittest import mock
from onecopy.services.file_service import FileService
from onecopy.core.models import DeletionStatus, FilesystemError


class TestDeleteFile:
    """Permanent deletion of a single file."""

    def test_removes_file(self, tmp_path):
        f = tmp_path / "dup.txt"
        f.write_text("content")

        FileService.delete_file(str(f))

        assert not f.exists()

    def test_missing_file_raises_filesystem_error(self, tmp_path):
        missing = tmp_path / "does_not_exist.txt"

        with pytest.raises(FilesystemError) as exc_info:
            FileService.delete_file(str(missing))

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_not_deleted(self, tmp_path):
        d = tmp_path / "dir"
        d.mkdir()

        with pytest.raises(FilesystemError):
            FileService.delete_file(str(d))
        assert d.exists()

    def test_preserves_other_files_in_directory(self, tmp_path):
        """Deleting one file must not affect siblings in same directory."""
        keep = tmp_path / "keep_me.txt"
        drop = tmp_path / "delete_me.txt"
        keep.write_text("preserve this")
        drop.write_text("delete this")

        FileService.delete_file(str(drop))

        assert keep.exists(), "Sibling file must not be affected by deletion"
        assert not drop.exists()

    def test_handles_files_with_unicode_in_name(self, tmp_path):
        if sys.platform == "win32":
            pytest.skip("Unicode filename handling may be flaky on Windows")

        unicode_file = tmp_path / "фото.jpg"
        unicode_file.write_text("content")

        FileService.delete_file(str(unicode_file))
        assert not unicode_file.exists()


class TestMoveToTrash:
    """Trash mode delegates to send2trash and never deletes permanently on failure."""

    def test_calls_send2trash_with_resolved_path(self, tmp_path):
        f = tmp_path / "my photo.jpg"
        f.write_text("content")

        with mock.patch("onecopy.services.file_service.send2trash") as mock_trash:
            FileService.move_to_trash(str(f))

        mock_trash.assert_called_once_with(str(f.resolve()))

    def test_missing_file_raises_without_calling_send2trash(self, tmp_path):
        missing = tmp_path / "gone.txt"

        with mock.patch("onecopy.services.file_service.send2trash") as mock_trash:
            with pytest.raises(FilesystemError, match="File not found"):
                FileService.move_to_trash(str(missing))

        mock_trash.assert_not_called()

    def test_send2trash_failure_is_wrapped_and_file_kept(self, tmp_path):
        f = tmp_path / "locked.txt"
        f.write_text("content")

        with mock.patch("onecopy.services.file_service.send2trash", side_effect=OSError("trash unavailable")):
            with pytest.raises(FilesystemError, match="Failed to move to trash"):
                FileService.move_to_trash(str(f))

        assert f.exists(), "File must never be removed when trashing fails"


class TestDeleteAll:
    """Best-effort batch deletion."""

    def test_deletes_every_path(self, tmp_path):
        files = [tmp_path / f"file{i}.txt" for i in range(3)]
        for f in files:
            f.write_text("content")

        result = FileService.delete_all([str(f) for f in files])

        assert result.succeeded == 3
        assert all(not f.exists() for f in files)
        assert [o.path for o in result.outcomes] == [str(f) for f in files]

    def test_continues_after_failure(self, tmp_path):
        """
        CRITICAL: a failing path must not stop the remaining deletions.
        """
        first = tmp_path / "file1.txt"
        missing = tmp_path / "file2.txt"
        third = tmp_path / "file3.txt"
        first.write_text("content")
        third.write_text("content")

        result = FileService.delete_all([str(first), str(missing), str(third)])

        assert not first.exists()
        assert not third.exists()
        assert result.succeeded == 2
        assert [o.status for o in result.outcomes] == [
            DeletionStatus.SUCCESS, DeletionStatus.FAILED, DeletionStatus.SUCCESS]
        assert result.outcomes[1].error

    def test_succeeded_matches_success_outcomes(self, tmp_path):
        paths = []
        for i in range(4):
            f = tmp_path / f"f{i}"
            if i % 2 == 0:
                f.write_text("x")
            paths.append(str(f))

        result = FileService.delete_all(paths)

        assert result.succeeded == sum(1 for o in result.outcomes if o.status is DeletionStatus.SUCCESS)
        assert result.succeeded == 2
        assert len(result.failed) == 2

    def test_never_raises_even_if_everything_fails(self, tmp_path):
        with mock.patch.object(FileService, "delete_file", side_effect=FilesystemError("denied", path="x")):
            result = FileService.delete_all(["/a", "/b"])

        assert result.succeeded == 0
        assert [o.error for o in result.outcomes] == ["denied", "denied"]

    def test_failures_are_logged_with_path(self, tmp_path, caplog):
        missing = tmp_path / "missing.txt"

        with caplog.at_level("ERROR"):
            FileService.delete_all([str(missing)])

        assert str(missing) in caplog.text

    def test_trash_mode_uses_move_to_trash(self, tmp_path):
        f = tmp_path / "a.txt"
        f.write_text("x")

        with mock.patch.object(FileService, "move_to_trash") as mock_trash, \
                mock.patch.object(FileService, "delete_file") as mock_delete:
            result = FileService.delete_all([str(f)], use_trash=True)

        mock_trash.assert_called_once_with(str(f))
        mock_delete.assert_not_called()
        assert result.succeeded == 1

    def test_empty_batch(self):
        result = FileService.delete_all([])
        assert result.succeeded == 0
        assert result.outcomes == []
