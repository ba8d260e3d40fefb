#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the deletion workflow.
"""

import os
from unittest.mock import patch

from mediadiff.deletion import DeletionWorkflow, delete_orphans
from mediadiff.models import DeletionOutcome, OrphanRecord
from mediadiff.scanning.discovery import scan_upload_dir
from mediadiff.tests.fixtures.test_db_setup import build_upload_tree


def _tree(tmp_path):
    return build_upload_tree(tmp_path / "uploads", [
        "2017/03/photo.png", "2017/03/photo-312x338.png", "2017/03/photo-220x165.png",
        "2017/03/other.gif", "2018/01/single.jpg",
    ])


PHOTO = OrphanRecord("2017/03", "photo.png", ("312x338", "220x165"))
OTHER = OrphanRecord("2017/03", "other.gif", ())
SINGLE = OrphanRecord("2018/01", "single.jpg", ())


class TestDeletionWorkflow:
    """Test dry-run and hard deletion."""

    def test_expand_files(self, tmp_path):
        files = DeletionWorkflow.expand_files(tmp_path, PHOTO)
        assert files == [
            str(tmp_path / "photo.png"),
            str(tmp_path / "photo-312x338.png"),
            str(tmp_path / "photo-220x165.png"),
        ]

    def test_dry_run_reports_everything_and_touches_nothing(self, tmp_path):
        root = _tree(tmp_path)
        before = sorted(p for p in root.rglob("*"))

        outcomes = delete_orphans([PHOTO, SINGLE], root, hard=False)

        assert len(outcomes) == 4
        assert all(o.deleted for o in outcomes)
        assert sorted(p for p in root.rglob("*")) == before

    def test_dry_run_reports_missing_files_as_deleted(self, tmp_path):
        root = _tree(tmp_path)
        ghost = OrphanRecord("2017/03", "ghost.png", ("10x10",))
        outcomes = delete_orphans([ghost], root, hard=False)
        assert [o.deleted for o in outcomes] == [True, True]

    def test_hard_delete_removes_base_and_variants(self, tmp_path):
        root = _tree(tmp_path)
        outcomes = delete_orphans([PHOTO], root, hard=True)

        assert outcomes == [
            DeletionOutcome(str(root / "2017/03/photo.png"), True),
            DeletionOutcome(str(root / "2017/03/photo-312x338.png"), True),
            DeletionOutcome(str(root / "2017/03/photo-220x165.png"), True),
        ]
        assert not (root / "2017/03/photo.png").exists()
        assert (root / "2017/03/other.gif").exists()

    def test_hard_delete_missing_file_is_reported_not_raised(self, tmp_path, caplog):
        root = _tree(tmp_path)
        (root / "2017/03/photo-220x165.png").unlink()

        with caplog.at_level("WARNING"):
            outcomes = delete_orphans([PHOTO, SINGLE], root, hard=True)

        assert [o.deleted for o in outcomes] == [True, True, False, True]
        assert not (root / "2018/01/single.jpg").exists()
        assert any("Skipping invalid file" in r.getMessage() for r in caplog.records)

    def test_partial_failure_continues_with_next_orphan(self, tmp_path, caplog):
        """Base removal succeeds, variant removal fails, next orphan still processed."""
        root = _tree(tmp_path)
        orphan = OrphanRecord("2017/03", "photo.png", ("312x338",))
        variant = str(root / "2017/03/photo-312x338.png")
        real_remove = os.remove

        def failing_remove(path, *args, **kwargs):
            if str(path) == variant:
                raise PermissionError(13, "Permission denied", path)
            return real_remove(path, *args, **kwargs)

        with patch("os.remove", side_effect=failing_remove):
            with caplog.at_level("WARNING"):
                outcomes = delete_orphans([orphan, OTHER], root, hard=True)

        assert outcomes == [
            DeletionOutcome(str(root / "2017/03/photo.png"), True),
            DeletionOutcome(variant, False),
            DeletionOutcome(str(root / "2017/03/other.gif"), True),
        ]
        assert os.path.exists(variant)
        assert any("Unable to delete file" in r.getMessage() for r in caplog.records)

    def test_missing_directory_skips_orphan(self, tmp_path, caplog):
        root = _tree(tmp_path)
        lost = OrphanRecord("2020/12", "lost.png", ("10x10",))
        with caplog.at_level("WARNING"):
            outcomes = delete_orphans([lost, SINGLE], root, hard=True)
        assert outcomes == [DeletionOutcome(str(root / "2018/01/single.jpg"), True)]
        assert any("Invalid directory" in r.getMessage() and "lost.png" in r.getMessage()
                   for r in caplog.records)

    def test_unwritable_directory_skips_orphan(self, tmp_path, caplog):
        root = _tree(tmp_path)
        with patch("mediadiff.deletion.is_writable_dir", return_value=False):
            with caplog.at_level("WARNING"):
                outcomes = delete_orphans([PHOTO], root, hard=True)
        assert outcomes == []
        assert (root / "2017/03/photo.png").exists()
        assert any("not writable" in r.getMessage() for r in caplog.records)

    def test_progress_called_once_per_orphan(self, tmp_path):
        root = _tree(tmp_path)
        seen = []
        lost = OrphanRecord("2020/12", "lost.png", ())
        DeletionWorkflow(root, hard=False, progress=seen.append).run([PHOTO, lost, SINGLE])
        assert seen == [PHOTO, lost, SINGLE]

    def test_flat_orphan_uses_upload_root(self, tmp_path):
        root = build_upload_tree(tmp_path / "flat", ["a.png", "a-5x5.png"])
        outcomes = delete_orphans([OrphanRecord("", "a.png", ("5x5",))], root, hard=True)
        assert [o.file for o in outcomes] == [str(root / "a.png"), str(root / "a-5x5.png")]
        assert all(o.deleted for o in outcomes)

    def test_outcome_paths_are_absolute(self, tmp_path, monkeypatch):
        _tree(tmp_path)
        monkeypatch.chdir(tmp_path)
        outcomes = delete_orphans([SINGLE], "uploads", hard=False)
        assert os.path.isabs(outcomes[0].file)
        assert outcomes[0].to_row() == {"File": outcomes[0].file, "Deleted": 1}

    def test_nested_variants_deleted_once_each(self, tmp_path, caplog):
        root = build_upload_tree(tmp_path / "flat", ["p.png", "p-100x100.png", "p-100x100-50x50.png"])
        orphans = [OrphanRecord.from_media(r) for r in scan_upload_dir(root, year_month_folders=False)]

        with caplog.at_level("WARNING"):
            outcomes = delete_orphans(orphans, root, hard=True)

        files = [o.file for o in outcomes]
        assert sorted(files) == sorted(str(root / name) for name in
                                       ("p.png", "p-100x100.png", "p-100x100-50x50.png"))
        assert all(o.deleted for o in outcomes)
        assert not any("Skipping invalid file" in r.getMessage() for r in caplog.records)
        assert list(root.iterdir()) == []

    def test_file_shared_by_two_orphans_reported_once(self, tmp_path):
        root = _tree(tmp_path)
        twice = OrphanRecord("2017/03", "photo-312x338.png", ())
        outcomes = delete_orphans([PHOTO, twice], root, hard=False)
        assert [o.file for o in outcomes].count(str(root / "2017/03/photo-312x338.png")) == 1
        assert len(outcomes) == 3
