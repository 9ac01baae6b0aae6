"""Tests for demo-content backfill."""

from unittest.mock import patch

import pytest

from file_organizer.core.content_filler import ContentFiller, TEXT_TEMPLATES
from file_organizer.core.operation_log import OperationKind, OperationLog

from conftest import FixedRandom


@pytest.fixture
def target_dir(tmp_path):
    path = tmp_path / "target"
    path.mkdir()
    return path


def make_filler(assets_root, index=0):
    log = OperationLog()
    return ContentFiller(log, assets_root, FixedRandom(index)), log


class TestContentFillerSkips:
    """Preconditions that leave the file and the log untouched."""

    def test_no_assets_root(self, target_dir):
        empty = target_dir / "notes.txt"
        empty.touch()
        filler, log = make_filler(None)

        assert filler.fill(empty, ".txt") is None
        assert empty.stat().st_size == 0
        assert len(log) == 0

    def test_non_empty_file(self, target_dir, assets_root):
        existing = target_dir / "notes.txt"
        existing.write_text("keep me")
        filler, log = make_filler(assets_root)

        assert filler.fill(existing, ".txt") is None
        assert existing.read_text() == "keep me"
        assert len(log) == 0

    def test_missing_file(self, target_dir, assets_root):
        filler, log = make_filler(assets_root)

        assert filler.fill(target_dir / "gone.txt", ".txt") is None
        assert len(log) == 0

    def test_missing_extension(self, target_dir, assets_root):
        empty = target_dir / "readme"
        empty.touch()
        filler, log = make_filler(assets_root)

        assert filler.fill(empty, None) is None
        assert len(log) == 0

    def test_extension_without_fill_rule(self, target_dir, assets_root):
        empty = target_dir / "report.docx"
        empty.touch()
        filler, log = make_filler(assets_root)

        assert filler.fill(empty, ".docx") is None
        assert empty.stat().st_size == 0
        assert len(log) == 0


class TestContentFillerCopies:
    """Fills that copy an asset from the pool."""

    @pytest.mark.parametrize("name,asset", [
        ("notes.txt", "documents/sample.txt"),
        ("paper.pdf", "documents/sample.pdf"),
        ("photo.jpg", "images/photo.png"),
        ("song.mp3", "audio/song.mp3"),
        ("clip.mp4", "videos/clip.mp4"),
    ])
    def test_copies_matching_asset(self, target_dir, assets_root, name, asset):
        empty = target_dir / name
        empty.touch()
        filler, log = make_filler(assets_root)

        rec = filler.fill(empty, empty.suffix)

        assert empty.read_bytes() == (assets_root / asset).read_bytes()
        assert rec.kind is OperationKind.COPY
        assert rec.path == str(assets_root / asset)
        assert rec.path2 == str(empty)
        assert rec.success is True
        assert log.records == [rec]

    def test_description_names_the_kind(self, target_dir, assets_root):
        empty = target_dir / "photo.jpeg"
        empty.touch()
        filler, _ = make_filler(assets_root)

        assert filler.fill(empty, ".jpeg").description == "Fill image with demo content"

    def test_uppercase_extension_is_filled(self, target_dir, assets_root):
        empty = target_dir / "PHOTO.JPG"
        empty.touch()
        filler, log = make_filler(assets_root)

        filler.fill(empty, ".JPG")

        assert empty.read_bytes() == (assets_root / "images" / "photo.png").read_bytes()
        assert len(log) == 1

    def test_pdf_without_asset_stays_empty(self, target_dir, assets_root):
        (assets_root / "documents" / "sample.pdf").unlink()
        empty = target_dir / "paper.pdf"
        empty.touch()
        filler, log = make_filler(assets_root)

        assert filler.fill(empty, ".pdf") is None
        assert empty.stat().st_size == 0
        assert len(log) == 0

    def test_copy_failure_is_not_logged(self, target_dir, assets_root):
        empty = target_dir / "song.mp3"
        empty.touch()
        filler, log = make_filler(assets_root)

        with patch('file_organizer.core.content_filler.shutil.copyfile',
                   side_effect=PermissionError(13, "Permission denied")):
            assert filler.fill(empty, ".mp3") is None

        assert len(log) == 0


class TestContentFillerTemplates:
    """Text files fall back to built-in templates."""

    def test_template_when_documents_missing(self, tmp_path, target_dir):
        assets = tmp_path / "bare_assets"
        assets.mkdir()
        empty = target_dir / "notes.txt"
        empty.touch()
        filler, log = make_filler(assets, index=3)

        rec = filler.fill(empty, ".txt")

        assert empty.read_text(encoding='utf-8') == TEXT_TEMPLATES[3]
        assert rec.kind is OperationKind.WRITE
        assert rec.path == str(empty)
        assert rec.path2 == ""
        assert rec.description == "Fill txt with demo content"
        assert len(log) == 1

    def test_template_when_no_txt_asset(self, target_dir, assets_root):
        (assets_root / "documents" / "sample.txt").unlink()
        empty = target_dir / "notes.txt"
        empty.touch()
        filler, log = make_filler(assets_root, index=0)

        filler.fill(empty, ".txt")

        assert empty.read_text(encoding='utf-8') == TEXT_TEMPLATES[0]
        assert log.records[0].kind is OperationKind.WRITE

    def test_five_templates(self):
        assert len(TEXT_TEMPLATES) == 5
        assert all(TEXT_TEMPLATES)
