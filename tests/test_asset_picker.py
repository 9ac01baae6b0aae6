"""Tests for demo asset selection."""

import random

from file_organizer.core.asset_picker import AssetPicker

from conftest import FixedRandom


class TestAssetPicker:
    """Test AssetPicker candidate filtering and selection."""

    def test_extension_match_is_case_insensitive(self, tmp_path):
        (tmp_path / "BIG.PNG").write_bytes(b"x")
        (tmp_path / "small.jpeg").write_bytes(b"x")
        (tmp_path / "notes.txt").write_bytes(b"x")

        picker = AssetPicker(FixedRandom(0))
        names = sorted(p.name for p in picker.candidates(tmp_path, {'.png', '.jpeg'}))

        assert names == ["BIG.PNG", "small.jpeg"]

    def test_skips_dot_files(self, tmp_path):
        (tmp_path / ".hidden.png").write_bytes(b"x")

        picker = AssetPicker(FixedRandom(0))

        assert picker.pick(tmp_path, {'.png'}) is None

    def test_missing_directory(self, tmp_path):
        picker = AssetPicker(FixedRandom(0))

        assert picker.pick(tmp_path / "missing", {'.png'}) is None

    def test_no_matching_candidate_does_not_draw(self, tmp_path):
        (tmp_path / "song.mp3").write_bytes(b"x")
        rng = FixedRandom(0)

        assert AssetPicker(rng).pick(tmp_path, {'.mp4'}) is None
        assert rng.calls == []

    def test_draws_over_candidate_count(self, tmp_path):
        for name in ("a.mp3", "b.mp3", "c.mp3", "d.wav"):
            (tmp_path / name).write_bytes(b"x")
        rng = FixedRandom(2)
        picker = AssetPicker(rng)

        chosen = picker.pick(tmp_path, {'.mp3'})

        assert rng.calls == [3]
        assert chosen == picker.candidates(tmp_path, {'.mp3'})[2]

    def test_seeded_source_is_reproducible(self, tmp_path):
        for i in range(10):
            (tmp_path / f"clip{i}.mp4").write_bytes(b"x")

        candidates = AssetPicker().candidates(tmp_path, {'.mp4'})
        expected = candidates[random.Random(42).randrange(len(candidates))]

        assert AssetPicker(random.Random(42)).pick(tmp_path, {'.mp4'}) == expected

    def test_file_instead_of_directory(self, tmp_path):
        not_a_dir = tmp_path / "images"
        not_a_dir.write_bytes(b"x")

        assert AssetPicker(FixedRandom(0)).candidates(not_a_dir, {'.png'}) == []
