"""Shared fixtures for file organizer tests."""

import pytest
from pathlib import Path


class FixedRandom:
    """Random source that always draws the same index."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return min(self.index, stop - 1)


@pytest.fixture
def workspace(tmp_path) -> Path:
    """Create an empty workspace directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def assets_root(tmp_path) -> Path:
    """Create a demo asset pool with one file per asset kind."""
    root = tmp_path / "assets"
    for sub in ("documents", "images", "audio", "videos"):
        (root / sub).mkdir(parents=True)

    (root / "documents" / "sample.txt").write_text("asset text content")
    (root / "documents" / "sample.pdf").write_bytes(b"%PDF-1.4 demo")
    (root / "images" / "photo.png").write_bytes(b"\x89PNG demo")
    (root / "audio" / "song.mp3").write_bytes(b"ID3 demo")
    (root / "videos" / "clip.mp4").write_bytes(b"mp4 demo")
    return root


@pytest.fixture
def fixed_random():
    """Random source pinned to the first candidate."""
    return FixedRandom(0)
