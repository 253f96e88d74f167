"""Shared in-memory adapters and fixtures for all bounded contexts."""

import os
import random

import pytest

from musikkhistorie.domain.catalog import CATALOG
from musikkhistorie.domain.ports import AudioPort
from musikkhistorie.services.asset_store import load_all


# ── In-memory adapters ──────────────────────────────────────────────


class FakeSound:
    def __init__(self, key: str):
        self.key = key

    def __repr__(self):
        return f"FakeSound({self.key!r})"


class InMemoryAudio(AudioPort):
    def __init__(self, undecodable: tuple[str, ...] = ()):
        self._undecodable = set(undecodable)
        self.loaded: list[str] = []
        self.played: list[str] = []
        self.stopped: list[str] = []

    def load(self, path: str) -> FakeSound:
        key = os.path.basename(path)
        if key in self._undecodable:
            raise ValueError(f"Unsupported audio format: {key}")
        self.loaded.append(key)
        return FakeSound(key)

    def play(self, handle: FakeSound) -> None:
        self.played.append(handle.key)

    def stop(self, handle: FakeSound) -> None:
        self.stopped.append(handle.key)


def _write_assets(root, skip: tuple[str, ...] = ()) -> None:
    """Create a placeholder file for every catalog asset not in ``skip``."""
    for work in CATALOG.all_works():
        key = CATALOG.asset_key_of(work)
        if key not in skip:
            (root / key).write_bytes(b"ID3")


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def asset_root(tmp_path):
    root = tmp_path / "files"
    root.mkdir()
    _write_assets(root)
    return root


@pytest.fixture
def write_assets():
    """Call with a directory and optional asset keys to leave out."""
    return _write_assets


@pytest.fixture
def audio_factory():
    return InMemoryAudio


@pytest.fixture
def audio(audio_factory):
    return audio_factory()


@pytest.fixture
def assets(asset_root, audio):
    return load_all(CATALOG, audio, str(asset_root))


@pytest.fixture
def rng():
    return random.Random(1234)
