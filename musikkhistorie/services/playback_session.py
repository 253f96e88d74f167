"""Playback session: which work is current, and play/stop triggers for it."""

import logging
import random
import threading
from typing import Optional

from musikkhistorie.domain.catalog import Catalog
from musikkhistorie.domain.errors import InternalConsistencyError
from musikkhistorie.domain.model import PlaybackState, Work
from musikkhistorie.domain.ports import AudioPort
from musikkhistorie.services.asset_store import AssetTable

logger = logging.getLogger("musikkhistorie.playback")


class PlaybackSession:
    """Tracks the current work and hands play/stop triggers to the audio port.

    ``play`` while already playing retriggers: a second, independent
    instance starts and the first keeps sounding. Each triggered work stays in
    ``sounding`` until ``stop`` is called while it is current; the session
    never learns when a sound ends on its own, so ``state`` only reflects
    triggers.
    """

    def __init__(
        self,
        catalog: Catalog,
        assets: AssetTable,
        audio: AudioPort,
        current: Optional[Work] = None,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.assets = assets
        self.audio = audio
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._sounding: set[Work] = set()
        self.current = current if current is not None else self._rng.choice(catalog.all_works())

    @property
    def sounding(self) -> frozenset[Work]:
        """Works triggered by ``play`` and not stopped since."""
        return frozenset(self._sounding)

    @property
    def state(self) -> PlaybackState:
        if self.current in self._sounding:
            return PlaybackState.PLAYING
        return PlaybackState.IDLE

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    def select_random(self) -> Work:
        with self._lock:
            self.current = self._rng.choice(self.catalog.all_works())
            logger.info("Selected %s", self.current.name)
            return self.current

    def play(self) -> None:
        with self._lock:
            handle = self._current_handle()
            self.audio.play(handle)
            self._sounding.add(self.current)
            logger.info("Playing %s", self.catalog.asset_key_of(self.current))

    def stop(self) -> None:
        with self._lock:
            if self.current not in self._sounding:
                return
            handle = self._current_handle()
            self.audio.stop(handle)
            self._sounding.discard(self.current)
            logger.info("Stopped %s", self.catalog.asset_key_of(self.current))

    def _current_handle(self):
        try:
            return self.assets.get(self.current)
        except InternalConsistencyError:
            logger.critical("Asset table has no entry for %s", self.current.name)
            raise
