"""Use case: preload every asset, then open a session on a random work."""

import logging
import random
from typing import Optional

from musikkhistorie.domain.catalog import CATALOG, Catalog
from musikkhistorie.domain.ports import AudioPort
from musikkhistorie.services.asset_store import load_all
from musikkhistorie.services.playback_session import PlaybackSession

logger = logging.getLogger("musikkhistorie.startup")


class StartSessionUseCase:

    def __init__(self, audio: AudioPort, catalog: Catalog = CATALOG, rng: Optional[random.Random] = None):
        self.audio = audio
        self.catalog = catalog
        self.rng = rng

    def execute(self, asset_root: str, autoplay: bool = True) -> PlaybackSession:
        """Raises ``AssetLoadError`` before any session exists if an asset fails."""
        assets = load_all(self.catalog, self.audio, asset_root)

        session = PlaybackSession(self.catalog, assets, self.audio, rng=self.rng)
        logger.info("Session opened on %s", session.current.name)
        if autoplay:
            session.play()
        return session
