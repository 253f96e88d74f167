"""Eager, all-or-nothing loading of every catalog work's audio asset."""

import logging
import os
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from musikkhistorie.domain.catalog import Catalog
from musikkhistorie.domain.errors import AssetLoadError, InternalConsistencyError
from musikkhistorie.domain.model import Work
from musikkhistorie.domain.ports import AudioPort

logger = logging.getLogger("musikkhistorie.assets")


class AssetTable:
    """Read-only ``Work -> handle`` mapping produced by ``load_all``."""

    def __init__(self, handles: Mapping[Work, Any]):
        self._handles = MappingProxyType(dict(handles))

    def get(self, work: Work) -> Any:
        try:
            return self._handles[work]
        except KeyError:
            raise InternalConsistencyError(work) from None

    def __contains__(self, work: object) -> bool:
        return work in self._handles

    def __iter__(self) -> Iterator[Work]:
        return iter(self._handles)

    def __len__(self) -> int:
        return len(self._handles)


def load_all(catalog: Catalog, audio: AudioPort, asset_root: str) -> AssetTable:
    """Decode the asset of every work in ``catalog.all_works()`` order.

    Blocks until done. Raises ``AssetLoadError`` on the first asset that is
    missing or fails to decode; no table is returned in that case.
    """
    works = catalog.all_works()
    logger.info("Loading %s assets from %s", len(works), asset_root)

    handles: dict[Work, Any] = {}
    for work in works:
        key = catalog.asset_key_of(work)
        path = os.path.join(asset_root, key)
        if not os.path.isfile(path):
            logger.error("Asset %s not found at %s", key, path)
            missing = FileNotFoundError(f"No such file: {path}")
            raise AssetLoadError(key, missing) from missing
        try:
            handles[work] = audio.load(path)
        except Exception as e:
            logger.error("Asset %s could not be decoded: %s", key, e)
            raise AssetLoadError(key, e) from e
        logger.debug("Loaded %s for %s", key, work.name)

    logger.info("All %s assets loaded", len(handles))
    return AssetTable(handles)
