"""Error taxonomy for the catalog and playback core.

Every error here reflects a packaging or build defect, never a transient
condition, so none of them is retried.
"""


class MusikkhistorieError(Exception):
    """Base class for all core errors."""


class CatalogRangeError(MusikkhistorieError, IndexError):
    """A work index outside ``[0, N)`` was requested."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Work index {index!r} is out of range (0..{size - 1})")


class AssetLoadError(MusikkhistorieError):
    """An audio asset could not be located or decoded."""

    def __init__(self, asset_key: str, cause: BaseException):
        self.asset_key = asset_key
        self.cause = cause
        super().__init__(f"Couldn't load sound {asset_key}: {cause}")


class InternalConsistencyError(MusikkhistorieError, LookupError):
    """A catalog work has no entry in the asset table it is looked up in."""

    def __init__(self, work):
        self.work = work
        super().__init__(f"No loaded asset for {work!r}; catalog and asset table are out of sync")
