"""Pure domain objects, no framework dependency."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Work(IntEnum):
    """The closed set of works in the catalog, in catalog order."""

    O_VIRIDISSIMA_VIRGA = 0
    LAMENTATION_1 = 1
    THE_KING_OF_DENMARKS_GALLIARD = 2
    HALLELUJA = 3
    FLOYTEKVARTETT = 4
    SYMFONI_NR_5 = 5
    GJENDINES_BADNLAT = 6
    PIEROT_LUNAIRE = 7
    EPITAFFIO = 8


MIDDELALDEREN = "Middelalderen"
RENESSANSEN = "Renessansen"
BAROKKEN = "Barokken"
WIENERKLASSISISMEN = "Wienerklassisismen"
ROMANTIKKEN = "Romantikken"
MODERNE_MUSIKK = "Moderne musikk"

# Chronological
PERIODS = (
    MIDDELALDEREN,
    RENESSANSEN,
    BAROKKEN,
    WIENERKLASSISISMEN,
    ROMANTIKKEN,
    MODERNE_MUSIKK,
)


@dataclass(frozen=True)
class WorkInfo:
    names: tuple[str, ...]
    composer: str
    period: str
    slug: str

    @property
    def canonical_name(self) -> str:
        return self.names[0]


class PlaybackState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
