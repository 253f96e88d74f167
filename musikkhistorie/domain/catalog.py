"""The fixed catalog of works and its lookups.

``CATALOG`` is built once at import time from ``_ENTRIES`` and never
mutated. The module-level functions delegate to it so callers that only
need the default catalog can skip passing it around.
"""

from types import MappingProxyType
from typing import Mapping

from musikkhistorie.config import ASSET_EXTENSION
from musikkhistorie.domain.errors import CatalogRangeError
from musikkhistorie.domain.model import (
    BAROKKEN,
    MIDDELALDEREN,
    MODERNE_MUSIKK,
    PERIODS,
    RENESSANSEN,
    ROMANTIKKEN,
    WIENERKLASSISISMEN,
    Work,
    WorkInfo,
)

_ENTRIES = {
    Work.O_VIRIDISSIMA_VIRGA: WorkInfo(
        names=("O viridissima virga",),
        composer="Hildegard von Bingen",
        period=MIDDELALDEREN,
        slug="o_virdissima_virga",
    ),
    Work.LAMENTATION_1: WorkInfo(
        names=("Lamentation 1",),
        composer="Giovanni da Palestrina",
        period=RENESSANSEN,
        slug="lamentation_1",
    ),
    Work.THE_KING_OF_DENMARKS_GALLIARD: WorkInfo(
        names=("The king of denmarks galliard", "The king of denmark's galliard"),
        composer="John Dowland",
        period=RENESSANSEN,
        slug="the_king_of_denmarks_galliard",
    ),
    Work.HALLELUJA: WorkInfo(
        names=("Halleluja-koret fra Messias",),
        composer="Georg Friedrich Handel",
        period=BAROKKEN,
        slug="halleluja",
    ),
    Work.FLOYTEKVARTETT: WorkInfo(
        names=("Fløytekvartett i A-dur", "Fløytekvartett"),
        composer="Wolfgang Amadeus Mozart",
        period=WIENERKLASSISISMEN,
        slug="fløytekvartett_i_a_dur",
    ),
    Work.SYMFONI_NR_5: WorkInfo(
        names=("Symfoni nr 5", 'Symfoni nr 5 "skjebnesymfonien"', '"skjebnesymfonien"'),
        composer="Ludwig van Beethoven",
        period=WIENERKLASSISISMEN,
        slug="symfoni_nr_5",
    ),
    Work.GJENDINES_BADNLAT: WorkInfo(
        names=("Gjendines bådnlåt",),
        composer="Edvard Grieg",
        period=ROMANTIKKEN,
        slug="gjendines_bådnlåt",
    ),
    Work.PIEROT_LUNAIRE: WorkInfo(
        names=("Pierot lunaire", "Den månesyke Pierot"),
        composer="Arnold Schonberg",
        period=MODERNE_MUSIKK,
        slug="pierot_lunaire",
    ),
    Work.EPITAFFIO: WorkInfo(
        names=("Epitaffio", "Epitaffio for orkester og lydbånd"),
        composer="Arne Nordheim",
        period=MODERNE_MUSIKK,
        slug="epitaffio",
    ),
}


class Catalog:
    """Read-only table of ``Work -> WorkInfo``.

    The constructor checks the table is total over ``Work``, that every
    period belongs to ``PERIODS`` and that no two works share an asset key.
    """

    def __init__(self, entries: Mapping[Work, WorkInfo], extension: str = ASSET_EXTENSION):
        missing = [w for w in Work if w not in entries]
        if missing:
            raise ValueError(f"Catalog has no metadata for: {', '.join(w.name for w in missing)}")
        unknown = [k for k in entries if not isinstance(k, Work)]
        if unknown:
            raise ValueError(f"Catalog has metadata for unknown works: {unknown!r}")

        for work, info in entries.items():
            if not info.names:
                raise ValueError(f"{work.name} has no names")
            if info.period not in PERIODS:
                raise ValueError(f"{work.name} has unknown period {info.period!r}")

        self._entries = MappingProxyType(dict(sorted(entries.items())))
        self._extension = extension
        self._works = tuple(self._entries)

        keys = [self.asset_key_of(w) for w in self._works]
        if len(set(keys)) != len(keys):
            dupes = sorted({k for k in keys if keys.count(k) > 1})
            raise ValueError(f"Asset keys are not unique: {', '.join(dupes)}")

    def __len__(self) -> int:
        return len(self._works)

    def info(self, work: Work) -> WorkInfo:
        return self._entries[work]

    def names_of(self, work: Work) -> tuple[str, ...]:
        """All accepted names for ``work``; the first one is canonical."""
        return self._entries[work].names

    def composer_of(self, work: Work) -> str:
        return self._entries[work].composer

    def period_of(self, work: Work) -> str:
        return self._entries[work].period

    def asset_key_of(self, work: Work) -> str:
        return f"{self._entries[work].slug}{self._extension}"

    def all_works(self) -> tuple[Work, ...]:
        """Every work, in ``Work`` index order."""
        return self._works

    def work_from_index(self, index: int) -> Work:
        """Return the work at ``index``; never wraps or clamps."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise CatalogRangeError(index, len(self._works))
        if not 0 <= index < len(self._works):
            raise CatalogRangeError(index, len(self._works))
        return self._works[index]


CATALOG = Catalog(_ENTRIES)


def names_of(work: Work) -> tuple[str, ...]:
    return CATALOG.names_of(work)


def composer_of(work: Work) -> str:
    return CATALOG.composer_of(work)


def period_of(work: Work) -> str:
    return CATALOG.period_of(work)


def asset_key_of(work: Work) -> str:
    return CATALOG.asset_key_of(work)


def all_works() -> tuple[Work, ...]:
    return CATALOG.all_works()


def work_from_index(index: int) -> Work:
    return CATALOG.work_from_index(index)
