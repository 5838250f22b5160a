# domain/models/filter_state.py
from dataclasses import dataclass, replace

ALL_SECTORS = "tous"
ALL_REGIONS = "toutes"


@dataclass(frozen=True)
class FilterState:
    """
    Current directory filters.

    Never edited in place: every user edit produces a new state through
    the with_* helpers, the old one is simply dropped.
    """

    query: str = ""
    sector: str = ALL_SECTORS
    region: str = ALL_REGIONS

    def with_query(self, query: str) -> "FilterState":
        return replace(self, query=query)

    def with_sector(self, sector: str) -> "FilterState":
        return replace(self, sector=sector)

    def with_region(self, region: str) -> "FilterState":
        return replace(self, region=region)

    @classmethod
    def reset(cls) -> "FilterState":
        return cls()

    @property
    def is_default(self) -> bool:
        return self == FilterState()
