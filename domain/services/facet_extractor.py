#domain/services/facet_extractor.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
import unicodedata

from domain.models.company import Company
from domain.models.filter_state import ALL_SECTORS, ALL_REGIONS


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def locale_sort_key(value: str) -> Tuple[str, str, str]:
    """
    Collation-like ordering key for facet labels.

    Levels, compared in turn:
      1) base letters: accents stripped, case folded  ("Béjaïa" ~ "bejaia")
      2) accents kept, case folded
      3) case-swapped raw string: lower case before upper case on case-only
         ties ("port" < "Port"), and exact ties sort the same way every run
    """
    folded = value.casefold()
    return _strip_accents(folded), folded, value.swapcase()


def _sorted_facet(sentinel: str, values: Iterable[str]) -> List[str]:
    # dedupe before sorting; set iteration order must not leak into the output
    distinct = {v for v in values if isinstance(v, str)}
    return [sentinel, *sorted(distinct, key=locale_sort_key)]


def extract_sectors(companies: Iterable[Company]) -> List[str]:
    """["tous", <every distinct sector label, locale-sorted>]"""
    return _sorted_facet(
        ALL_SECTORS,
        (sector for c in companies for sector in (c.sectors or ())),
    )


def extract_regions(companies: Iterable[Company]) -> List[str]:
    """["toutes", <every distinct headquarters, locale-sorted>]"""
    return _sorted_facet(ALL_REGIONS, (c.headquarters for c in companies))


@dataclass(frozen=True)
class Facets:
    sectors: Tuple[str, ...]
    regions: Tuple[str, ...]


def extract_facets(companies: Iterable[Company]) -> Facets:
    snapshot = tuple(companies)
    return Facets(
        sectors=tuple(extract_sectors(snapshot)),
        regions=tuple(extract_regions(snapshot)),
    )
