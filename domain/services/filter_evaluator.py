#domain/services/filter_evaluator.py
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from domain.models.company import Company
from domain.models.filter_state import FilterState, ALL_SECTORS, ALL_REGIONS


def _fold(text: Optional[str]) -> Optional[str]:
    return text.casefold() if isinstance(text, str) else None


class SearchCache:
    """
    Case-folded (name, description) per company of ONE snapshot.

    Bound to the tuple it was built from; evaluate() ignores it for any
    other collection (including lists, which may change after the cache is
    built), so a reloaded dataset needs a new cache.
    """

    def __init__(self, companies: Sequence[Company]) -> None:
        self._source = companies
        self._folded: Tuple[Tuple[Optional[str], Optional[str]], ...] = tuple(
            (_fold(c.name), _fold(c.description)) for c in companies
        )

    def covers(self, companies: Sequence[Company]) -> bool:
        return (
            isinstance(companies, tuple)
            and companies is self._source
            and len(companies) == len(self._folded)
        )

    def __getitem__(self, idx: int) -> Tuple[Optional[str], Optional[str]]:
        return self._folded[idx]

    def __len__(self) -> int:
        return len(self._folded)


def _text_hit(needle: str, name: Optional[str], description: Optional[str]) -> bool:
    # needle is already folded; None fields (bad provider rows) never match
    return (name is not None and needle in name) or (
        description is not None and needle in description
    )


def matches_query(company: Company, query: str) -> bool:
    if len(query) == 0:
        return True
    return _text_hit(query.casefold(), _fold(company.name), _fold(company.description))


def matches_sector(company: Company, sector: str) -> bool:
    if sector == ALL_SECTORS:
        return True
    return any(s == sector for s in (company.sectors or ()))


def matches_region(company: Company, region: str) -> bool:
    return region == ALL_REGIONS or company.headquarters == region


def matches(company: Company, filters: FilterState) -> bool:
    return (
        matches_query(company, filters.query)
        and matches_sector(company, filters.sector)
        and matches_region(company, filters.region)
    )


def evaluate(
    companies: Sequence[Company],
    filters: FilterState,
    cache: Optional[SearchCache] = None,
) -> List[Company]:
    """
    Companies satisfying query AND sector AND region, in input order.

    Single pass, inputs untouched. Unknown sector/region values are not
    errors; they just match nothing.
    """
    needle = filters.query.casefold()
    use_cache = cache is not None and cache.covers(companies)

    out: List[Company] = []
    for idx, company in enumerate(companies):
        if not matches_sector(company, filters.sector):
            continue
        if not matches_region(company, filters.region):
            continue
        if needle:
            if use_cache:
                name, description = cache[idx]
            else:
                name, description = _fold(company.name), _fold(company.description)
            if not _text_hit(needle, name, description):
                continue
        out.append(company)
    return out
