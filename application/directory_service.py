# application/directory_service.py

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging
import time

from domain.models.company import Company
from domain.models.filter_state import FilterState
from domain.services.facet_extractor import Facets, extract_facets
from domain.services.filter_evaluator import SearchCache, evaluate
from application.ports import CompanyProvider


@dataclass(frozen=True)
class DirectoryView:
    filters: FilterState
    companies: Tuple[Company, ...]
    total: int

    @property
    def count(self) -> int:
        return len(self.companies)


class DirectoryService:
    """
    Holds one loaded company snapshot and answers filter states against it.

    Facets and the search cache are derived once per load(); filter changes
    only re-run the evaluator.
    """

    def __init__(self, provider: CompanyProvider, logger: Optional[logging.Logger] = None) -> None:
        self.provider = provider
        self.log = logger or logging.getLogger("directory")
        self._companies: Optional[Tuple[Company, ...]] = None
        self._facets: Optional[Facets] = None
        self._cache: Optional[SearchCache] = None

    def load(self) -> Tuple[Company, ...]:
        t0 = time.time()
        # freeze before deriving anything: facets/filters never see a partial list
        snapshot = tuple(self.provider.load_companies())
        self._companies = snapshot
        self._facets = extract_facets(snapshot)
        self._cache = SearchCache(snapshot)
        self.log.info(
            "Directory loaded from %s: %d companies, %d sectors, %d regions (%.3fs)",
            getattr(self.provider, "source_label", self.provider.__class__.__name__),
            len(snapshot),
            len(self._facets.sectors) - 1,
            len(self._facets.regions) - 1,
            time.time() - t0,
        )
        return snapshot

    @property
    def companies(self) -> Tuple[Company, ...]:
        if self._companies is None:
            return self.load()
        return self._companies

    @property
    def facets(self) -> Facets:
        if self._facets is None:
            self.load()
        return self._facets

    def filter(self, filters: FilterState) -> DirectoryView:
        snapshot = self.companies
        hits: List[Company] = evaluate(snapshot, filters, cache=self._cache)
        self.log.debug(
            "Filter query=%r sector=%r region=%r -> %d / %d",
            filters.query, filters.sector, filters.region, len(hits), len(snapshot),
        )
        return DirectoryView(filters=filters, companies=tuple(hits), total=len(snapshot))
