from __future__ import annotations
from typing import Protocol, Dict, List, Optional, TYPE_CHECKING
from dataclasses import dataclass
from pathlib import Path

from domain.models.company import Company
from domain.services.facet_extractor import Facets

if TYPE_CHECKING:
    from application.directory_service import DirectoryView

# =========================
# Company data
# =========================

class CompanyProvider(Protocol):
    """Port: supply the full, read-only company collection."""
    source_label: str

    def load_companies(self) -> List[Company]:
        """
        Return every record, fully materialized. May be empty but never None.
        Records are trusted as-is; the directory core does not validate them.
        """
        ...


# =========================
# Directory output
# =========================

class DirectoryReportWriter(Protocol):
    """Port: persist one filtered view (rows + facets + metadata)."""
    def write(self, view: "DirectoryView", facets: Facets) -> Dict[str, str]: ...


@dataclass(frozen=True)
class DirectoryConfig:
    """Configuration for the directory use case."""
    companies_source: Optional[str] = None   # CSV/JSON path or http(s) URL; None -> bundled CSV
    http_timeout: int = 30
    cache_ttl_hours: int = 24
    report_dir: Optional[Path] = None

