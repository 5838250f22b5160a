# domain/models/company.py
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Company:
    name: str                      # "Hyproc Shipping Company"
    description: str               # free text, searched by the query filter
    sectors: Tuple[str, ...]       # ("Transport maritime", "Hydrocarbures"), display order kept
    headquarters: str              # wilaya, e.g. "Oran"
    website: Optional[str] = None  # None -> "Site non communiqué"

    @property
    def has_website(self) -> bool:
        return bool(self.website)
