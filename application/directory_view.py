# application/directory_view.py
from __future__ import annotations
from typing import Any, Dict, List, Tuple

from application.directory_service import DirectoryView
from domain.models.company import Company
from domain.models.filter_state import ALL_SECTORS, ALL_REGIONS

SECTOR_SENTINEL_LABEL = "Tous les secteurs"
REGION_SENTINEL_LABEL = "Toutes les wilayas"
LINK_LABEL = "Consulter le site"
NO_LINK_LABEL = "Site non communiqué"


def sector_options(sectors) -> List[Tuple[str, str]]:
    """(value, label) pairs for the sector select."""
    return [(s, SECTOR_SENTINEL_LABEL if s == ALL_SECTORS else s) for s in sectors]


def region_options(regions) -> List[Tuple[str, str]]:
    return [(r, REGION_SENTINEL_LABEL if r == ALL_REGIONS else r) for r in regions]


def count_label(count: int) -> str:
    # "0 entreprise référencée", "1 entreprise référencée", "12 entreprises référencée"
    return f"{count} entreprise{'s' if count > 1 else ''} référencée"


def company_card(company: Company) -> Dict[str, Any]:
    return {
        "name": company.name,
        "region": company.headquarters,
        "description": company.description,
        "sectors": list(company.sectors or ()),
        "website": company.website,
        "link_label": LINK_LABEL if company.has_website else NO_LINK_LABEL,
        "link_enabled": company.has_website,
    }


def view_rows(view: DirectoryView) -> List[Dict[str, Any]]:
    return [company_card(c) for c in view.companies]


def render_text(view: DirectoryView) -> str:
    lines = [count_label(view.count), ""]
    for card in view_rows(view):
        lines.append(f"{card['name']}  [{card['region']}]")
        if card["description"]:
            lines.append(f"  {card['description']}")
        if card["sectors"]:
            lines.append("  " + " · ".join(card["sectors"]))
        if card["link_enabled"]:
            lines.append(f"  {card['link_label']}: {card['website']}")
        else:
            lines.append(f"  {card['link_label']}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"
