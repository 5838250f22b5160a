# domain/services/company_loader.py
from typing import Any, Dict, Iterable, Optional, Tuple
import pandas as pd
from domain.models.company import Company

REQUIRED_COLUMNS = ["name", "description", "sectors", "headquarters"]
SECTOR_SEP = ";"


def _clean_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    if not isinstance(v, (list, tuple)) and pd.isna(v):
        return None
    s = str(v).strip()
    return s or None


def _split_sectors(v: Any) -> Tuple[str, ...]:
    if v is None:
        return ()
    if isinstance(v, (list, tuple)):
        parts = [_clean_str(x) for x in v]
    else:
        raw = _clean_str(v)
        parts = [p.strip() for p in raw.split(SECTOR_SEP)] if raw else []
    # keep provider order, drop blanks and repeats
    return tuple(dict.fromkeys(p for p in parts if p))


def company_from_record(r: Dict[str, Any]) -> Company:
    return Company(
        name=_clean_str(r.get("name")),
        description=_clean_str(r.get("description")),
        sectors=_split_sectors(r.get("sectors")),
        headquarters=_clean_str(r.get("headquarters")),
        website=_clean_str(r.get("website")),
    )


def companies_from_records(rows: Iterable[Dict[str, Any]]) -> list[Company]:
    out = []
    for i, r in enumerate(rows):
        if not isinstance(r, dict):
            raise ValueError(f"row {i} is not an object")
        out.append(company_from_record(r))
    return out


def companies_from_frame(df: pd.DataFrame) -> list[Company]:
    return companies_from_records(df.to_dict(orient="records"))
