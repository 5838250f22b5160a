# infrastructure/repositories/json_company_repository.py

from __future__ import annotations
from pathlib import Path
from typing import List
import json

from application.ports import CompanyProvider
from domain.models.company import Company
from domain.services.company_loader import companies_from_records


class JsonCompanyRepository(CompanyProvider):
    """JSON array of {name, description, sectors: [...], headquarters, website?}."""

    def __init__(self, json_path: Path) -> None:
        self.json_path = Path(json_path)
        if not self.json_path.exists():
            raise FileNotFoundError(f"Companies JSON not found: {self.json_path}")
        self.source_label = str(self.json_path)

    def load_companies(self) -> List[Company]:
        payload = json.loads(self.json_path.read_text(encoding="utf-8"))
        if not isinstance(payload, list):
            raise ValueError(f"{self.json_path} must contain a JSON array of companies")
        return companies_from_records(payload)
