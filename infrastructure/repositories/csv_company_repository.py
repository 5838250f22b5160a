#infrastructure/repositories/csv_company_repository.py
from __future__ import annotations
from pathlib import Path
from typing import List
import pandas as pd

from application.ports import CompanyProvider
from domain.models.company import Company
from domain.services.company_loader import REQUIRED_COLUMNS, companies_from_frame


class CsvCompanyRepository(CompanyProvider):
    """
    Reads the company directory CSV (e.g. data/companies.csv).

    Columns: name, description, sectors (";"-separated), headquarters,
    website (optional, blank -> no site).
    """

    def __init__(self, csv_path: Path) -> None:
        self.csv_path = Path(csv_path)
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Companies CSV not found: {self.csv_path}")
        self.source_label = str(self.csv_path)

    def load_companies(self) -> List[Company]:
        df = pd.read_csv(self.csv_path, dtype=str, keep_default_na=False)
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{self.csv_path} is missing required column(s): {', '.join(missing)}")
        if "website" not in df.columns:
            df["website"] = None
        return companies_from_frame(df)
