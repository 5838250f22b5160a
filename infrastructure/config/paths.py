#infrastructure/config/paths.py
from dataclasses import dataclass
from pathlib import Path

@dataclass
class RepoPaths:
    root: Path
    companies_csv: Path
    cache: Path
    reports: Path

    @classmethod
    def from_root(cls, root: Path) -> "RepoPaths":
        return cls(
            root=root,
            companies_csv=root / "data" / "companies.csv",
            cache=root / "cache" / "companies",
            reports=root / "data" / "reports",
        )

    @classmethod
    def default(cls) -> "RepoPaths":
        # <root>/infrastructure/config/paths.py -> parents[2] == <root>
        return cls.from_root(Path(__file__).resolve().parents[2])
