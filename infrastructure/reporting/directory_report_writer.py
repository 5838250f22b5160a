# infrastructure/reporting/directory_report_writer.py

from __future__ import annotations
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

import pandas as pd

from application.directory_service import DirectoryView
from application.directory_view import count_label, view_rows
from application.ports import DirectoryReportWriter
from domain.services.facet_extractor import Facets


class CsvJsonDirectoryWriter(DirectoryReportWriter):
    """
    Persist one filtered directory view to CSV + JSON, plus a meta JSON
    with the filters, counts and facets it was produced from.
    """

    def __init__(self, out_dir: Path) -> None:
        self._out_dir = Path(out_dir)
        self._out_dir.mkdir(parents=True, exist_ok=True)

    def write(self, view: DirectoryView, facets: Facets) -> Dict[str, str]:
        latest_csv = self._out_dir / "latest_directory.csv"
        latest_json = self._out_dir / "latest_directory.json"
        meta_json = self._out_dir / "latest_directory.meta.json"

        rows = view_rows(view)

        # CSV: sectors flattened the same way the input CSV stores them
        df = pd.DataFrame(rows, columns=["name", "region", "description", "sectors", "website", "link_label", "link_enabled"])
        df["sectors"] = df["sectors"].map(lambda xs: ";".join(xs))
        df.to_csv(latest_csv, index=False)

        latest_json.write_text(json.dumps(rows, indent=2, ensure_ascii=False), encoding="utf-8")

        meta = {
            "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "filters": asdict(view.filters),
            "counts": {"matches": view.count, "total": view.total},
            "label": count_label(view.count),
            "facets": {"sectors": list(facets.sectors), "regions": list(facets.regions)},
        }
        meta_json.write_text(json.dumps(meta, indent=2, ensure_ascii=False), encoding="utf-8")

        return {
            "csv": str(latest_csv),
            "json": str(latest_json),
            "meta": str(meta_json),
        }
