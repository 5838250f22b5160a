# application/cli/browse_directory.py
from __future__ import annotations
from datetime import timedelta
from pathlib import Path
import argparse
import logging
import sys

from application.ports import CompanyProvider, DirectoryConfig
from application.directory_service import DirectoryService
from application.directory_view import count_label, region_options, render_text, sector_options
from domain.models.filter_state import FilterState, ALL_SECTORS, ALL_REGIONS
from infrastructure.config.paths import RepoPaths
from infrastructure.reporting.directory_report_writer import CsvJsonDirectoryWriter
from infrastructure.repositories.csv_company_repository import CsvCompanyRepository
from infrastructure.repositories.json_company_repository import JsonCompanyRepository
from infrastructure.sources.http_company_provider import HttpCompanyProvider


def build_provider(cfg: DirectoryConfig, paths: RepoPaths) -> CompanyProvider:
    """Pick a provider from the source string: URL -> HTTP, *.json -> JSON, else CSV."""
    src = cfg.companies_source
    if not src:
        return CsvCompanyRepository(paths.companies_csv)
    if src.startswith(("http://", "https://")):
        return HttpCompanyProvider(
            src,
            cache_file=paths.cache / "companies.json",
            ttl=timedelta(hours=cfg.cache_ttl_hours),
            timeout=cfg.http_timeout,
        )
    p = Path(src)
    if not p.is_absolute():
        p = Path.cwd() / p
    if p.suffix.lower() == ".json":
        return JsonCompanyRepository(p)
    return CsvCompanyRepository(p)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Browse the maritime company directory.")
    ap.add_argument("--companies", type=str, default=None,
                    help="CSV/JSON file or http(s) URL (default: data/companies.csv)")
    ap.add_argument("--query", "-q", type=str, default="", help="Text searched in name and description")
    ap.add_argument("--sector", type=str, default=ALL_SECTORS, help=f"Exact sector label ('{ALL_SECTORS}' = all)")
    ap.add_argument("--region", type=str, default=ALL_REGIONS, help=f"Exact region label ('{ALL_REGIONS}' = all)")
    ap.add_argument("--facets", action="store_true", help="List selectable sectors and regions, then exit")
    ap.add_argument("--out", type=str, nargs="?", const="", default=None,
                    help="Write latest_directory.{csv,json,meta.json} to this dir (bare --out: data/reports)")
    ap.add_argument("--http-timeout", type=int, default=30)
    ap.add_argument("--cache-ttl-hours", type=int, default=24)
    ap.add_argument("--verbose", "-v", action="count", default=0,
                    help="-v INFO, -vv DEBUG")
    args = ap.parse_args(argv)

    # Logging setup
    level = logging.WARNING
    if args.verbose == 1: level = logging.INFO
    elif args.verbose >= 2: level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    logger = logging.getLogger("directory")

    paths = RepoPaths.default()
    report_dir = None
    if args.out is not None:
        report_dir = Path(args.out) if args.out else paths.reports

    cfg = DirectoryConfig(
        companies_source=args.companies,
        http_timeout=args.http_timeout,
        cache_ttl_hours=args.cache_ttl_hours,
        report_dir=report_dir,
    )

    try:
        provider = build_provider(cfg, paths)
    except FileNotFoundError as e:
        print(f"❌ {e}", file=sys.stderr)
        print("   Tip: pass --companies <path-or-url>", file=sys.stderr)
        return 2

    svc = DirectoryService(provider, logger=logger)
    svc.load()

    if args.facets:
        print("Secteurs:")
        for value, label in sector_options(svc.facets.sectors):
            print(f"  {value:<30} {label}")
        print("Régions:")
        for value, label in region_options(svc.facets.regions):
            print(f"  {value:<30} {label}")
        return 0

    filters = FilterState().with_query(args.query).with_sector(args.sector).with_region(args.region)
    view = svc.filter(filters)

    if cfg.report_dir is not None:
        writer = CsvJsonDirectoryWriter(cfg.report_dir)
        out = writer.write(view, svc.facets)
        logger.info("Report written → %s", out["csv"])
        print(f"✅ {count_label(view.count)} → {out['csv']}")
        return 0

    sys.stdout.write(render_text(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
