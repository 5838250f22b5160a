# infrastructure/sources/http_company_provider.py

from __future__ import annotations
import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from application.ports import CompanyProvider
from domain.models.company import Company
from domain.services.company_loader import companies_from_records

log = logging.getLogger("directory.http")


class HttpCompanyProvider(CompanyProvider):
    """
    Fetch the company directory as a JSON array over HTTP.

    A copy is kept in cache_file; while it is younger than ttl it is served
    without touching the network. If the request fails and there is no
    fresh cache, the error propagates (a stale or missing dataset must not
    be filtered as if it were complete).
    """

    def __init__(
        self,
        url: str,
        cache_file: Optional[Path] = None,
        ttl: timedelta | None = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self._cache_file = Path(cache_file) if cache_file else None
        self._ttl = ttl or timedelta(hours=24)
        self._timeout = timeout
        self._session = session
        self.source_label = url

    # ---------- Cache helpers ----------

    def _load_cache_raw(self) -> Optional[List[Dict[str, Any]]]:
        if self._cache_file is None or not self._cache_file.exists():
            return None
        try:
            st = datetime.fromtimestamp(self._cache_file.stat().st_mtime, tz=timezone.utc)
            if datetime.now(timezone.utc) - st > self._ttl:
                log.debug("Cache expired: %s", self._cache_file)
                return None
            obj = json.loads(self._cache_file.read_text(encoding="utf-8"))
            if not isinstance(obj, dict):
                log.warning("Ignoring malformed cache %s: expected an object", self._cache_file)
                return None
            rows = obj.get("companies")
            return rows if isinstance(rows, list) else None
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable cache %s: %s", self._cache_file, e)
            return None

    def _save_cache_raw(self, rows: List[Dict[str, Any]]) -> None:
        if self._cache_file is None:
            return
        try:
            self._cache_file.parent.mkdir(parents=True, exist_ok=True)
            payload = {
                "source": self.url,
                "fetched_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
                "companies": rows,
            }
            self._cache_file.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            log.warning("Could not write cache %s: %s", self._cache_file, e)

    # ---------- Remote fetch ----------

    def _fetch_raw(self) -> List[Dict[str, Any]]:
        get = self._session.get if self._session is not None else requests.get
        r = get(self.url, timeout=self._timeout)
        r.raise_for_status()
        data = r.json()
        if isinstance(data, dict):
            data = data.get("companies")
        if not isinstance(data, list):
            raise ValueError(f"{self.url} did not return a JSON array of companies")
        return data

    # ---------- Public API ----------

    def load_companies(self) -> List[Company]:
        raw = self._load_cache_raw()
        if raw is None:
            log.info("Fetching companies from %s", self.url)
            raw = self._fetch_raw()
            self._save_cache_raw(raw)
        else:
            log.info("Using cached companies from %s", self._cache_file)
        return companies_from_records(raw)
