"""
Tests for the directory report writer and the CLI entry point
"""
import json

import pandas as pd
import pytest

from application.cli.browse_directory import main
from application.directory_service import DirectoryService
from domain.models.filter_state import FilterState
from infrastructure.reporting.directory_report_writer import CsvJsonDirectoryWriter


class ListProvider:
    source_label = "list"

    def __init__(self, companies):
        self._companies = companies

    def load_companies(self):
        return list(self._companies)


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "companies.csv"
    path.write_text(
        "name,description,sectors,headquarters,website\n"
        "Alpha Marine,transport,Transport,Alger,\n"
        "Beta Port,services portuaires,Services,Oran,https://beta.example\n",
        encoding="utf-8",
    )
    return path


def test_writer_outputs(tmp_path, fleet):
    """CSV, JSON and meta are written and consistent"""
    svc = DirectoryService(ListProvider(fleet))
    view = svc.filter(FilterState(sector="Logistique"))

    out = CsvJsonDirectoryWriter(tmp_path / "reports").write(view, svc.facets)

    df = pd.read_csv(out["csv"])
    assert list(df["name"]) == ["EP Béjaïa", "CNAN Nord"]
    assert df.loc[0, "sectors"] == "Services portuaires;Logistique"

    rows = json.loads(open(out["json"], encoding="utf-8").read())
    assert rows[0]["link_enabled"] is True

    meta = json.loads(open(out["meta"], encoding="utf-8").read())
    assert meta["filters"] == {"query": "", "sector": "Logistique", "region": "toutes"}
    assert meta["counts"] == {"matches": 2, "total": len(fleet)}
    assert meta["facets"]["regions"][0] == "toutes"


def test_writer_empty_view(tmp_path, alpha_beta):
    """Zero matches still produce well-formed files"""
    svc = DirectoryService(ListProvider(alpha_beta))
    view = svc.filter(FilterState(region="Annaba"))

    out = CsvJsonDirectoryWriter(tmp_path).write(view, svc.facets)

    assert json.loads(open(out["json"], encoding="utf-8").read()) == []
    assert json.loads(open(out["meta"], encoding="utf-8").read())["label"] == "0 entreprise référencée"


def test_cli_filters_to_stdout(dataset, capsys):
    """Sector filter printed as text"""
    code = main(["--companies", str(dataset), "--sector", "Transport"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("1 entreprise référencée")
    assert "Alpha Marine" in out
    assert "Beta Port" not in out


def test_cli_facets(dataset, capsys):
    """--facets lists both facet lists with sentinel labels"""
    code = main(["--companies", str(dataset), "--facets"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Tous les secteurs" in out
    assert "Toutes les wilayas" in out
    assert out.index("Alger") < out.index("Oran")


def test_cli_writes_report(dataset, tmp_path, capsys):
    """--out writes the report files"""
    out_dir = tmp_path / "out"
    code = main(["--companies", str(dataset), "--query", "port", "--out", str(out_dir)])

    assert code == 0
    assert (out_dir / "latest_directory.csv").exists()
    meta = json.loads((out_dir / "latest_directory.meta.json").read_text(encoding="utf-8"))
    assert meta["counts"]["matches"] == 2


def test_cli_missing_dataset(tmp_path, capsys):
    """Missing file exits with status 2"""
    code = main(["--companies", str(tmp_path / "missing.csv")])

    assert code == 2
    assert "not found" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
