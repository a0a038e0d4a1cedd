"""Tests for the maintenance scripts under scripts/."""

import json
import runpy
from pathlib import Path
from unittest.mock import patch

import pytest

SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"


def _script(name: str) -> dict:
    return runpy.run_path(str(SCRIPTS / name))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"storage": {"backend": "file", "path": str(tmp_path / "data.json")}}))
    return path


def _stored(config_path: Path) -> dict:
    data_path = json.loads(config_path.read_text())["storage"]["path"]
    doc = json.loads(Path(data_path).read_text())
    return {key: json.loads(text) for key, text in doc.items()}


# ============================================================================
# seed_demo.py
# ============================================================================


class TestSeedDemo:
    """Tests for seeding demo records."""

    def test_seeds_every_demo_record(self, config_path: Path, capsys: pytest.CaptureFixture) -> None:
        seed = _script("seed_demo.py")
        with patch("sys.argv", ["seed_demo.py", "--config", str(config_path)]):
            assert seed["main"]() == 0
        stored = _stored(config_path)
        assert len(stored["inventoryItems"]) == len(seed["DEMO_ITEMS"])
        assert len(stored["suppliers"]) == len(seed["DEMO_SUPPLIERS"])
        assert "Seeded 5 items and 3 suppliers" in capsys.readouterr().out

    def test_reports_rows_that_fail_validation(self, config_path: Path, capsys: pytest.CaptureFixture) -> None:
        seed = _script("seed_demo.py")
        bad = seed["DEMO_ITEMS"] + [{"name": "", "quantity": 1, "category": "Tools", "supplier": "Acme"}]
        with patch.dict(seed["main"].__globals__, {"DEMO_ITEMS": bad}), \
                patch("sys.argv", ["seed_demo.py", "--config", str(config_path)]):
            assert seed["main"]() == 1
        out = capsys.readouterr().out
        assert "Seeded 5 items" in out
        assert "Name is required" in out

    def test_refuses_non_empty_stores(self, config_path: Path) -> None:
        seed = _script("seed_demo.py")
        with patch("sys.argv", ["seed_demo.py", "--config", str(config_path)]):
            assert seed["main"]() == 0
            assert seed["main"]() == 1
        assert len(_stored(config_path)["inventoryItems"]) == 5


# ============================================================================
# import_csv.py
# ============================================================================


class TestImportCsv:
    """Tests for importing records from CSV."""

    def test_imports_valid_rows_and_reports_the_rest(self, config_path: Path, tmp_path: Path,
                                                     capsys: pytest.CaptureFixture) -> None:
        csv_path = tmp_path / "items.csv"
        csv_path.write_text(
            "id,name,quantity,category,supplier\n"
            "9,Bolt,3,Hardware,Acme\n"
            "9,,4,Hardware,Acme\n"
        )
        importer = _script("import_csv.py")
        with patch("sys.argv", ["import_csv.py", "items", "--input", str(csv_path), "--config", str(config_path)]):
            assert importer["main"]() == 1
        items = _stored(config_path)["inventoryItems"]
        assert [i["name"] for i in items] == ["Bolt"]
        assert items[0]["id"] != 9
        out = capsys.readouterr().out
        assert "Imported 1 of 2 items" in out
        assert '"row": 2' in out
