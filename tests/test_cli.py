"""Command line tests for scripts/pensum_cli.py."""

import importlib.util
from pathlib import Path

import pytest

from pensum.schemas import CompletionState
from pensum.tracker import ProgressStore


SCRIPT = Path(__file__).parent.parent / "scripts" / "pensum_cli.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("pensum_cli", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "plan.yaml"
    path.write_text("""
total_career_credits: 150
courses:
  - {id: "A", name: "Course A", level: 1, credits: 3}
  - {id: "B", name: "Course B", level: 1, credits: 4}
""", encoding="utf-8")
    return path


def run(cli, catalog_file, db_path, *args):
    return cli.main(["--catalog", str(catalog_file), "--db", str(db_path), *args])


class TestCli:
    """Test CLI subcommands against a temporary database."""

    def test_stats(self, cli, catalog_file, db_path, capsys):
        assert run(cli, catalog_file, db_path, "stats", "--terms", "abc") == 0
        out = capsys.readouterr().out
        assert "150" in out
        assert "0.0%" in out

    def test_stats_with_terms(self, cli, catalog_file, db_path, capsys):
        run(cli, catalog_file, db_path, "set", "A", "aprobada")
        capsys.readouterr()
        assert run(cli, catalog_file, db_path, "stats", "--terms", "4") == 0
        out = capsys.readouterr().out
        assert "36.8" in out

    def test_terms_after_mutation(self, cli, catalog_file, db_path, capsys):
        assert run(cli, catalog_file, db_path, "set", "A", "aprobada", "--terms", "3") == 0
        assert "49.0" in capsys.readouterr().out

    def test_set_and_persist(self, cli, catalog_file, db_path, capsys):
        assert run(cli, catalog_file, db_path, "set", "A", "aprobada") == 0
        out = capsys.readouterr().out
        assert "147" in out
        assert "2.0%" in out
        assert ProgressStore(db_path).load() == {"A": CompletionState.APPROVED}

    def test_cycle_and_reset(self, cli, catalog_file, db_path):
        run(cli, catalog_file, db_path, "cycle", "B")
        assert ProgressStore(db_path).load()["B"] == CompletionState.IN_PROGRESS
        run(cli, catalog_file, db_path, "reset", "B")
        assert ProgressStore(db_path).load()["B"] == CompletionState.NOT_TAKEN

    def test_unknown_course(self, cli, catalog_file, db_path):
        assert run(cli, catalog_file, db_path, "cycle", "Z") == 0
        assert ProgressStore(db_path).load() == {}

    def test_list(self, cli, catalog_file, db_path, capsys):
        run(cli, catalog_file, db_path, "set", "A", "en-curso")
        capsys.readouterr()
        run(cli, catalog_file, db_path, "list", "--level", "1")
        out = capsys.readouterr().out
        assert "Nivel 1" in out
        assert "Course A" in out
        assert "En curso" in out

    def test_reset_all(self, cli, catalog_file, db_path):
        run(cli, catalog_file, db_path, "set", "A", "aprobada")
        run(cli, catalog_file, db_path, "reset-all")
        assert ProgressStore(db_path).load() == {}

    def test_missing_catalog(self, cli, tmp_path, db_path):
        assert run(cli, tmp_path / "missing.yaml", db_path, "stats") == 1
