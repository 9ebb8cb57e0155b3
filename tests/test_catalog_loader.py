"""Catalog loader tests."""

import pytest
import yaml
from pydantic import ValidationError

from pensum.utils import load_catalog, read_catalog_data, DEFAULT_CATALOG_PATH


def write_yaml(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestCatalogLoader:
    """Test loading catalogs from YAML."""

    def test_bundled_catalog(self):
        catalog = load_catalog()
        assert DEFAULT_CATALOG_PATH.exists()
        assert catalog.total_career_credits == 150
        assert catalog.levels() == list(range(1, 10))
        assert len(set(catalog.ids)) == len(catalog)

    def test_bundled_references_are_urls(self):
        catalog = load_catalog()
        referenced = [c for c in catalog.courses if c.has_reference]
        assert referenced
        assert all(c.reference_url == c.reference_document for c in referenced)

    def test_load_custom(self, tmp_path):
        path = write_yaml(tmp_path / "plan.yaml", """
name: Plan
total_career_credits: 20
courses:
  - {id: "A", name: "Uno", level: 1, credits: 3}
  - {id: "B", name: "Dos", level: 2, credits: 4, reference_document: "b.pdf"}
""")
        catalog = load_catalog(path)
        assert catalog.name == "Plan"
        assert catalog.ids == ["A", "B"]
        assert catalog.get("B").reference_document == "b.pdf"

    def test_total_defaults(self, tmp_path):
        path = write_yaml(tmp_path / "plan.yaml", "courses: []\n")
        assert load_catalog(path).total_career_credits == 150

    def test_empty_file(self, tmp_path):
        path = write_yaml(tmp_path / "plan.yaml", "")
        assert read_catalog_data(path) == {}
        assert len(load_catalog(path)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = write_yaml(tmp_path / "plan.yaml", "courses: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_catalog(path)

    def test_duplicate_ids(self, tmp_path):
        path = write_yaml(tmp_path / "plan.yaml", """
courses:
  - {id: "A", name: "Uno", level: 1, credits: 3}
  - {id: "A", name: "Otra", level: 1, credits: 3}
""")
        with pytest.raises(ValidationError):
            load_catalog(path)

    def test_invalid_course(self, tmp_path):
        path = write_yaml(tmp_path / "plan.yaml", """
courses:
  - {id: "A", name: "Uno", level: 0, credits: 3}
""")
        with pytest.raises(ValidationError):
            load_catalog(path)
