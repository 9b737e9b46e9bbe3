"""Tests for content catalog parsing and loading."""

from pathlib import Path

import pytest

from tagcloud.core.catalog import load_catalog, parse_catalog
from tagcloud.domain.exceptions import ConfigurationException


def test_parse_catalog_keeps_declared_order() -> None:
    catalog = parse_catalog(
        {
            "contenttypes": {"articles": {"taxonomy": ["categories", "tags"]}},
            "taxonomy": {"tags": {"behaves_like": "tags"}},
        }
    )
    assert catalog.taxonomies_for("articles") == ["categories", "tags"]
    assert catalog.behaves_like("tags") == "tags"


def test_unknown_names_yield_empty_results() -> None:
    catalog = parse_catalog(None)
    assert catalog.taxonomies_for("missing") == []
    assert catalog.behaves_like("missing") is None


def test_content_type_without_taxonomy_key() -> None:
    catalog = parse_catalog({"contenttypes": {"pages": {}}})
    assert catalog.taxonomies_for("pages") == []


def test_taxonomy_without_behaves_like_rejected() -> None:
    with pytest.raises(ConfigurationException) as exc_info:
        parse_catalog({"taxonomy": {"tags": {}}})
    assert exc_info.value.error_code == "CONFIGURATION_ERROR"
    assert exc_info.value.details["errors"]


def test_taxonomy_list_must_hold_strings() -> None:
    with pytest.raises(ConfigurationException):
        parse_catalog({"contenttypes": {"articles": {"taxonomy": [{"name": "tags"}]}}})


def test_load_catalog_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yml"
    path.write_text(
        "contenttypes:\n"
        "  entries:\n"
        "    taxonomy: [tags]\n"
        "taxonomy:\n"
        "  tags:\n"
        "    behaves_like: tags\n",
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.taxonomies_for("entries") == ["tags"]


def test_load_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationException, match="not readable"):
        load_catalog(tmp_path / "nope.yml")


def test_load_catalog_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yml"
    path.write_text("contenttypes: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationException, match="not valid YAML"):
        load_catalog(path)


def test_load_catalog_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yml"
    path.write_text("- tags\n- categories\n", encoding="utf-8")
    with pytest.raises(ConfigurationException, match="must be a mapping"):
        load_catalog(path)


def test_load_catalog_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yml"
    path.write_text("", encoding="utf-8")
    assert load_catalog(path).contenttypes == {}
