"""Tests for JSON ingestion and record normalization."""

import json
from pathlib import Path

import pytest

from src.exceptions import DataValidationError
from src.pipeline.site_builder import data_loader as dl
from src.pipeline.site_builder.models import Services


def test_load_site_data_preserves_input_order(data_dir: Path) -> None:
    data = dl.load_site_data(data_dir)
    assert [s.code for s in data.states] == ["TX", "GA", "AL", "NY"]
    assert [c.slug for c in data.cities] == ["houston", "austin", "atlanta", "buffalo"]
    assert [s.id for s in data.stores] == ["a1", "a2", "a3", "h1", "orphan"]


def test_optional_store_fields_default(data_dir: Path) -> None:
    stores = {s.id: s for s in dl.load_stores(data_dir / "stores.json")}
    orphan = stores["orphan"]
    assert orphan.services == Services(delivery=False, install=False)
    assert orphan.categories == frozenset()
    assert orphan.hours == {}
    assert orphan.featured is False
    assert orphan.coords == (0.0, 0.0)
    assert orphan.phone == ""


def test_city_without_center_defaults(data_dir: Path) -> None:
    cities = {c.slug: c for c in dl.load_cities(data_dir / "cities.json")}
    assert cities["buffalo"].center == (0.0, 0.0)
    assert cities["austin"].center == (30.27, -97.74)
    assert cities["austin"].stores_count == 3


def test_merge_categories_ors_both_fields() -> None:
    row = {
        "categories": {"stoves_ranges": True, "refrigerators": False},
        "appliances": {"stoves_ranges": True, "dishwashers": 1, "washers_dryers": 0},
    }
    assert dl.merge_categories(row) == frozenset({"stoves_ranges", "dishwashers"})


def test_merge_categories_ignores_non_mapping_values() -> None:
    assert dl.merge_categories({"categories": ["refrigerators"], "appliances": None}) == frozenset()


def test_normalize_store_flag_truthiness() -> None:
    store = dl.normalize_store(
        {
            "id": 42,
            "state": "TX",
            "city_slug": "austin",
            "services": {"delivery": 1, "install": ""},
            "featured": "yes",
        }
    )
    assert store.id == "42"
    assert store.services.delivery is True
    assert store.services.install is False
    assert store.featured is True


def test_normalize_hours_drops_malformed_entries() -> None:
    hours = dl.normalize_hours({"mon": ["09:00", "17:00"], "tue": "closed", "wed": ["09:00"]})
    assert hours == {"mon": ["09:00", "17:00"]}
    assert dl.normalize_hours(None) == {}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        dl.load_states(tmp_path / "states.json")


def test_malformed_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "states.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataValidationError):
        dl.load_states(path)


def test_missing_required_column_raises(tmp_path: Path) -> None:
    path = tmp_path / "cities.json"
    path.write_text(json.dumps([{"name": "Austin", "state": "TX"}]), encoding="utf-8")
    with pytest.raises(DataValidationError) as excinfo:
        dl.load_cities(path)
    assert excinfo.value.context["fields"] == ["slug"]


def test_blank_required_field_reports_row(tmp_path: Path) -> None:
    path = tmp_path / "stores.json"
    records = [
        {"id": "1", "state": "TX", "city_slug": "austin"},
        {"id": "2", "state": "TX"},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    with pytest.raises(DataValidationError) as excinfo:
        dl.load_stores(path)
    assert excinfo.value.context["row"] == 1
    assert excinfo.value.context["field"] == "city_slug"


def test_empty_collection_loads(tmp_path: Path) -> None:
    path = tmp_path / "stores.json"
    path.write_text("[]", encoding="utf-8")
    assert dl.load_stores(path) == []


def test_coordinates_load_exactly(tmp_path: Path, write_site_data) -> None:
    data_dir = write_site_data(
        tmp_path / "data",
        states=[{"code": "TX", "name": "Texas"}],
        cities=[
            {"name": "Austin", "state": "TX", "slug": "austin", "center": [0.951088, -5.564492]}
        ],
        stores=[
            {"id": "1", "state": "TX", "city_slug": "austin", "coords": [0.951088, -5.564492]}
        ],
    )
    data = dl.load_site_data(data_dir)
    assert data.cities[0].center == (0.951088, -5.564492)
    assert data.stores[0].coords == (0.951088, -5.564492)


def test_coordinates_render_exactly(tmp_path: Path, write_site_data, make_context) -> None:
    from src.pipeline.site_builder.indexer import build_index
    from src.pipeline.site_builder.pages import build_city_page
    from src.pipeline.site_builder.paths import UrlResolver

    data_dir = write_site_data(
        tmp_path / "data",
        states=[{"code": "TX", "name": "Texas"}],
        cities=[
            {"name": "Austin", "state": "TX", "slug": "austin", "center": [0.951088, -5.564492]}
        ],
        stores=[
            {"id": "1", "state": "TX", "city_slug": "austin", "coords": [0.951088, -5.564492]}
        ],
    )
    index = build_index(dl.load_site_data(data_dir))
    html = build_city_page(make_context(index, UrlResolver()), index.cities[0]).html
    assert '"latitude": 0.951088' in html
    assert '"longitude": -5.564492' in html
    assert "window.cityCenter = [0.951088, -5.564492]" in html


def test_numeric_text_in_sparse_column_keeps_integer_form(tmp_path: Path) -> None:
    path = tmp_path / "stores.json"
    records = [
        {"id": "1", "state": "TX", "city_slug": "austin"},
        {"id": "2", "state": "TX", "city_slug": "austin", "phone": 5125550101},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    assert [store.phone for store in dl.load_stores(path)] == ["", "5125550101"]
