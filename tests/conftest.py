"""Pytest configuration and shared fixtures.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a small state/city/store dataset written to a temporary data
  directory, plus the index and page context built from it.
"""

import json
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from src.pipeline.site_builder.chrome import build_chrome  # noqa: E402
from src.pipeline.site_builder.data_loader import load_site_data  # noqa: E402
from src.pipeline.site_builder.indexer import build_index  # noqa: E402
from src.pipeline.site_builder.pages import SiteContext  # noqa: E402
from src.pipeline.site_builder.paths import UrlResolver  # noqa: E402
from src.pipeline.site_builder.templating import Layout  # noqa: E402

TEST_LAYOUT = (
    "<title>{{title}}</title><link rel=\"canonical\" href=\"{{canonical}}\">"
    "{{jsonLd}}{{header}}<main>{{content}}</main>{{footer}}{{extraScripts}}"
    "<!-- {{gaId}} {{base}} -->"
)


STATES = [
    {"code": "TX", "name": "Texas", "stores_count": 3, "cities_count": 2},
    {"code": "GA", "name": "Georgia", "stores_count": 5, "cities_count": 1},
    {"code": "AL", "name": "Alabama", "stores_count": 3, "cities_count": 0},
    {"code": "NY", "name": "New York", "stores_count": 1, "cities_count": 1},
]

CITIES = [
    {"name": "Houston", "state": "TX", "slug": "houston", "stores_count": 1, "center": [29.76, -95.37]},
    {"name": "Austin", "state": "TX", "slug": "austin", "stores_count": 3, "center": [30.27, -97.74]},
    {"name": "Atlanta", "state": "GA", "slug": "atlanta", "stores_count": 0, "center": [33.75, -84.39]},
    {"name": "Buffalo", "state": "NY", "slug": "buffalo", "stores_count": 1},
]

STORES = [
    {
        "id": "a1",
        "name": "Alpha Appliances",
        "state": "TX",
        "city_slug": "austin",
        "address": "1 First St",
        "phone": "512-555-0001",
        "website": "https://alpha.example",
        "coords": [30.1, -97.1],
        "categories": {"refrigerators": True, "dishwashers": False},
        "services": {"delivery": True, "install": False},
        "hours": {"mon": ["09:00", "17:00"]},
        "featured": False,
    },
    {
        "id": "a2",
        "name": "Beta Outlet",
        "state": "TX",
        "city_slug": "austin",
        "address": "2 Second St",
        "phone": "512-555-0002",
        "website": "https://beta.example",
        "coords": [30.2, -97.2],
        "appliances": {"washers_dryers": True, "refrigerators": True},
        "services": {"delivery": True, "install": True},
        "hours": {"fri": ["22:00", "02:00"]},
        "featured": True,
    },
    {
        "id": "a3",
        "name": "Gamma Goods",
        "state": "TX",
        "city_slug": "austin",
        "address": "3 Third St",
        "categories": {"stoves_ranges": True},
        "appliances": {"stoves_ranges": True, "dishwashers": True},
    },
    {
        "id": "h1",
        "name": "Houston Hub",
        "state": "TX",
        "city_slug": "houston",
        "address": "10 Main St",
        "coords": [29.7, -95.3],
        "featured": True,
    },
    {
        "id": "orphan",
        "name": "Nowhere Store",
        "state": "TX",
        "city_slug": "el-paso",
    },
]


def _write_site_data(data_dir: Path, states=None, cities=None, stores=None) -> Path:
    """Write the three JSON documents into ``data_dir`` and return it."""
    data_dir.mkdir(parents=True, exist_ok=True)
    for name, records in (
        ("states.json", STATES if states is None else states),
        ("cities.json", CITIES if cities is None else cities),
        ("stores.json", STORES if stores is None else stores),
    ):
        (data_dir / name).write_text(json.dumps(records), encoding="utf-8")
    return data_dir


@pytest.fixture
def write_site_data():
    """Return the helper that writes a custom dataset to a directory."""
    return _write_site_data


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return _write_site_data(tmp_path / "data")


@pytest.fixture
def site_index(data_dir: Path):
    return build_index(load_site_data(data_dir))


@pytest.fixture
def urls() -> UrlResolver:
    return UrlResolver()


@pytest.fixture
def make_context():
    """Return a factory building a ``SiteContext`` over a compact test layout."""

    def _make(index, urls: UrlResolver) -> SiteContext:
        chrome = build_chrome(index, urls)
        layout = Layout(
            template=TEST_LAYOUT,
            header=chrome.header,
            footer=chrome.footer,
            ga_id="G-TEST",
            base=urls.base,
        )
        return SiteContext(index=index, urls=urls, layout=layout)

    return _make


@pytest.fixture
def site_context(site_index, urls, make_context) -> SiteContext:
    return make_context(site_index, urls)
