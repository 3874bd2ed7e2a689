"""data_loader.py: Load and normalize the state, city and store JSON documents.

This module is the data-ingestion component of the site builder pipeline.
It reads the three record collections with pandas, validates that every
record carries its identifying fields, and converts each row into the typed
records from ``models.py`` with every optional field defaulted exactly once.

Design Principles
-----------------
- Isolated responsibility: contains *no* rendering or indexing logic.
- Missing optional fields (services, categories, hours, featured flag,
  coordinates) never raise; they collapse to "none/false/empty".
- Missing identifying fields raise ``DataValidationError`` with the file,
  row number and field name in the error context.

Usage
-----
>>> from pathlib import Path
>>> data = load_site_data(Path("data"))
>>> assert isinstance(data.states, list)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from src.config import (
    CATEGORY_FIELDS,
    CITIES_FILENAME,
    STATES_FILENAME,
    STORES_FILENAME,
)
from src.exceptions import DataValidationError

from .models import City, Services, State, Store

logger = logging.getLogger(__name__)

STATE_REQUIRED_FIELDS: tuple[str, ...] = ("code", "name")
CITY_REQUIRED_FIELDS: tuple[str, ...] = ("name", "state", "slug")
STORE_REQUIRED_FIELDS: tuple[str, ...] = ("id", "state", "city_slug")


@dataclass(frozen=True)
class SiteData:
    """The three normalized record collections, in input order."""

    states: list[State]
    cities: list[City]
    stores: list[Store]


def read_records_json(json_path: Path, required_fields: tuple[str, ...]) -> pd.DataFrame:
    """Read a JSON array of records into a DataFrame and check its columns.

    Parameters
    ----------
    json_path : Path
        Path to a UTF-8 JSON document whose top level is an array of objects.
    required_fields : tuple[str, ...]
        Column names every non-empty document must provide.

    Returns
    -------
    pd.DataFrame
        One row per record. Nested objects and arrays are kept as Python
        values; records lacking a key hold ``NaN`` in that column. An empty
        array yields an empty DataFrame.

    Raises
    ------
    FileNotFoundError
        If ``json_path`` does not exist.
    DataValidationError
        If the document is not well-formed JSON records or a required column
        is absent.

    Examples
    --------
    >>> from pathlib import Path
    >>> df = read_records_json(Path("data/states.json"), ("code", "name"))
    >>> "code" in df.columns
    True
    """
    if not json_path.exists():
        raise FileNotFoundError(json_path)
    try:
        dataframe = pd.read_json(
            json_path,
            orient="records",
            dtype=False,
            convert_dates=False,
            precise_float=True,
        )
    except ValueError as exc:
        raise DataValidationError(
            f"Malformed JSON records in {json_path.name}",
            context={"file": str(json_path), "reason": str(exc)},
        ) from exc
    if dataframe.empty:
        return dataframe
    missing = [name for name in required_fields if name not in dataframe.columns]
    if missing:
        raise DataValidationError(
            f"Missing required fields in {json_path.name}: {', '.join(missing)}",
            context={"file": str(json_path), "fields": missing},
        )
    return dataframe


def iter_rows(
    dataframe: pd.DataFrame, required_fields: tuple[str, ...], source: str
) -> Iterator[dict[str, Any]]:
    """Yield each row as a dict with missing cells removed.

    Raises ``DataValidationError`` for a row whose required field is blank.
    """
    for row_number, raw_row in enumerate(dataframe.to_dict(orient="records")):
        row = {key: value for key, value in raw_row.items() if not _is_missing(value)}
        for name in required_fields:
            if str(row.get(name, "")).strip() == "":
                raise DataValidationError(
                    f"Record {row_number} in {source} has no '{name}'",
                    context={"file": source, "row": row_number, "field": name},
                )
        yield row


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and bool(pd.isna(value))


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_text(value: Any) -> str:
    """Stringify a cell; whole numbers widened to float by a sparse column lose the ``.0``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _as_pair(value: Any) -> tuple[float, float]:
    """Coerce a ``[latitude, longitude]`` value, defaulting to ``(0.0, 0.0)``."""
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return (float(value[0]), float(value[1]))
        except (TypeError, ValueError):
            pass
    return (0.0, 0.0)


def merge_categories(row: Mapping[str, Any]) -> frozenset[str]:
    """Return the categories marked true under either category field.

    Both ``categories`` and ``appliances`` are consulted and their true flags
    are combined, so a store is counted once per category even when the two
    fields overlap.

    Examples
    --------
    >>> sorted(merge_categories({
    ...     "categories": {"refrigerators": True, "dishwashers": False},
    ...     "appliances": {"dishwashers": True},
    ... }))
    ['dishwashers', 'refrigerators']
    >>> merge_categories({})
    frozenset()
    """
    carried: set[str] = set()
    for field_name in CATEGORY_FIELDS:
        mapping = row.get(field_name)
        if not isinstance(mapping, Mapping):
            continue
        carried.update(str(name) for name, flag in mapping.items() if flag)
    return frozenset(carried)


def normalize_services(value: Any) -> Services:
    if not isinstance(value, Mapping):
        return Services()
    return Services(
        delivery=bool(value.get("delivery")),
        install=bool(value.get("install")),
    )


def normalize_hours(value: Any) -> dict[str, list[str]]:
    """Keep only well-formed ``day -> [open, close]`` entries."""
    if not isinstance(value, Mapping):
        return {}
    hours: dict[str, list[str]] = {}
    for day, window in value.items():
        if isinstance(window, (list, tuple)) and len(window) == 2:
            hours[str(day)] = [str(window[0]), str(window[1])]
        else:
            logger.debug("Dropping malformed hours entry %r: %r", day, window)
    return hours


def normalize_state(row: Mapping[str, Any]) -> State:
    return State(
        code=_as_text(row["code"]),
        name=_as_text(row["name"]),
        stores_count=_as_int(row.get("stores_count")),
        cities_count=_as_int(row.get("cities_count")),
    )


def normalize_city(row: Mapping[str, Any]) -> City:
    return City(
        name=_as_text(row["name"]),
        state=_as_text(row["state"]),
        slug=_as_text(row["slug"]),
        stores_count=_as_int(row.get("stores_count")),
        center=_as_pair(row.get("center")),
    )


def normalize_store(row: Mapping[str, Any]) -> Store:
    """Build a ``Store`` from a raw record, filling every optional default.

    Parameters
    ----------
    row : Mapping[str, Any]
        Raw store record. Must carry ``id``, ``state`` and ``city_slug``.

    Returns
    -------
    Store
        The normalized store. Flags follow truthiness of the input values.

    Examples
    --------
    >>> store = normalize_store({"id": 7, "state": "TX", "city_slug": "austin"})
    >>> store.id, store.services.delivery, store.categories
    ('7', False, frozenset())
    """
    return Store(
        id=_as_text(row["id"]),
        name=_as_text(row.get("name")),
        state=_as_text(row["state"]),
        city_slug=_as_text(row["city_slug"]),
        address=_as_text(row.get("address")),
        phone=_as_text(row.get("phone")),
        website=_as_text(row.get("website")),
        coords=_as_pair(row.get("coords")),
        categories=merge_categories(row),
        services=normalize_services(row.get("services")),
        hours=normalize_hours(row.get("hours")),
        featured=bool(row.get("featured", False)),
    )


def load_states(json_path: Path) -> list[State]:
    dataframe = read_records_json(json_path, STATE_REQUIRED_FIELDS)
    return [
        normalize_state(row)
        for row in iter_rows(dataframe, STATE_REQUIRED_FIELDS, json_path.name)
    ]


def load_cities(json_path: Path) -> list[City]:
    dataframe = read_records_json(json_path, CITY_REQUIRED_FIELDS)
    return [
        normalize_city(row)
        for row in iter_rows(dataframe, CITY_REQUIRED_FIELDS, json_path.name)
    ]


def load_stores(json_path: Path) -> list[Store]:
    dataframe = read_records_json(json_path, STORE_REQUIRED_FIELDS)
    return [
        normalize_store(row)
        for row in iter_rows(dataframe, STORE_REQUIRED_FIELDS, json_path.name)
    ]


def load_site_data(data_dir: Path) -> SiteData:
    """Load all three record collections from ``data_dir``.

    Parameters
    ----------
    data_dir : Path
        Directory holding ``states.json``, ``cities.json`` and ``stores.json``.

    Returns
    -------
    SiteData
        Normalized states, cities and stores in input order.

    Raises
    ------
    FileNotFoundError
        If any of the three documents is missing.
    DataValidationError
        If a document is malformed or a record lacks an identifying field.
    """
    states = load_states(data_dir / STATES_FILENAME)
    cities = load_cities(data_dir / CITIES_FILENAME)
    stores = load_stores(data_dir / STORES_FILENAME)
    logger.info(
        "Loaded %d states, %d cities and %d stores from %s",
        len(states),
        len(cities),
        len(stores),
        data_dir,
    )
    return SiteData(states=states, cities=cities, stores=stores)


__all__ = [
    "SiteData",
    "load_cities",
    "load_site_data",
    "load_states",
    "load_stores",
    "merge_categories",
    "normalize_city",
    "normalize_hours",
    "normalize_services",
    "normalize_state",
    "normalize_store",
    "read_records_json",
]
