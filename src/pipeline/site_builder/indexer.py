"""Lookup structures and aggregate counters shared by the page builders.

``build_index`` makes one pass over each record collection and returns an
immutable ``SiteIndex``. Page builders read from the index only; nothing
downstream groups, counts or re-sorts the raw collections itself.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

import pandas as pd

from src.config import CATEGORY_LABELS
from src.exceptions import DataValidationError

from .data_loader import SiteData
from .models import City, State, Store
from .paths import slugify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityKpis:
    stores: int
    delivery: int
    install: int


@dataclass(frozen=True)
class SlugCollision:
    """Distinct names that normalize to the same URL segment."""

    scope: str
    slug: str
    names: tuple[str, ...]


@dataclass(frozen=True)
class SiteIndex:
    """Indexed, read-only view of the loaded site data.

    Attributes
    ----------
    states, cities, stores : list
        The normalized collections in input order.
    state_by_code : dict[str, State]
        State code to state record.
    cities_by_state : dict[str, list[City]]
        State code to the cities sharing it, in input order.
    stores_by_city : dict[tuple[str, str], list[Store]]
        ``(state code, city slug)`` to stores, in input order.
    category_totals : dict[str, int]
        Number of stores carrying each known category.
    collisions : list[SlugCollision]
        Slug collisions detected while indexing.
    """

    states: list[State]
    cities: list[City]
    stores: list[Store]
    state_by_code: dict[str, State]
    cities_by_state: dict[str, list[City]]
    stores_by_city: dict[tuple[str, str], list[Store]]
    category_totals: dict[str, int]
    collisions: list[SlugCollision] = field(default_factory=list)

    @property
    def total_states(self) -> int:
        return len(self.states)

    @property
    def total_cities(self) -> int:
        return len(self.cities)

    @property
    def total_stores(self) -> int:
        return len(self.stores)

    def top_states(self, count: int) -> list[State]:
        """Return the ``count`` states with the most stores.

        States with equal store counts keep their input order.
        """
        ranked = sorted(self.states, key=lambda state: state.stores_count, reverse=True)
        return ranked[:count]

    def states_alphabetical(self) -> list[State]:
        return sorted(self.states, key=lambda state: state.name.casefold())

    def states_by_letter(self) -> dict[str, list[State]]:
        """Group states alphabetically under the upper-cased first letter."""
        groups: dict[str, list[State]] = {}
        for state in self.states_alphabetical():
            if not state.name:
                continue
            groups.setdefault(state.name[0].upper(), []).append(state)
        return {letter: groups[letter] for letter in sorted(groups)}

    def state_for(self, city: City) -> State:
        return self.state_by_code[city.state]

    def cities_for(self, state: State) -> list[City]:
        """Return the state's cities sorted by name."""
        return sorted(
            self.cities_by_state.get(state.code, []),
            key=lambda city: city.name.casefold(),
        )

    def stores_for(self, city: City) -> list[Store]:
        """Return the city's stores with featured stores first.

        Relative order within the featured and non-featured groups is the
        input order.
        """
        listed = self.stores_by_city.get(city.key, [])
        return [store for store in listed if store.featured] + [
            store for store in listed if not store.featured
        ]


def city_kpis(stores: Iterable[Store]) -> CityKpis:
    listed = list(stores)
    return CityKpis(
        stores=len(listed),
        delivery=sum(1 for store in listed if store.services.delivery),
        install=sum(1 for store in listed if store.services.install),
    )


def count_categories(stores: list[Store]) -> dict[str, int]:
    """Tally how many stores carry each known category.

    Examples
    --------
    >>> from src.pipeline.site_builder.models import Store
    >>> stores = [Store(id="1", name="A", state="TX", city_slug="austin",
    ...                 categories=frozenset({"dishwashers"}))]
    >>> count_categories(stores)["dishwashers"]
    1
    """
    flags = pd.DataFrame(
        [[store.carries(name) for name in CATEGORY_LABELS] for store in stores],
        columns=list(CATEGORY_LABELS),
        dtype=bool,
    )
    totals = flags.sum()
    return {name: int(totals[name]) for name in CATEGORY_LABELS}


def find_slug_collisions(states: list[State], cities: list[City]) -> list[SlugCollision]:
    """Report state names sharing a slug and cities sharing ``(state, slug)``."""
    collisions: list[SlugCollision] = []
    state_names: dict[str, list[str]] = defaultdict(list)
    for state in states:
        state_names[slugify(state.name)].append(state.name)
    for slug, names in state_names.items():
        if len(names) > 1:
            collisions.append(SlugCollision("states", slug, tuple(names)))
    city_names: dict[tuple[str, str], list[str]] = defaultdict(list)
    for city in cities:
        city_names[city.key].append(city.name)
    for (state_code, slug), names in city_names.items():
        if len(names) > 1:
            collisions.append(SlugCollision(f"cities:{state_code}", slug, tuple(names)))
    return collisions


def build_index(data: SiteData) -> SiteIndex:
    """Index the loaded collections.

    Parameters
    ----------
    data : SiteData
        Normalized states, cities and stores.

    Returns
    -------
    SiteIndex
        Lookup maps and aggregate counters for the page builders.

    Raises
    ------
    DataValidationError
        If a city references a state code that is not loaded.

    Notes
    -----
    Stores whose ``(state, city_slug)`` matches no city are kept in the store
    totals but appear on no city page; each is logged at WARNING. Slug
    collisions are logged at WARNING and recorded on the index; the later
    page overwrites the earlier one in the output tree.
    """
    state_by_code = {state.code: state for state in data.states}

    cities_by_state: dict[str, list[City]] = {}
    for city in data.cities:
        if city.state not in state_by_code:
            raise DataValidationError(
                f"City '{city.name}' references unknown state '{city.state}'",
                context={"city": city.name, "state": city.state},
            )
        cities_by_state.setdefault(city.state, []).append(city)

    known_cities = {city.key for city in data.cities}
    stores_by_city: dict[tuple[str, str], list[Store]] = {}
    for store in data.stores:
        if store.city_key not in known_cities:
            logger.warning(
                "Store %s references unknown city %s/%s; it will not be listed",
                store.id,
                store.state,
                store.city_slug,
            )
        stores_by_city.setdefault(store.city_key, []).append(store)

    collisions = find_slug_collisions(data.states, data.cities)
    for collision in collisions:
        logger.warning(
            "Slug collision in %s: %s all map to '%s'",
            collision.scope,
            ", ".join(collision.names),
            collision.slug,
        )

    return SiteIndex(
        states=list(data.states),
        cities=list(data.cities),
        stores=list(data.stores),
        state_by_code=state_by_code,
        cities_by_state=cities_by_state,
        stores_by_city=stores_by_city,
        category_totals=count_categories(data.stores),
        collisions=collisions,
    )


__all__ = [
    "CityKpis",
    "SiteIndex",
    "SlugCollision",
    "build_index",
    "city_kpis",
    "count_categories",
    "find_slug_collisions",
]
