"""Typed, normalized records for states, cities and stores.

Every record entering the site builder passes through the loader once and
comes out as one of these frozen dataclasses, with optional fields already
defaulted. Page builders therefore never check for missing keys or for the
two alternate category field names.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.config import CATEGORY_LABELS


@dataclass(frozen=True)
class State:
    """A US state with its pre-computed directory counts.

    The counts are taken from the input as-is and are not cross-checked
    against the indexed cities and stores.
    """

    code: str
    name: str
    stores_count: int = 0
    cities_count: int = 0


@dataclass(frozen=True)
class City:
    """A city listed under a state; identified by ``(state, slug)``."""

    name: str
    state: str
    slug: str
    stores_count: int = 0
    center: tuple[float, float] = (0.0, 0.0)

    @property
    def key(self) -> tuple[str, str]:
        return (self.state, self.slug)


@dataclass(frozen=True)
class Services:
    delivery: bool = False
    install: bool = False


@dataclass(frozen=True)
class Store:
    """A scratch and dent appliance store.

    Attributes
    ----------
    categories : frozenset[str]
        Names of the categories the store carries. Populated from either the
        ``categories`` or the ``appliances`` input field (logical OR).
    hours : dict[str, list[str]]
        Day code (``mon`` .. ``sun``) to ``[open, close]`` time strings.
    """

    id: str
    name: str
    state: str
    city_slug: str
    address: str = ""
    phone: str = ""
    website: str = ""
    coords: tuple[float, float] = (0.0, 0.0)
    categories: frozenset[str] = frozenset()
    services: Services = Services()
    hours: dict[str, list[str]] = field(default_factory=dict)
    featured: bool = False

    @property
    def city_key(self) -> tuple[str, str]:
        return (self.state, self.city_slug)

    def carries(self, category: str) -> bool:
        return category in self.categories

    @property
    def category_labels(self) -> list[str]:
        """Display labels of the known categories carried, in display order."""
        return [
            label
            for category, label in CATEGORY_LABELS.items()
            if category in self.categories
        ]

    @property
    def service_labels(self) -> list[str]:
        labels = []
        if self.services.delivery:
            labels.append("Delivery")
        if self.services.install:
            labels.append("Install")
        return labels


__all__ = ["City", "Services", "State", "Store"]
