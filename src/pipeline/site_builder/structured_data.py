"""schema.org payloads embedded as JSON-LD in the generated pages."""

from __future__ import annotations

from typing import Any

from src.config import ADDRESS_COUNTRY, SITE_DESCRIPTION, SITE_NAME, SITE_URL

from .models import City, State, Store
from .paths import UrlResolver

SCHEMA_CONTEXT = "https://schema.org"


def website(url: str = SITE_URL) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": SITE_NAME,
        "url": url,
        "description": SITE_DESCRIPTION,
    }


def state_list(states: list[State], urls: UrlResolver) -> dict[str, Any]:
    """ItemList of every state, positions numbered from 1 in list order."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": state.name,
                "url": urls.state(state),
            }
            for position, state in enumerate(states, start=1)
        ],
    }


def city_list(state: State, cities: list[City], urls: UrlResolver) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "name": f"{state.name} cities",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": f"{city.name}, {state.code}",
                "url": urls.city(state, city),
            }
            for position, city in enumerate(cities, start=1)
        ],
    }


def local_business(store: Store, city: City) -> dict[str, Any]:
    """LocalBusiness entry with nested PostalAddress and GeoCoordinates."""
    return {
        "@type": "LocalBusiness",
        "name": store.name,
        "telephone": store.phone,
        "address": {
            "@type": "PostalAddress",
            "streetAddress": store.address,
            "addressLocality": city.name,
            "addressRegion": city.state,
            "addressCountry": ADDRESS_COUNTRY,
        },
        "geo": {
            "@type": "GeoCoordinates",
            "latitude": store.coords[0],
            "longitude": store.coords[1],
        },
        "url": store.website,
    }


def store_list(state: State, city: City, stores: list[Store]) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "name": f"{city.name}, {state.code} scratch & dent stores",
        "itemListElement": [local_business(store, city) for store in stores],
    }


__all__ = ["city_list", "local_business", "state_list", "store_list", "website"]
