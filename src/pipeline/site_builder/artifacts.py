"""Non-HTML artifacts derived from the site index.

- ``search.json``: one entry per state and per city for client-side search.
- ``sitemap.xml``: every generated page stamped with the build date.
- ``robots.txt``: allow-all policy pointing at the sitemap.

All URLs honour the configured base path; sitemap and robots URLs are made
absolute when a site origin is configured.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from src.config import (
    ABOUT_SEGMENT,
    ADD_STORE_SEGMENT,
    ADVERTISE_SEGMENT,
    CONTACT_SEGMENT,
    DIRECTORY_SEGMENT,
    SITEMAP_FILENAME,
)

from .indexer import SiteIndex
from .paths import UrlResolver, city_subpath, state_subpath
from .renderer import esc

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def search_entries(index: SiteIndex, urls: UrlResolver) -> list[dict[str, Any]]:
    """Return ``{id, title, type, url}`` entries for every state then every city."""
    entries: list[dict[str, Any]] = [
        {
            "id": f"state-{state.code}",
            "title": state.name,
            "type": "state",
            "url": urls.state(state),
        }
        for state in index.states
    ]
    for city in index.cities:
        state = index.state_for(city)
        entries.append(
            {
                "id": f"city-{city.state}-{city.slug}",
                "title": f"{city.name}, {city.state}",
                "type": "city",
                "url": urls.city(state, city),
            }
        )
    return entries


def build_search_index(index: SiteIndex, urls: UrlResolver) -> str:
    return json.dumps(search_entries(index, urls), indent=2, ensure_ascii=False)


def sitemap_subpaths(index: SiteIndex) -> list[str]:
    """Site-relative paths of every generated page, in sitemap order."""
    subpaths = ["", f"{DIRECTORY_SEGMENT}/"]
    subpaths.extend(state_subpath(state) for state in index.states)
    subpaths.extend(city_subpath(index.state_for(city), city) for city in index.cities)
    subpaths.extend(
        f"{segment}/"
        for segment in (ADVERTISE_SEGMENT, ADD_STORE_SEGMENT, ABOUT_SEGMENT, CONTACT_SEGMENT)
    )
    return subpaths


def build_sitemap(index: SiteIndex, urls: UrlResolver, build_date: date) -> str:
    """Render a minimal sitemap with every page stamped ``build_date``.

    Examples
    --------
    >>> from datetime import date
    >>> from src.pipeline.site_builder.indexer import SiteIndex
    >>> empty = SiteIndex([], [], [], {}, {}, {}, {})
    >>> "<lastmod>2024-05-01</lastmod>" in build_sitemap(empty, UrlResolver(), date(2024, 5, 1))
    True
    """
    lastmod = build_date.isoformat()
    entries = "\n".join(
        f"  <url><loc>{esc(urls.absolute(subpath))}</loc><lastmod>{lastmod}</lastmod></url>"
        for subpath in sitemap_subpaths(index)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{entries}\n"
        "</urlset>\n"
    )


def build_robots(urls: UrlResolver) -> str:
    return (
        "User-agent: *\n"
        f"Allow: {urls.prefix('')}\n"
        f"Sitemap: {urls.absolute(SITEMAP_FILENAME)}\n"
    )


__all__ = [
    "build_robots",
    "build_search_index",
    "build_sitemap",
    "search_entries",
    "sitemap_subpaths",
]
