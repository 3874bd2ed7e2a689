"""Slug and URL path helpers for the generated site.

Every link and asset reference the builder emits goes through ``prefix`` so
the site works both at a domain root and under a sub-path such as a GitHub
Pages project site. ``UrlResolver`` binds the configured base path (and an
optional absolute origin) once and builds the directory URLs from it.

Examples
--------
>>> prefix("about/", "my-site")
'/my-site/about/'
>>> prefix("about/")
'/about/'
>>> slugify("New  Hampshire")
'new-hampshire'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.config import (
    ABOUT_SEGMENT,
    ADD_STORE_SEGMENT,
    ADVERTISE_SEGMENT,
    CONTACT_SEGMENT,
    DIRECTORY_SEGMENT,
)

from .models import City, State

_WHITESPACE_RE = re.compile(r"\s+")
_APOSTROPHE_RE = re.compile(r"['’]")
_SLASHES_RE = re.compile(r"/+")


def slugify(name: str) -> str:
    """Lowercase ``name``, hyphenate whitespace runs and drop apostrophes.

    Distinct names may produce the same slug; collisions are reported by the
    indexer, not prevented here.

    Examples
    --------
    >>> slugify("Martha's Vineyard")
    'marthas-vineyard'
    >>> slugify(slugify("Martha's Vineyard"))
    'marthas-vineyard'
    """
    slug = _WHITESPACE_RE.sub("-", name.strip().lower())
    return _APOSTROPHE_RE.sub("", slug)


def normalize_base_path(base_path: str) -> str:
    """Return ``base_path`` with one leading slash and no trailing slash.

    An empty or all-slash base path normalizes to ``""``.

    Examples
    --------
    >>> normalize_base_path("/directory-site/")
    '/directory-site'
    >>> normalize_base_path("///")
    ''
    """
    trimmed = _SLASHES_RE.sub("/", base_path.strip()).strip("/")
    return f"/{trimmed}" if trimmed else ""


def prefix(subpath: str = "", base_path: str = "") -> str:
    """Prefix a site-relative path with the configured base path.

    Parameters
    ----------
    subpath : str, optional
        Site-relative path; leading slashes are ignored.
    base_path : str, optional
        Raw base path; normalized with ``normalize_base_path``.

    Returns
    -------
    str
        ``"{base}/"`` for an empty ``subpath``, otherwise
        ``"{base}/{subpath}"``.
    """
    base = normalize_base_path(base_path)
    clean = subpath.lstrip("/")
    if not clean:
        return f"{base}/"
    return f"{base}/{clean}"


@dataclass(frozen=True)
class UrlResolver:
    """Build every site URL from one base path and optional origin.

    Attributes
    ----------
    base_path : str
        Base path the site is served under (``""`` for the domain root).
    origin : str
        Absolute origin such as ``https://example.com``. Used only by
        ``absolute``; page links stay root-relative.
    """

    base_path: str = ""
    origin: str = ""

    def prefix(self, subpath: str = "") -> str:
        return prefix(subpath, self.base_path)

    @property
    def base(self) -> str:
        return normalize_base_path(self.base_path)

    def absolute(self, subpath: str = "") -> str:
        """Return the prefixed path, made absolute when an origin is set."""
        path = self.prefix(subpath)
        if not self.origin:
            return path
        return self.origin.rstrip("/") + path

    def home(self) -> str:
        return self.prefix("")

    def directory(self) -> str:
        return self.prefix(f"{DIRECTORY_SEGMENT}/")

    def state(self, state: State) -> str:
        return self.prefix(state_subpath(state))

    def city(self, state: State, city: City) -> str:
        return self.prefix(city_subpath(state, city))

    def asset(self, relative: str) -> str:
        return self.prefix(f"assets/{relative.lstrip('/')}")

    def advertise(self) -> str:
        return self.prefix(f"{ADVERTISE_SEGMENT}/")

    def add_store(self) -> str:
        return self.prefix(f"{ADD_STORE_SEGMENT}/")

    def about(self) -> str:
        return self.prefix(f"{ABOUT_SEGMENT}/")

    def contact(self) -> str:
        return self.prefix(f"{CONTACT_SEGMENT}/")


def state_subpath(state: State) -> str:
    return f"{DIRECTORY_SEGMENT}/{slugify(state.name)}/"


def city_subpath(state: State, city: City) -> str:
    return f"{DIRECTORY_SEGMENT}/{slugify(state.name)}/{city.slug}/"


__all__ = [
    "UrlResolver",
    "city_subpath",
    "normalize_base_path",
    "prefix",
    "slugify",
    "state_subpath",
]
