"""Site Builder Pipeline Module.

Summary
-------
Provides the import surface for the static directory site build: loading the
state, city and store records, indexing them, rendering every page through
the shared layout, and emitting the search index, sitemap and robots file.

Extended Description
--------------------
This file only defines the package boundary and re-exports the symbols that
orchestration code and tests use. All logic lives in the submodules:

- ``data_loader``: JSON ingestion and record normalization.
- ``indexer``: lookup maps, category totals, rankings, slug collisions.
- ``paths``: slugs, base-path prefixing and the ``UrlResolver``.
- ``templating``: layout loading and ``{{placeholder}}`` substitution.
- ``chrome``, ``pages``, ``structured_data``: page fragments and builders.
- ``artifacts``: ``search.json``, ``sitemap.xml`` and ``robots.txt``.
- ``runner``: the build sequence.

Usage
-----
>>> from src.pipeline.site_builder import run_from_config
>>> report = run_from_config()
>>> report is None or report.pages > 0
True
"""

from .data_loader import SiteData, load_site_data
from .indexer import SiteIndex, build_index
from .paths import UrlResolver, normalize_base_path, prefix, slugify
from .runner import BuildReport, build_site, run_from_config
from .settings import BuildSettings

__all__ = [
    "BuildReport",
    "BuildSettings",
    "SiteData",
    "SiteIndex",
    "UrlResolver",
    "build_index",
    "build_site",
    "load_site_data",
    "normalize_base_path",
    "prefix",
    "run_from_config",
    "slugify",
]
