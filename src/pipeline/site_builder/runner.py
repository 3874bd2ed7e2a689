"""Build the static directory site from the state, city and store data.

This module provides the headless pipeline driver. ``build_site`` runs the
fixed build sequence and raises on the first failure; ``run_from_config``
wraps it for programmatic and CLI use, logging the failure and returning
``None`` instead of a ``BuildReport``.

Build Sequence
--------------
1. Load and normalize the three JSON documents.
2. Index them and compute the shared header and footer.
3. Recreate the output directory and copy assets and static files.
4. Write every page, then ``search.json``, ``sitemap.xml`` and ``robots.txt``.

A failed step leaves whatever was already written in place.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from src.pipeline.site_builder.runner import run_from_config
    result = run_from_config()
    assert result is not None

Explicit settings::

    from pathlib import Path
    from src.pipeline.site_builder.runner import build_site
    from src.pipeline.site_builder.settings import BuildSettings

    report = build_site(BuildSettings(base_path="directory-site", output_dir=Path("public")))
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import src.config as _project_config
from src.config import (
    ASSETS_DIR,
    GA_ID,
    LAYOUT_TEMPLATE_PATH,
    PAGE_FILENAME,
    ROBOTS_FILENAME,
    SEARCH_INDEX_FILENAME,
    SITEMAP_FILENAME,
    STATIC_DIR,
)
from src.exceptions import ConfigurationError

from .artifacts import build_robots, build_search_index, build_sitemap
from .chrome import build_chrome
from .data_loader import load_site_data
from .hours import malformed_days
from .indexer import SiteIndex, build_index
from .pages import Page, SiteContext, build_all_pages
from .paths import UrlResolver
from .renderer import write_text_output
from .settings import BuildSettings
from .templating import Layout, load_template

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Summary of a finished build."""

    output_dir: Path
    pages: int = 0
    states: int = 0
    cities: int = 0
    stores: int = 0
    artifacts: list[str] = field(default_factory=list)
    slug_collisions: int = 0
    stores_with_bad_hours: int = 0


def prepare_output_dir(output_dir: Path, data_dir: Path) -> Path:
    """Delete and recreate ``output_dir``.

    Raises
    ------
    ConfigurationError
        If ``output_dir`` is the project root, a filesystem root, or contains
        the input data directory.
    """
    target = output_dir.resolve()
    protected = Path(_project_config.PROJECT_ROOT).resolve()
    if target == protected or target == Path(target.anchor) or target in protected.parents:
        raise ConfigurationError(
            f"Refusing to use {target} as the output directory",
            context={"output_dir": str(target)},
        )
    if data_dir.resolve().is_relative_to(target):
        raise ConfigurationError(
            "The output directory must not contain the input data directory",
            context={"output_dir": str(target), "data_dir": str(data_dir.resolve())},
        )
    if target.exists():
        logger.info("Removing previous output: %s", target)
        shutil.rmtree(target)
    target.mkdir(parents=True)
    return target


def copy_static_tree(source: Path, destination: Path) -> int:
    """Copy ``source`` into ``destination`` recursively; a missing source is skipped.

    Returns the number of files copied.
    """
    if not source.is_dir():
        logger.info("No static files at %s; skipping", source)
        return 0
    shutil.copytree(source, destination, dirs_exist_ok=True)
    return sum(1 for path in source.rglob("*") if path.is_file())


def page_output_path(output_dir: Path, page: Page) -> Path:
    return output_dir / page.subpath / PAGE_FILENAME


def write_pages(pages: list[Page], output_dir: Path) -> int:
    for page in pages:
        write_text_output(page.html, page_output_path(output_dir, page))
    return len(pages)


def report_bad_hours(index: SiteIndex) -> int:
    """Log stores whose hours the client-side status script cannot evaluate."""
    count = 0
    for store in index.stores:
        bad = malformed_days(store.hours)
        if bad:
            count += 1
            logger.warning(
                "Store %s has unreadable hours for %s", store.id, ", ".join(bad)
            )
    return count


def build_site(
    settings: BuildSettings,
    *,
    layout_path: Path = LAYOUT_TEMPLATE_PATH,
    assets_dir: Path = ASSETS_DIR,
    static_dir: Path = STATIC_DIR,
    build_date: date | None = None,
) -> BuildReport:
    """Run the full build sequence and return a summary.

    Parameters
    ----------
    settings : BuildSettings
        Resolved base path, origin and directories.
    layout_path : Path, optional
        HTML layout template.
    assets_dir : Path, optional
        Directory copied to ``<output>/assets``.
    static_dir : Path, optional
        Directory whose contents are copied to the output root.
    build_date : date or None, optional
        Sitemap ``lastmod`` date; defaults to today.

    Returns
    -------
    BuildReport
        Counts of pages, records and artifacts written.

    Raises
    ------
    FileNotFoundError
        If an input document is missing.
    src.exceptions.DataValidationError
        If the input records are malformed or inconsistent.
    src.exceptions.ConfigurationError
        If the layout is missing or the output directory is unsafe.
    OSError
        On any filesystem failure while writing.
    """
    build_date = build_date or date.today()
    data = load_site_data(settings.data_dir)
    index = build_index(data)
    urls = UrlResolver(base_path=settings.base_path, origin=settings.site_origin)
    chrome = build_chrome(index, urls)
    layout = Layout(
        template=load_template(layout_path),
        header=chrome.header,
        footer=chrome.footer,
        ga_id=GA_ID,
        base=urls.base,
    )
    ctx = SiteContext(index=index, urls=urls, layout=layout)

    output_dir = prepare_output_dir(settings.output_dir, settings.data_dir)
    copied = copy_static_tree(assets_dir, output_dir / "assets")
    copied += copy_static_tree(static_dir, output_dir)
    logger.info("Copied %d static files", copied)

    report = BuildReport(
        output_dir=output_dir,
        states=index.total_states,
        cities=index.total_cities,
        stores=index.total_stores,
        slug_collisions=len(index.collisions),
    )
    report.stores_with_bad_hours = report_bad_hours(index)

    report.pages = write_pages(build_all_pages(ctx), output_dir)
    logger.info("Wrote %d pages", report.pages)

    artifacts = {
        SEARCH_INDEX_FILENAME: build_search_index(index, urls),
        SITEMAP_FILENAME: build_sitemap(index, urls, build_date),
        ROBOTS_FILENAME: build_robots(urls),
    }
    for filename, content in artifacts.items():
        write_text_output(content, output_dir / filename)
        report.artifacts.append(filename)
        logger.info("Wrote %s", filename)

    logger.info("Pages built successfully.")
    return report


def run_from_config(
    data_dir: Path | None = None,
    output_dir: Path | None = None,
    base_path: str | None = None,
    site_origin: str | None = None,
) -> BuildReport | None:
    """Build the site using explicit values or the environment and config defaults.

    Returns
    -------
    BuildReport or None
        The build summary on success; ``None`` if any step failed (the
        exception is logged).
    """
    settings = BuildSettings(
        base_path=base_path,
        site_origin=site_origin,
        data_dir=data_dir,
        output_dir=output_dir,
    )
    logger.info("Building site with %r", settings)
    try:
        return build_site(settings)
    except Exception:
        logger.exception("Failed to build site")
        return None


__all__ = [
    "BuildReport",
    "build_site",
    "copy_static_tree",
    "page_output_path",
    "prepare_output_dir",
    "run_from_config",
    "write_pages",
]
