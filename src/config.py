"""Global configuration constants for the project.

Defines paths, filenames and fixed site content used across the site
builder pipeline and its command line entrypoint.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
LOG_DIR: Path = PROJECT_ROOT / "logs"
ENV_FILE: Path = PROJECT_ROOT / ".env"

# Input data
DATA_DIR: Path = PROJECT_ROOT / "data"
STATES_FILENAME: str = "states.json"
CITIES_FILENAME: str = "cities.json"
STORES_FILENAME: str = "stores.json"

# Site sources and output
SITE_SOURCE_DIR: Path = PROJECT_ROOT / "site"
LAYOUT_TEMPLATE_PATH: Path = SITE_SOURCE_DIR / "templates" / "_layout.html"
ASSETS_DIR: Path = SITE_SOURCE_DIR / "assets"
STATIC_DIR: Path = SITE_SOURCE_DIR / "static"
OUTPUT_DIR: Path = PROJECT_ROOT / "dist"
PAGE_FILENAME: str = "index.html"
SEARCH_INDEX_FILENAME: str = "search.json"
SITEMAP_FILENAME: str = "sitemap.xml"
ROBOTS_FILENAME: str = "robots.txt"

# Environment variable names
BASE_PATH_ENV: str = "BASE_PATH"
SITE_ORIGIN_ENV: str = "SITE_ORIGIN"
DATA_DIR_ENV: str = "SITE_DATA_DIR"
OUTPUT_DIR_ENV: str = "SITE_OUTPUT_DIR"

# Site identity
SITE_NAME: str = "Scratch & Dent Locator"
SITE_NAME_HTML: str = "Scratch &amp; Dent Locator"
SITE_URL: str = "https://example.com/"
SITE_DESCRIPTION: str = (
    "Directory of scratch and dent appliance stores across the United States."
)
GA_ID: str = "G-XXXXXXX"
CONTACT_EMAIL: str = "info@example.com"
FORM_ENDPOINT: str = "https://formspree.io/f/maypkyzk"
DIRECTORY_SEGMENT: str = "scratch-and-dent-appliances"
ADVERTISE_SEGMENT: str = "advertise-with-us"
ADD_STORE_SEGMENT: str = "stores/new"
ABOUT_SEGMENT: str = "about"
CONTACT_SEGMENT: str = "contact"
ADDRESS_COUNTRY: str = "US"

# Appliance categories, in display order
CATEGORY_LABELS: dict[str, str] = {
    "refrigerators": "Refrigerators",
    "washers_dryers": "Washers & Dryers",
    "stoves_ranges": "Stoves & Ranges",
    "dishwashers": "Dishwashers",
}
CATEGORY_FIELDS: tuple[str, ...] = ("categories", "appliances")

# Listing sizes
FOOTER_TOP_STATES: int = 5
HOME_TOP_STATES: int = 8

# Opening hours
DAY_CODES: tuple[str, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
TIME_SLOT_MINUTES: int = 30

# Leaflet map library
LEAFLET_JS_URL: str = "https://unpkg.com/leaflet@1.9.3/dist/leaflet.js"
LEAFLET_JS_SRI: str = "sha256-DtkscE02c5HqYbeNT9+7yAL+PUE0uAt2E11tdgkYfCY="
LEAFLET_CSS_URL: str = "https://unpkg.com/leaflet@1.9.3/dist/leaflet.css"
LEAFLET_CSS_SRI: str = "sha256-sA+4dM+b3kDCejM27C1lRs7Uib6kVrknv0N1tEYtA38="

# Logging
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
