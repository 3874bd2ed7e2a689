"""Site header and footer fragments.

Both fragments are computed once per build from the index and handed to the
``Layout`` that every page builder renders through.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config import FOOTER_TOP_STATES, SITE_NAME_HTML

from .indexer import SiteIndex
from .models import State
from .paths import UrlResolver
from .renderer import esc


@dataclass(frozen=True)
class SiteChrome:
    header: str
    footer: str


def _nav_links(urls: UrlResolver) -> list[tuple[str, str]]:
    return [
        (urls.home(), "Home"),
        (urls.directory(), "Browse States"),
        (urls.advertise(), "Advertise"),
        (urls.about(), "About"),
        (urls.contact(), "Contact"),
    ]


def build_header(urls: UrlResolver) -> str:
    links = "".join(
        f'\n      <a href="{href}">{label}</a>' for href, label in _nav_links(urls)
    )
    return f"""
<header class="site-header">
  <div class="container">
    <a href="{urls.home()}" class="logo">{SITE_NAME_HTML}</a>
    <nav class="site-nav">{links}
      <a href="{urls.add_store()}" class="btn-add">Add Your Store</a>
    </nav>
  </div>
</header>"""


def _state_links(states: list[State], urls: UrlResolver) -> str:
    return "".join(
        f'<li><a href="{urls.state(state)}">{esc(state.name)}</a></li>'
        for state in states
    )


def build_footer(index: SiteIndex, urls: UrlResolver) -> str:
    """Footer with quick links, the most-stocked states and every state A-Z."""
    quick_links = "".join(
        f'\n        <li><a href="{href}">{label}</a></li>'
        for href, label in [*_nav_links(urls), (urls.add_store(), "Add Your Store")]
    )
    popular = _state_links(index.top_states(FOOTER_TOP_STATES), urls)
    everything = _state_links(index.states_alphabetical(), urls)
    return f"""
<footer>
  <div class="container footer-inner">
    <div>
      <h4>Quick Links</h4>
      <ul>{quick_links}
      </ul>
    </div>
    <div>
      <h4>Popular States</h4>
      <ul>{popular}</ul>
    </div>
    <div>
      <h4>Browse by State</h4>
      <ul>{everything}</ul>
    </div>
  </div>
</footer>"""


def build_chrome(index: SiteIndex, urls: UrlResolver) -> SiteChrome:
    return SiteChrome(header=build_header(urls), footer=build_footer(index, urls))


__all__ = ["SiteChrome", "build_chrome", "build_footer", "build_header"]
