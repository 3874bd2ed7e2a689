"""Page builders for every HTML document of the directory site.

Each builder is a pure function of the ``SiteContext`` (index, URL resolver
and layout) and returns ``Page`` values; nothing here touches the
filesystem. Record values are escaped before they are placed into markup,
and every link goes through the context's ``UrlResolver``.

Pages
-----
- ``build_home``: totals, top states, category totals, WebSite JSON-LD.
- ``build_states_index``: A-Z jump navigation and grouped state lists.
- ``build_state_pages``: one page per state listing its cities.
- ``build_city_pages``: one page per city listing its stores with a map.
- ``build_advertise_page``, ``build_add_store_page``, ``build_about_page``,
  ``build_contact_page``: the informational pages.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from src.config import (
    ABOUT_SEGMENT,
    ADD_STORE_SEGMENT,
    ADVERTISE_SEGMENT,
    CATEGORY_LABELS,
    CONTACT_EMAIL,
    CONTACT_SEGMENT,
    DAY_CODES,
    DIRECTORY_SEGMENT,
    FORM_ENDPOINT,
    HOME_TOP_STATES,
    LEAFLET_CSS_SRI,
    LEAFLET_CSS_URL,
    LEAFLET_JS_SRI,
    LEAFLET_JS_URL,
    SITE_NAME,
    SITE_NAME_HTML,
    TIME_SLOT_MINUTES,
)

from . import structured_data
from .indexer import SiteIndex, city_kpis
from .models import City, State, Store
from .paths import UrlResolver, city_subpath, state_subpath
from .renderer import dumps_for_script, esc, json_ld_script, markdown_to_html
from .templating import Layout, PageParts


@dataclass(frozen=True)
class SiteContext:
    """Everything a page builder reads, passed explicitly."""

    index: SiteIndex
    urls: UrlResolver
    layout: Layout


@dataclass(frozen=True)
class Page:
    """A rendered document and the site-relative directory it is served from.

    ``subpath`` is ``""`` for the home page and ends with ``/`` otherwise.
    """

    subpath: str
    html: str


def _render(ctx: SiteContext, subpath: str, **parts: str) -> Page:
    canonical = ctx.urls.absolute(subpath)
    return Page(subpath, ctx.layout.render(PageParts(canonical=canonical, **parts)))


def build_home(ctx: SiteContext) -> Page:
    index, urls = ctx.index, ctx.urls
    stats = f"""
    <div class="stats">
      <div class="stat"><h2>{index.total_states}</h2><p>States</p></div>
      <div class="stat"><h2>{index.total_cities}</h2><p>Cities</p></div>
      <div class="stat"><h2>{index.total_stores}</h2><p>Stores</p></div>
    </div>"""
    cards = "".join(
        f"""
      <div class="card">
        <h3>{esc(state.name)}</h3>
        <p>{state.cities_count} cities, {state.stores_count} stores</p>
        <p><a href="{urls.state(state)}">Browse {esc(state.name)}</a></p>
      </div>"""
        for state in index.top_states(HOME_TOP_STATES)
    )
    categories = "".join(
        f"""
      <div class="card category-card"><h3>{esc(label)}</h3><p>{index.category_totals[name]} stores</p></div>"""
        for name, label in CATEGORY_LABELS.items()
    )
    content = f"""
  <section class="hero">
    <div class="container">
      <h1>Discover Discount Appliances Near You</h1>
      <p>Browse our scratch &amp; dent directory to find great deals on appliances in your state.</p>
      {stats}
    </div>
  </section>
  <section class="container">
    <h2>Browse Top States</h2>
    <div class="grid grid-3">{cards}</div>
  </section>
  <section class="container">
    <h2>Popular Appliance Categories</h2>
    <div class="grid grid-4">{categories}
    </div>
  </section>
  <section class="container">
    <h2>Why Shop Scratch &amp; Dent?</h2>
    <p>Buying scratch and dent appliances can save you money and keep still-perfectly working products out of landfills. Our directory helps you discover local warehouses and outlets offering deep discounts on gently blemished appliances.</p>
    <div class="grid grid-3">
      <div class="card"><h3>Big Savings</h3><p>Find deals with savings of 30–70% off retail prices on refrigerators, washers &amp; dryers, ranges and more.</p></div>
      <div class="card"><h3>Support Local</h3><p>Shop local businesses and outlets in your state and city – keeping money in your community.</p></div>
      <div class="card"><h3>Reduce Waste</h3><p>Give slightly imperfect appliances a second life and help reduce unnecessary waste.</p></div>
    </div>
  </section>"""
    return _render(
        ctx,
        "",
        title="Scratch &amp; Dent Appliance Directory",
        og_title="Scratch &amp; Dent Appliance Directory",
        og_description="Find discounted scratch and dent appliances in your state and city.",
        content=content,
        json_ld=json_ld_script(structured_data.website()),
    )


def build_states_index(ctx: SiteContext) -> Page:
    index, urls = ctx.index, ctx.urls
    groups = index.states_by_letter()
    nav = " | ".join(f'<a href="#{letter}">{letter}</a>' for letter in groups)
    sections = "".join(
        f'<h3 id="{letter}">{letter}</h3><ul>'
        + "".join(
            f'<li><a href="{urls.state(state)}">{esc(state.name)}</a> – '
            f"{state.cities_count} cities, {state.stores_count} stores</li>"
            for state in states
        )
        + "</ul>"
        for letter, states in groups.items()
    )
    content = f"""
  <div class="container">
    <h1>Browse States</h1>
    <p>Explore scratch &amp; dent appliance outlets across the nation. Select a state to see participating cities and stores.</p>
    <p>{nav}</p>
    {sections}
  </div>"""
    return _render(
        ctx,
        f"{DIRECTORY_SEGMENT}/",
        title=f"Browse States – {SITE_NAME_HTML}",
        og_title="Browse States",
        og_description="Select your state to find scratch and dent appliance stores.",
        content=content,
        json_ld=json_ld_script(
            structured_data.state_list(index.states_alphabetical(), urls)
        ),
    )


def build_state_page(ctx: SiteContext, state: State) -> Page:
    urls = ctx.urls
    cities = ctx.index.cities_for(state)
    name = esc(state.name)
    city_cards = "".join(
        f'<div class="card city-card" data-name="{esc(city.name)}" id="{esc(city.slug)}">'
        f"<h3>{esc(city.name)}</h3><p>{city.stores_count} stores</p>"
        f'<p><a href="{urls.city(state, city)}">View stores</a></p></div>'
        for city in cities
    )
    content = f"""
  <div class="container">
    <h1>{name} Scratch &amp; Dent Appliance Stores</h1>
    <p>{name} has {len(cities)} participating cities and {state.stores_count} scratch &amp; dent appliance stores in our directory. Use the search box to find your city below.</p>
    <div class="search-input"><input type="text" id="city-search" placeholder="Find cities in {name}" aria-label="Find cities in {name}"></div>
    <div id="city-list" class="grid grid-3">{city_cards}</div>
  </div>"""
    title = f"{name} Scratch &amp; Dent Appliance Stores"
    return _render(
        ctx,
        state_subpath(state),
        title=title,
        og_title=title,
        og_description=f"Find scratch and dent appliance outlets in {name}.",
        content=content,
        json_ld=json_ld_script(structured_data.city_list(state, cities, urls)),
        extra_scripts=f'<script src="{urls.asset("js/search.js")}" defer></script>',
    )


def build_state_pages(ctx: SiteContext) -> list[Page]:
    return [build_state_page(ctx, state) for state in ctx.index.states]


def store_card(store: Store, position: int) -> str:
    """Card for one store; ``position`` indexes the page's marker array."""
    badge = '<span class="badge featured">Featured</span>' if store.featured else ""
    products = ", ".join(store.category_labels) or "N/A"
    services = ", ".join(store.service_labels) or "None"
    hours = esc(json.dumps(store.hours, ensure_ascii=False))
    return f"""
        <div class="card store-card" id="store-{esc(store.id)}" data-hours="{hours}">
          <h3>{esc(store.name)} {badge}</h3>
          <p>{esc(store.address)}</p>
          <p><a href="tel:{esc(store.phone)}">{esc(store.phone)}</a> | <a href="{esc(store.website)}" target="_blank" rel="noopener">Website</a></p>
          <p>Products: {esc(products)}</p>
          <p>Services: {services}</p>
          <p>Status: <span class="open-status">Checking…</span></p>
          <p><a href="#" class="show-on-map" data-idx="{position}">Show on map</a></p>
        </div>"""


def map_data_script(city: City, stores: list[Store]) -> str:
    """Inline script exposing the city center and store markers to ``map.js``."""
    markers = [
        {
            "id": store.id,
            "name": store.name,
            "address": store.address,
            "coords": list(store.coords),
        }
        for store in stores
    ]
    return (
        f"<script>window.cityCenter = {dumps_for_script(list(city.center))};\n"
        f"window.storeMarkers = {dumps_for_script(markers)};</script>"
    )


def city_scripts(ctx: SiteContext, city: City, stores: list[Store]) -> str:
    urls = ctx.urls
    return "".join(
        [
            map_data_script(city, stores),
            f'<script src="{LEAFLET_JS_URL}" integrity="{LEAFLET_JS_SRI}" crossorigin=""></script>',
            f'<link rel="stylesheet" href="{LEAFLET_CSS_URL}" integrity="{LEAFLET_CSS_SRI}" crossorigin=""/>',
            f'<script src="{urls.asset("js/map.js")}" defer></script>',
            f'<script src="{urls.asset("js/hours.js")}" defer></script>',
        ]
    )


def build_city_page(ctx: SiteContext, city: City) -> Page:
    state = ctx.index.state_for(city)
    stores = ctx.index.stores_for(city)
    kpis = city_kpis(stores)
    place = f"{esc(city.name)}, {esc(state.code)}"
    quick_links = "".join(
        f'<li><a href="#store-{esc(store.id)}">{esc(store.name)}</a></li>'
        for store in stores
    )
    cards = "".join(store_card(store, position) for position, store in enumerate(stores))
    content = f"""
  <div class="container">
    <h1>{place}</h1>
    <p>Looking for discount appliances in {place}? Save big on refrigerators, washers and dryers, ranges and more when you shop scratch &amp; dent. Expect savings from 30–70% off full retail prices at the stores listed below.</p>
    <div class="kpi">
      <span class="chip">{kpis.stores} stores</span>
      <span class="chip">{kpis.delivery} offer delivery</span>
      <span class="chip">{kpis.install} offer install</span>
    </div>
    <nav class="quick-nav" aria-label="Quick navigation"><h2>Quick Navigation</h2><ul>{quick_links}</ul></nav>
    <div id="map" class="map-container" aria-label="Map of stores"></div>
    <div class="grid grid-3">{cards}</div>
  </div>"""
    title = f"{place} Scratch &amp; Dent Appliance Stores"
    return _render(
        ctx,
        city_subpath(state, city),
        title=title,
        og_title=title,
        og_description=f"Discover discount appliance outlets in {place}.",
        content=content,
        json_ld=json_ld_script(structured_data.store_list(state, city, stores)),
        extra_scripts=city_scripts(ctx, city, stores),
    )


def build_city_pages(ctx: SiteContext) -> list[Page]:
    return [build_city_page(ctx, city) for city in ctx.index.cities]


PRICING_PLANS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("Monthly Plan", "$19/mo", ("List your store", "Priority placement", "Cancel anytime")),
    ("Annual Plan", "$199/yr", ("List your store", "Featured badge", "Email support")),
    ("Lifetime Plan", "$499 one-time", ("Lifetime listing", "Top of results", "Dedicated support")),
)


def build_advertise_page(ctx: SiteContext) -> Page:
    cards = "".join(
        f'<div class="pricing-card"><h3>{title}</h3><p class="price">{price}</p>'
        f"<ul>{''.join(f'<li>{feature}</li>' for feature in features)}</ul>"
        f'<p><a class="btn" href="mailto:{CONTACT_EMAIL}?subject=Advertise">Get Started</a></p></div>'
        for title, price, features in PRICING_PLANS
    )
    faq = markdown_to_html(
        "## Frequently Asked Questions\n\n"
        "**How do I pay?** Once you sign up, we'll send you an invoice via email. "
        "No payment is processed on this site.\n\n"
        f"**Can I try it free?** Yes! Use our [free listing]({ctx.urls.add_store()}) "
        "option to get started, then upgrade any time.\n"
    )
    content = f"""
  <div class="container">
    <h1>Advertise With Us</h1>
    <p>Reach motivated customers looking for discount appliances. Choose a plan that fits your business.</p>
    <div class="pricing-grid">{cards}</div>
    {faq}
  </div>"""
    return _render(
        ctx,
        f"{ADVERTISE_SEGMENT}/",
        title=f"Advertise With Us – {SITE_NAME_HTML}",
        og_title="Advertise With Us",
        og_description="Promote your scratch &amp; dent appliance store to our visitors.",
        content=content,
    )


def time_options() -> list[str]:
    """Half-hour time slots from ``00:00`` to ``23:30``."""
    return [
        f"{minutes // 60:02d}:{minutes % 60:02d}"
        for minutes in range(0, 24 * 60, TIME_SLOT_MINUTES)
    ]


def hours_rows() -> str:
    options = "".join(f'<option value="{slot}">{slot}</option>' for slot in time_options())
    return "".join(
        f"<tr><th>{day.title()}</th>"
        f'<td><select name="hours_{day}_open">{options}</select></td>'
        f'<td><select name="hours_{day}_close">{options}</select></td></tr>'
        for day in DAY_CODES
    )


def _form_field(field_id: str, label: str, control: str) -> str:
    return f"""
      <div class="form-group">
        <label for="{field_id}">{label}</label>
        {control}</div>"""


def build_add_store_page(ctx: SiteContext) -> Page:
    state_options = "".join(
        f'<option value="{esc(state.code)}">{esc(state.name)}</option>'
        for state in ctx.index.states_alphabetical()
    )
    fields = "".join(
        [
            _form_field(
                "business-name",
                "Business Name",
                '<input type="text" id="business-name" name="business_name" required>',
            ),
            _form_field(
                "state",
                "State",
                f'<select id="state" name="state" required>{state_options}</select>',
            ),
            _form_field("city", "City", '<input type="text" id="city" name="city" required>'),
            _form_field(
                "address", "Address", '<input type="text" id="address" name="address" required>'
            ),
            _form_field("phone", "Phone", '<input type="tel" id="phone" name="phone" required>'),
            _form_field("website", "Website", '<input type="url" id="website" name="website">'),
        ]
    )
    message = _form_field(
        "message",
        "Additional Information",
        '<textarea id="message" name="message" rows="4"></textarea>',
    )
    content = f"""
  <div class="container">
    <h1>Add Your Store</h1>
    <p>Submit your scratch &amp; dent appliance store. Your submission will be reviewed before appearing in our directory.</p>
    <form method="POST" action="{FORM_ENDPOINT}">{fields}
      <h2>Store Hours</h2>
      <table class="hours-table">
        <thead><tr><th>Day</th><th>Open</th><th>Close</th></tr></thead>
        <tbody>{hours_rows()}</tbody>
      </table>{message}
      <button type="submit">Submit</button>
    </form>
  </div>"""
    return _render(
        ctx,
        f"{ADD_STORE_SEGMENT}/",
        title=f"Add Your Store – {SITE_NAME_HTML}",
        og_title="Add Your Store",
        og_description="Submit your scratch and dent appliance store to be listed in our directory.",
        content=content,
    )


def build_about_page(ctx: SiteContext) -> Page:
    body = markdown_to_html(
        f"# About {SITE_NAME}\n\n"
        "We created this directory to help bargain hunters and environmentally "
        "conscious shoppers discover scratch & dent appliance outlets across the "
        "United States. We believe great deals shouldn't come at the expense of "
        "the planet, and slightly imperfect appliances deserve a second chance.\n\n"
        "This project is maintained by a small team of volunteers. If you'd like "
        "to contribute information or suggest a store, please "
        f"[get in touch]({ctx.urls.contact()}).\n"
    )
    return _render(
        ctx,
        f"{ABOUT_SEGMENT}/",
        title=f"About – {SITE_NAME_HTML}",
        og_title=f"About {SITE_NAME_HTML}",
        og_description="Learn more about the Scratch &amp; Dent Locator project and team.",
        content=f'\n  <div class="container">{body}</div>',
    )


def build_contact_page(ctx: SiteContext) -> Page:
    urls = ctx.urls
    body = markdown_to_html(
        "# Contact Us\n\n"
        "Have a question or suggestion? We'd love to hear from you. Email us or "
        "browse the directory to discover stores near you.\n\n"
        f"Not seeing your city? [Suggest a Store]({urls.add_store()}) or "
        f"[Browse Directory]({urls.directory()}) for nearby options.\n"
    )
    email = (
        f'<p><a class="btn" href="mailto:{CONTACT_EMAIL}?subject=Contact">Email Us</a></p>'
    )
    return _render(
        ctx,
        f"{CONTACT_SEGMENT}/",
        title=f"Contact – {SITE_NAME_HTML}",
        og_title=f"Contact {SITE_NAME_HTML}",
        og_description="Get in touch with the Scratch &amp; Dent Locator team.",
        content=f'\n  <div class="container">{body}{email}</div>',
    )


def build_all_pages(ctx: SiteContext) -> list[Page]:
    """Build every page in the fixed site order."""
    return [
        build_home(ctx),
        build_states_index(ctx),
        *build_state_pages(ctx),
        *build_city_pages(ctx),
        build_advertise_page(ctx),
        build_add_store_page(ctx),
        build_about_page(ctx),
        build_contact_page(ctx),
    ]


__all__ = [
    "Page",
    "SiteContext",
    "build_about_page",
    "build_add_store_page",
    "build_advertise_page",
    "build_all_pages",
    "build_city_page",
    "build_city_pages",
    "build_contact_page",
    "build_home",
    "build_state_page",
    "build_state_pages",
    "build_states_index",
    "hours_rows",
    "map_data_script",
    "store_card",
    "time_options",
]
