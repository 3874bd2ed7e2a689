"""Layout loading and placeholder substitution for generated pages.

The site uses a single HTML layout with ``{{name}}`` placeholders. Rendering
is plain textual substitution in one pass: values are inserted as given (no
escaping; callers hand in HTML-safe fragments), placeholders that have no
value in the context are left untouched, and placeholder-like text inside an
inserted value is not expanded again.

Examples
--------
>>> render_template("<title>{{title}}</title>{{other}}", {"title": "Home"})
'<title>Home</title>{{other}}'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from src.exceptions import ConfigurationError

PLACEHOLDER_PATTERN = re.compile(r"\{\{([a-zA-Z0-9_]+)\}\}")


def load_template(path: Path) -> str:
    """Read the layout template.

    Raises
    ------
    ConfigurationError
        If the template file does not exist.
    """
    if not path.is_file():
        raise ConfigurationError(
            f"Layout template not found: {path}", context={"path": str(path)}
        )
    with path.open("r", encoding="utf-8") as fh:
        return fh.read()


def extract_placeholders_from_template(content: str) -> list[str]:
    """Return a sorted list of unique placeholder names in the template."""
    return sorted(set(PLACEHOLDER_PATTERN.findall(content)))


def render_template(template_content: str, context: dict[str, str]) -> str:
    """Replace every ``{{name}}`` occurrence with ``context[name]``.

    Parameters
    ----------
    template_content : str
        Template text containing ``{{placeholders}}``.
    context : dict[str, str]
        Mapping from placeholder names to replacement text.

    Returns
    -------
    str
        The rendered text. Unknown placeholders are kept verbatim.
    """

    def replace_func(match: re.Match[str]) -> str:
        return context.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(replace_func, template_content)


@dataclass(frozen=True)
class PageParts:
    """Per-page values substituted into the layout."""

    title: str
    canonical: str
    og_title: str
    og_description: str
    content: str
    json_ld: str = ""
    extra_scripts: str = ""


@dataclass(frozen=True)
class Layout:
    """The site layout bound to values shared by every page.

    Attributes
    ----------
    template : str
        Layout text.
    header, footer : str
        Site header and footer fragments, computed once per build.
    ga_id : str
        Analytics measurement id.
    base : str
        Normalized base path (``""`` at the domain root).
    """

    template: str
    header: str
    footer: str
    ga_id: str
    base: str

    def render(self, parts: PageParts) -> str:
        return render_template(
            self.template,
            {
                "title": parts.title,
                "canonical": parts.canonical,
                "ogTitle": parts.og_title,
                "ogDescription": parts.og_description,
                "header": self.header,
                "content": parts.content,
                "footer": self.footer,
                "jsonLd": parts.json_ld,
                "extraScripts": parts.extra_scripts,
                "gaId": self.ga_id,
                "base": self.base,
            },
        )


__all__ = [
    "Layout",
    "PageParts",
    "extract_placeholders_from_template",
    "load_template",
    "render_template",
]
