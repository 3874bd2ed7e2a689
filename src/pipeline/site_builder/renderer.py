"""HTML rendering and output helpers for the site builder.

This module holds the low-level rendering primitives shared by the page
builders and artifact emitters: escaping of record values, Markdown-to-HTML
conversion for the informational pages, JSON-LD and inline-data script
embedding, and writing finished documents to the output tree.

System Boundaries
-----------------
- Knows nothing about states, cities or stores; callers pass plain values.
- Output writers create parent directories and let filesystem errors
  propagate, so a failed write aborts the build.

Example
-------
>>> from src.pipeline.site_builder import renderer
>>> renderer.markdown_to_html("# About")
'<h1>About</h1>'
"""

from __future__ import annotations

import html
import json
import re
from pathlib import Path
from typing import Any

import markdown2


def esc(value: object) -> str:
    """HTML-escape a record value for use in text or a quoted attribute."""
    return html.escape(str(value), quote=True)


def clean_html_output(html_content: str) -> str:
    r"""Perform lightweight normalization and cleaning of generated HTML strings.

    Removes empty paragraphs, redundant breaks and whitespace between tags.

    Parameters
    ----------
    html_content : str
        Raw HTML string.

    Returns
    -------
    str
        Cleaned HTML string.

    Raises
    ------
    TypeError
        If input is not str.

    Examples
    --------
    >>> clean_html_output("<p></p><h1>Hi</h1><p>&nbsp;</p><br><br>")
    '<h1>Hi</h1><br>'
    """
    if not isinstance(html_content, str):
        raise TypeError("Input must be a string.")
    html_content = re.sub(r"<p>\s*</p>", "", html_content)
    html_content = re.sub(r"<p>&nbsp;</p>", "", html_content)
    html_content = re.sub(r"<p><br\s*/?>\s*</p>", "", html_content)
    html_content = re.sub(r"(<br\s*/?>\s*){2,}", "<br>", html_content)
    html_content = re.sub(r">\s+<", "><", html_content)
    return html_content.strip()


def markdown_to_html(markdown_text: str) -> str:
    """Convert Markdown copy to cleaned HTML with markdown2.

    Examples
    --------
    >>> markdown_to_html("Visit [us](/about/).")
    '<p>Visit <a href="/about/">us</a>.</p>'
    """
    converted = markdown2.markdown(markdown_text, extras=["tables", "smarty-pants"])
    return clean_html_output(str(converted))


def dumps_for_script(payload: Any) -> str:
    """Serialize ``payload`` as JSON that is safe inside a ``<script>`` element."""
    return json.dumps(payload, ensure_ascii=False).replace("</", "<\\/")


def json_ld_script(payload: dict[str, Any]) -> str:
    """Wrap a schema.org payload in an ``application/ld+json`` script tag."""
    return f'<script type="application/ld+json">{dumps_for_script(payload)}</script>'


def write_text_output(content: str, output_file: Path) -> Path:
    r"""Write ``content`` to ``output_file``, creating parent directories.

    Parameters
    ----------
    content : str
        Full document text.
    output_file : Path
        Output file path.

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    OSError
        If the directory cannot be created or the file cannot be written.
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content, encoding="utf-8")
    return output_file


__all__ = [
    "clean_html_output",
    "dumps_for_script",
    "esc",
    "json_ld_script",
    "markdown_to_html",
    "write_text_output",
]
