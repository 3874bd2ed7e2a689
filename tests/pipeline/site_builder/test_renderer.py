"""Unit tests for rendering primitives and output writers."""

import json
from pathlib import Path

import pytest

from src.pipeline.site_builder import renderer as r


def test_esc_escapes_markup_and_quotes() -> None:
    assert r.esc('<b>"Tom\'s" & co</b>') == "&lt;b&gt;&quot;Tom&#x27;s&quot; &amp; co&lt;/b&gt;"
    assert r.esc(5) == "5"


def test_clean_html_output() -> None:
    raw = "<p>\n</p><p>&nbsp;</p><h1>Title</h1>\n<p><br/></p>\n<br/><br/>"
    assert r.clean_html_output(raw) == "<h1>Title</h1><br>"


def test_clean_html_output_rejects_non_str() -> None:
    with pytest.raises(TypeError):
        r.clean_html_output(None)  # type: ignore[arg-type]


def test_markdown_to_html() -> None:
    out = r.markdown_to_html("# About\n\nSee [contact](/contact/).")
    assert "<h1>About</h1>" in out
    assert '<a href="/contact/">contact</a>' in out


def test_dumps_for_script_escapes_closing_tags() -> None:
    out = r.dumps_for_script({"name": "</script><script>alert(1)</script>"})
    assert "</script>" not in out
    assert json.loads(out)["name"] == "</script><script>alert(1)</script>"


def test_json_ld_script() -> None:
    out = r.json_ld_script({"@type": "WebSite"})
    assert out.startswith('<script type="application/ld+json">')
    assert out.endswith("</script>")
    assert '"@type": "WebSite"' in out


def test_write_text_output_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "index.html"
    assert r.write_text_output("<html></html>", target) == target
    assert target.read_text(encoding="utf-8") == "<html></html>"


def test_write_text_output_propagates_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    with pytest.raises(OSError):
        r.write_text_output("x", blocker / "index.html")
