"""Tests for the site build command line entrypoint.

Covers logging setup, argument parsing and the exit status and console
summary of ``main`` for successful and failed builds.
"""

import logging
from pathlib import Path

import pytest

import src.config as config
import src.program_build_site as cli
from src.console_helpers import build_summary_table
from src.pipeline.site_builder.runner import BuildReport


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in ("BASE_PATH", "SITE_ORIGIN", "SITE_DATA_DIR", "SITE_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "ENV_FILE", tmp_path / "missing.env")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_filehandler_error(monkeypatch, tmp_path: Path):
    class BadFH:
        def __init__(self, *a, **k):
            raise OSError("read-only filesystem")

    monkeypatch.setattr(cli, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(cli.logging, "FileHandler", BadFH)
    cli.setup_logging("DEBUG", enable_file=True)
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_writes_to_log_dir(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(cli, "LOG_DIR", tmp_path / "logs")
    cli.setup_logging("INFO", enable_file=True)
    logging.getLogger("src.test").info("hello")
    assert (tmp_path / "logs" / "build_site.log").exists()


def test_parse_args_defaults_and_values(tmp_path: Path):
    args = cli.parse_args([])
    assert args.data_dir is None
    assert args.base_path is None
    assert args.log_level == "INFO"
    args = cli.parse_args(
        ["--data-dir", str(tmp_path), "--base-path", "my-site", "--site-origin", "https://x.org"]
    )
    assert args.data_dir == tmp_path
    assert args.base_path == "my-site"
    assert args.site_origin == "https://x.org"


def test_main_success(data_dir: Path, tmp_path: Path, capsys):
    out = tmp_path / "dist"
    status = cli.main(["--data-dir", str(data_dir), "--output-dir", str(out)])
    assert status == 0
    assert (out / "index.html").is_file()
    assert "Site build" in capsys.readouterr().out


def test_main_failure_returns_one(tmp_path: Path, capsys):
    status = cli.main(["--data-dir", str(tmp_path / "nothing"), "--output-dir", str(tmp_path / "dist")])
    assert status == 1
    assert "Site build failed" in capsys.readouterr().out


def test_summary_table_warns_on_problems(tmp_path: Path):
    report = BuildReport(
        output_dir=tmp_path,
        pages=3,
        states=1,
        cities=1,
        stores=2,
        artifacts=["search.json"],
        slug_collisions=1,
        stores_with_bad_hours=2,
    )
    table = build_summary_table(report)
    labels = list(table.columns[0].cells)
    assert "Slug collisions" in labels
    assert "Stores with unreadable hours" in labels
    clean = build_summary_table(BuildReport(output_dir=tmp_path))
    assert "Slug collisions" not in list(clean.columns[0].cells)
