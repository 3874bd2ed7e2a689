"""Build the static scratch and dent appliance directory site.

Loads the state, city and store JSON documents, renders the home page, the
state index, one page per state and per city, and the informational pages,
then writes ``search.json``, ``sitemap.xml`` and ``robots.txt``. The output
directory is recreated on every run.

Usage::

    python -m src.program_build_site --base-path directory-site
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from src.config import LOG_DIR, LOG_FILENAME_BUILD_SITE, LOG_FORMAT
from src.console_helpers import build_summary_table, rprint
from src.pipeline.site_builder.runner import run_from_config

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_BUILD_SITE, mode="a"),
            )
        except OSError:
            pass
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Unset options fall back to the environment (``BASE_PATH``,
    ``SITE_ORIGIN``, ``SITE_DATA_DIR``, ``SITE_OUTPUT_DIR``) and then to the
    defaults in ``src.config``.
    """
    parser = argparse.ArgumentParser(
        description="Generate the static scratch & dent appliance directory site."
    )
    parser.add_argument("--data-dir", type=Path, default=None)
    parser.add_argument("--output-dir", type=Path, default=None)
    parser.add_argument("--base-path", type=str, default=None)
    parser.add_argument("--site-origin", type=str, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for site generation.

    Returns
    -------
    int
        Process exit status: ``0`` on success, ``1`` if the build failed.
    """
    args = parse_args(argv)
    setup_logging(args.log_level, enable_file=not os.environ.get("DISABLE_FILE_LOGS"))
    report = run_from_config(
        data_dir=args.data_dir,
        output_dir=args.output_dir,
        base_path=args.base_path,
        site_origin=args.site_origin,
    )
    if report is None:
        rprint("[bold red]Site build failed; see the log for details.[/bold red]")
        return 1
    rprint(build_summary_table(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
