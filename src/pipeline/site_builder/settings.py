"""Runtime settings for a site build.

``BuildSettings`` resolves the base path, optional site origin and the input
and output directories from explicit arguments, then the process environment,
then an optional ``.env`` file at the project root, then the defaults in
``src.config``.

Examples
--------
>>> from src.pipeline.site_builder.settings import BuildSettings
>>> settings = BuildSettings(base_path="directory-site")
>>> settings.base_path
'directory-site'
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

import src.config as _project_config
from src.config import (
    BASE_PATH_ENV,
    DATA_DIR_ENV,
    OUTPUT_DIR_ENV,
    SITE_ORIGIN_ENV,
)


class BuildSettings:
    r"""Resolved configuration for one build.

    Attributes
    ----------
    base_path : str
        Raw base path the site is deployed under (``""`` for the domain root).
    site_origin : str
        Absolute origin used for canonical, sitemap and robots URLs; empty
        to keep them root-relative.
    data_dir : Path
        Directory holding the three input JSON documents.
    output_dir : Path
        Directory the site is written to. It is deleted and recreated on
        every build.

    Notes
    -----
    A ``.env`` file is loaded with ``override=True``, so its values win over
    variables already present in the environment. Explicit constructor
    arguments win over both.
    """

    def __init__(
        self,
        *,
        base_path: str | None = None,
        site_origin: str | None = None,
        data_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        env_path = Path(_project_config.ENV_FILE)
        if env_path.exists():
            load_dotenv(env_path, override=True)
        self.base_path: str = (
            base_path if base_path is not None else os.getenv(BASE_PATH_ENV, "")
        )
        self.site_origin: str = (
            site_origin if site_origin is not None else os.getenv(SITE_ORIGIN_ENV, "")
        ).rstrip("/")
        self.data_dir: Path = Path(
            data_dir
            if data_dir is not None
            else os.getenv(DATA_DIR_ENV) or _project_config.DATA_DIR
        )
        self.output_dir: Path = Path(
            output_dir
            if output_dir is not None
            else os.getenv(OUTPUT_DIR_ENV) or _project_config.OUTPUT_DIR
        )

    def __repr__(self) -> str:
        return (
            f"BuildSettings(base_path={self.base_path!r}, site_origin={self.site_origin!r}, "
            f"data_dir={str(self.data_dir)!r}, output_dir={str(self.output_dir)!r})"
        )


__all__ = ["BuildSettings"]
