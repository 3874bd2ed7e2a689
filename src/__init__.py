"""Scratch & Dent Locator site builder package.

Root of the package that turns three JSON collections (states, cities and
scratch and dent appliance stores) into a static, base-path-aware HTML site
with a client-side search index, a sitemap and a robots file.

Package Structure
-----------------
- `pipeline/site_builder/`:
    Headless build stages: loading, indexing, page rendering, artifact
    emission and the build driver.
- `program_build_site.py`: Command line entrypoint with logging setup.
- `console_helpers.py`: Rich console output for the entrypoint.
- `config.py`: All configuration constants (paths, site identity, sizes), as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> import src
>>> # Run ``python -m src.program_build_site`` to build the site.
"""
