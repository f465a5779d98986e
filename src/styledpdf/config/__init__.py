"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Keyword ``overrides`` (used by the CLI for flags such as ``--interval``)
"""

from .schema import ConfigModel, build_rule_table, load_config, page_geometry

__all__ = ["ConfigModel", "build_rule_table", "load_config", "page_geometry"]
