"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``THREADPRESS_SOURCE`` environment variable for the input path
"""

from .schema import ConfigModel, ExportOptions, load_config

__all__ = ["ConfigModel", "ExportOptions", "load_config"]
