"""Locator configuration: schema and YAML loading."""

from modroot.config.loader import load_config
from modroot.config.schema import LocatorConfig

__all__ = ["LocatorConfig", "load_config"]
