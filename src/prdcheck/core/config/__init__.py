"""Core configuration loading exports."""

from prdcheck.core.config.loader import default_config, load_config, resolve_config

__all__ = ["default_config", "load_config", "resolve_config"]
