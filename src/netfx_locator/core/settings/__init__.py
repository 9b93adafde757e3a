"""Settings module for netfx-locator."""

from .resolver_settings import DEFAULT_SETTINGS, ResolverSettings, load_settings

__all__ = ["DEFAULT_SETTINGS", "ResolverSettings", "load_settings"]
