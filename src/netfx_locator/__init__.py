"""Locate the WPF directory of the installed .NET Framework."""

from netfx_locator.core.install_path import (
    InstallPathError,
    InstallPathResolver,
    get_install_path,
    resolve_install_path,
)
from netfx_locator.core.registry_reader import ConfigStringReader, read_config_string
from netfx_locator.core.settings import (
    DEFAULT_SETTINGS,
    ResolverSettings,
    load_settings,
)
from netfx_locator.utils.status import LookupResult, Status

__version__ = "1.0.0"

__all__ = [
    "ConfigStringReader",
    "DEFAULT_SETTINGS",
    "InstallPathError",
    "InstallPathResolver",
    "LookupResult",
    "ResolverSettings",
    "Status",
    "get_install_path",
    "load_settings",
    "read_config_string",
    "resolve_install_path",
]
