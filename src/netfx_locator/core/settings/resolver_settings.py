"""
Resolver settings.
Names of the override variables, the registry locations consulted and the
product subdirectory, optionally read from a TOML file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import tomlkit
from tomlkit.exceptions import TOMLKitError

from netfx_locator.utils.constants import (
    COMPLUS_INSTALL_ROOT,
    COMPLUS_VERSION,
    DOTNET_FRAMEWORK_INSTALLROOT_REGVALUE,
    DOTNET_FRAMEWORK_REGKEY,
    FRAMEWORK_INSTALLPATH_REGVALUE,
    FRAMEWORK_REGKEY,
    HKEY_LOCAL_MACHINE,
    REGISTRY_HIVES,
    WPF_SUBDIR,
)

log = logging.getLogger(__name__)

SETTINGS_TABLE = "resolver"
_SEPARATORS = "\\/"


@dataclass(frozen=True)
class ResolverSettings:
    version_env: str = COMPLUS_VERSION
    root_env: str = COMPLUS_INSTALL_ROOT
    hive: str = HKEY_LOCAL_MACHINE
    install_root_key: str = DOTNET_FRAMEWORK_REGKEY
    install_root_value: str = DOTNET_FRAMEWORK_INSTALLROOT_REGVALUE
    install_path_key: str = FRAMEWORK_REGKEY
    install_path_value: str = FRAMEWORK_INSTALLPATH_REGVALUE
    product_subdir: str = WPF_SUBDIR

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ResolverSettings:
        """
        Build settings from a mapping, starting from the defaults.

        Args:
            data: Setting names to values; unknown names are ignored

        Returns:
            New settings instance
        """
        known = {f.name for f in fields(cls)}
        overrides: dict[str, str] = {}
        for key, value in data.items():
            if key not in known:
                log.warning("Ignoring unknown resolver setting %r", key)
                continue
            if not isinstance(value, str) or not value.strip(_SEPARATORS):
                raise ValueError(
                    f"Resolver setting {key!r} must be a non-empty string"
                    " that is not only path separators"
                )
            overrides[key] = value

        settings = replace(cls(), **overrides)
        if settings.hive not in REGISTRY_HIVES:
            raise ValueError(f"Unknown registry hive {settings.hive!r}")
        return settings


DEFAULT_SETTINGS = ResolverSettings()


def load_settings(settings_file: Path) -> ResolverSettings:
    """
    Load resolver settings from a TOML file.

    The values may sit in a [resolver] table or at the top level. A missing
    file yields the defaults; an unreadable or malformed one is logged and
    also yields the defaults.

    Args:
        settings_file: Path to the TOML file

    Returns:
        Resolver settings
    """
    settings_file = Path(settings_file)
    if not settings_file.exists():
        return DEFAULT_SETTINGS

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            document = tomlkit.parse(f.read()).unwrap()
    except (TOMLKitError, UnicodeDecodeError, OSError) as e:
        log.error("Error loading resolver settings from %s: %s", settings_file, e)
        return DEFAULT_SETTINGS

    table = document.get(SETTINGS_TABLE, document)
    if not isinstance(table, dict):
        log.error("Resolver settings in %s are not a table", settings_file)
        return DEFAULT_SETTINGS

    try:
        return ResolverSettings.from_mapping(table)
    except ValueError as e:
        log.error("Invalid resolver settings in %s: %s", settings_file, e)
        return DEFAULT_SETTINGS
