"""
Registry string reader.
Reads one REG_SZ value from a registry key opened for read access.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from netfx_locator.utils.constants import (
    CHAR_SIZE,
    ERROR_INVALID_PARAMETER,
    ERROR_MORE_DATA,
    ERROR_UNSUPPORTED_TYPE,
    INT_MAX,
    REG_BINARY,
    REG_DWORD,
    REG_EXPAND_SZ,
    REG_MULTI_SZ,
    REG_QWORD,
    REG_SZ,
    REGISTRY_HIVES,
)
from netfx_locator.utils.platform_utils import PlatformUtils, WinRegBackend
from netfx_locator.utils.status import LookupResult, Status

log = logging.getLogger(__name__)


class RegistryBackend(Protocol):
    """The registry primitives the reader relies on."""

    def open_key(self, root: str, key_path: str) -> Any:
        """Return a context manager yielding a read-only key handle."""

    def query_value(self, key: Any, value_name: str) -> tuple[Any, int]:
        """Return (data, value type) of a named value."""


def _data_size(data: Any, value_type: int) -> int:
    """
    Bytes RegQueryValueEx needs for a value.
    Strings are counted without their terminator.
    """
    if data is None:
        return 0
    if value_type in (REG_SZ, REG_EXPAND_SZ):
        return len(data) * CHAR_SIZE
    if value_type == REG_MULTI_SZ:
        return (sum(len(item) + 1 for item in data) + 1) * CHAR_SIZE
    if value_type == REG_DWORD:
        return 4
    if value_type == REG_QWORD:
        return 8
    if value_type == REG_BINARY or isinstance(data, (bytes, bytearray)):
        return len(data)
    return len(str(data)) * CHAR_SIZE


class ConfigStringReader:
    """Reads string values from the registry."""

    def __init__(self, backend: RegistryBackend | None = None):
        """
        Initialize the reader.

        Args:
            backend: Registry primitives; defaults to winreg
        """
        self.backend = backend if backend is not None else WinRegBackend()

    def read(
        self, root: str, key_path: str, value_name: str, max_chars: int
    ) -> LookupResult:
        """
        Read a REG_SZ value.

        Args:
            root: Registry hive name, e.g. HKEY_LOCAL_MACHINE
            key_path: Path of the key under the hive
            value_name: Name of the value to read
            max_chars: Capacity of the destination in characters

        Returns:
            LookupResult holding the string, or the reason it could not be read.
            A value of exactly max_chars characters is accepted, so callers
            that need a terminator must leave room for it.
        """
        if max_chars > INT_MAX or root not in REGISTRY_HIVES:
            log.debug("Refusing registry read of %s\\%s", root, key_path)
            return LookupResult.failure(
                Status.INVALID_PARAMETER, ERROR_INVALID_PARAMETER
            )

        max_bytes = max(max_chars, 0) * CHAR_SIZE
        try:
            with self.backend.open_key(root, key_path) as key:
                return self._query(key, key_path, value_name, max_bytes)
        except OSError as e:
            code = PlatformUtils.win32_error_from_os_error(e)
            log.debug("Could not open %s\\%s: error %d", root, key_path, code)
            return LookupResult.failure(Status.STORE_ERROR, code)

    def _query(
        self, key: Any, key_path: str, value_name: str, max_bytes: int
    ) -> LookupResult:
        try:
            data, value_type = self.backend.query_value(key, value_name)
        except OSError as e:
            code = PlatformUtils.win32_error_from_os_error(e)
            log.debug("Could not query %s in %s: error %d", value_name, key_path, code)
            return LookupResult.failure(Status.STORE_ERROR, code)

        if _data_size(data, value_type) > max_bytes:
            log.debug("%s in %s exceeds %d bytes", value_name, key_path, max_bytes)
            return LookupResult.failure(Status.STORE_ERROR, ERROR_MORE_DATA)

        if value_type != REG_SZ:
            log.debug(
                "%s in %s has type %d, expected REG_SZ",
                value_name,
                key_path,
                value_type,
            )
            return LookupResult.failure(
                Status.UNSUPPORTED_TYPE, ERROR_UNSUPPORTED_TYPE
            )

        return LookupResult.success(data)


def read_config_string(
    root: str,
    key_path: str,
    value_name: str,
    max_chars: int,
    backend: RegistryBackend | None = None,
) -> LookupResult:
    """Read a REG_SZ value with a one-off ConfigStringReader."""
    return ConfigStringReader(backend).read(root, key_path, value_name, max_chars)
