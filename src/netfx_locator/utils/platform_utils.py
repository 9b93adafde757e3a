from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterator

from netfx_locator.utils.constants import (
    ERROR_ACCESS_DENIED,
    ERROR_FILE_NOT_FOUND,
    ERROR_GEN_FAILURE,
)

if sys.platform == "win32":
    import winreg


class PlatformUtils:
    """
    Centralized platform utilities.
    - Environment override reads
    - Translation of OS errors into Win32 error codes
    """

    @staticmethod
    def is_windows() -> bool:
        return sys.platform == "win32"

    @staticmethod
    def read_environment_variable(
        name: str, environ: Mapping[str, str] | None = None
    ) -> str | None:
        """
        Read an environment variable as an optional value.

        An empty value is reported as None, the same as an unset one, matching
        the zero-length convention of GetEnvironmentVariable.
        """
        source = os.environ if environ is None else environ
        value = source.get(name)
        if not value:
            return None
        return value

    @staticmethod
    def win32_error_from_os_error(exc: OSError) -> int:
        """
        Map an OSError raised by a registry primitive onto a Win32 error code.
        winreg sets ``winerror`` on Windows; elsewhere fall back on the
        exception class.
        """
        code = getattr(exc, "winerror", None)
        if code:
            return int(code)
        if isinstance(exc, FileNotFoundError):
            return ERROR_FILE_NOT_FOUND
        if isinstance(exc, PermissionError):
            return ERROR_ACCESS_DENIED
        return ERROR_GEN_FAILURE


class WinRegBackend:
    """
    Registry access through the winreg module.

    On hosts without a registry every key reports as missing, so lookups fail
    the same way they would on a Windows machine without the framework.
    """

    @contextmanager
    def open_key(self, root: str, key_path: str) -> Iterator[Any]:
        if not PlatformUtils.is_windows():
            raise FileNotFoundError(
                f"Windows registry is not available on {sys.platform}"
            )
        hive = getattr(winreg, root)
        with winreg.OpenKey(hive, key_path, 0, winreg.KEY_READ) as key:
            yield key

    def query_value(self, key: Any, value_name: str) -> tuple[Any, int]:
        return winreg.QueryValueEx(key, value_name)
