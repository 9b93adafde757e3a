"""Tests for PlatformUtils and the winreg backend."""

import sys

import pytest

from netfx_locator.utils.constants import (
    ERROR_ACCESS_DENIED,
    ERROR_FILE_NOT_FOUND,
    ERROR_GEN_FAILURE,
    ERROR_UNSUPPORTED_TYPE,
    HKEY_LOCAL_MACHINE,
)
from netfx_locator.utils.platform_utils import PlatformUtils, WinRegBackend


class TestReadEnvironmentVariable:
    def test_present(self):
        env = {"COMPLUS_Version": "v4.0.30319"}
        assert (
            PlatformUtils.read_environment_variable("COMPLUS_Version", env)
            == "v4.0.30319"
        )

    def test_unset(self):
        assert PlatformUtils.read_environment_variable("COMPLUS_Version", {}) is None

    def test_empty_counts_as_unset(self):
        env = {"COMPLUS_Version": ""}
        assert PlatformUtils.read_environment_variable("COMPLUS_Version", env) is None

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("NETFX_LOCATOR_TEST_VAR", "value")
        assert PlatformUtils.read_environment_variable("NETFX_LOCATOR_TEST_VAR") == (
            "value"
        )


class WinregError(OSError):
    """OSError carrying a winerror the way winreg raises it on Windows."""

    def __init__(self, winerror):
        super().__init__("registry failure")
        self.winerror = winerror


class TestWin32ErrorFromOsError:
    def test_winerror_is_used_when_present(self):
        assert (
            PlatformUtils.win32_error_from_os_error(WinregError(ERROR_UNSUPPORTED_TYPE))
            == ERROR_UNSUPPORTED_TYPE
        )

    def test_file_not_found(self):
        assert (
            PlatformUtils.win32_error_from_os_error(FileNotFoundError("missing"))
            == ERROR_FILE_NOT_FOUND
        )

    def test_permission_error(self):
        assert (
            PlatformUtils.win32_error_from_os_error(PermissionError("denied"))
            == ERROR_ACCESS_DENIED
        )

    def test_other_errors(self):
        assert PlatformUtils.win32_error_from_os_error(OSError("boom")) == (
            ERROR_GEN_FAILURE
        )


@pytest.mark.skipif(sys.platform == "win32", reason="registry exists on Windows")
def test_winreg_backend_reports_missing_keys_off_windows():
    backend = WinRegBackend()
    with pytest.raises(FileNotFoundError):
        with backend.open_key(HKEY_LOCAL_MACHINE, r"Software\Microsoft"):
            pass
