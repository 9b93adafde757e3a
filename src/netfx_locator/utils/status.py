"""
Status codes and the result type returned by every lookup.
Using simple numeric constants for language-independent logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from netfx_locator.utils.constants import (
    E_OUTOFMEMORY,
    ERROR_SUCCESS,
    FACILITY_WIN32,
    S_OK,
)


class Status:
    """Status codes for all lookups"""

    SUCCESS = 0
    INVALID_PARAMETER = 1
    STORE_ERROR = 2
    UNSUPPORTED_TYPE = 3
    OUT_OF_MEMORY = 4

    @classmethod
    def get_name(cls, code: int) -> str:
        """Get status name for debugging"""
        for name, value in cls.__dict__.items():
            if not name.startswith("_") and value == code:
                return name
        return "UNKNOWN"

    @classmethod
    def is_success(cls, code: int) -> bool:
        """Check if status code indicates success"""
        return code == cls.SUCCESS

    @classmethod
    def is_error(cls, code: int) -> bool:
        """Check if status code indicates an error"""
        return code in [
            cls.INVALID_PARAMETER,
            cls.STORE_ERROR,
            cls.UNSUPPORTED_TYPE,
            cls.OUT_OF_MEMORY,
        ]


def hresult_from_win32(code: int) -> int:
    """Equivalent of the HRESULT_FROM_WIN32 macro, as an unsigned value."""
    if code <= 0:
        return code
    return (code & 0x0000FFFF) | (FACILITY_WIN32 << 16) | 0x80000000


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of a registry read or an install path resolution.

    ``value`` is only set on success; failures never carry a partial path.
    ``error_code`` holds the Win32 error code behind a failure, when there is one.
    """

    status: int
    value: str | None = None
    error_code: int = ERROR_SUCCESS

    @classmethod
    def success(cls, value: str) -> LookupResult:
        return cls(Status.SUCCESS, value)

    @classmethod
    def failure(cls, status: int, error_code: int = ERROR_SUCCESS) -> LookupResult:
        return cls(status, None, error_code)

    @property
    def ok(self) -> bool:
        return Status.is_success(self.status)

    @property
    def hresult(self) -> int:
        if self.ok:
            return S_OK
        if self.status == Status.OUT_OF_MEMORY:
            return E_OUTOFMEMORY
        return hresult_from_win32(self.error_code)

    def __str__(self) -> str:
        if self.ok:
            return str(self.value)
        return f"{Status.get_name(self.status)} (error {self.error_code})"
