"""
WPF install path resolution.

The full path to the WPF assemblies is %COMPLUS_InstallRoot%\\%COMPLUS_Version%\\WPF
when a private CLR is configured through the environment, and otherwise the
v4 install path recorded in the registry with WPF appended. Setting only
COMPLUS_Version keeps the registry install root but pins the version.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from netfx_locator.core.paths import PathBuffer
from netfx_locator.core.registry_reader import ConfigStringReader, RegistryBackend
from netfx_locator.core.settings import DEFAULT_SETTINGS, ResolverSettings
from netfx_locator.utils.constants import ERROR_OUTOFMEMORY, MAX_PATH
from netfx_locator.utils.platform_utils import PlatformUtils
from netfx_locator.utils.status import LookupResult, Status

log = logging.getLogger(__name__)


class InstallPathError(RuntimeError):
    """Raised when the install path cannot be determined."""

    def __init__(self, result: LookupResult):
        super().__init__(f"Could not determine install path: {result}")
        self.result = result


def _out_of_memory() -> LookupResult:
    return LookupResult.failure(Status.OUT_OF_MEMORY, ERROR_OUTOFMEMORY)


class InstallPathResolver:
    """Resolves the product directory from environment overrides and the registry."""

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        backend: RegistryBackend | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            settings: Variable names, registry locations and subdirectory
            backend: Registry primitives; defaults to winreg
            environ: Environment to read overrides from; defaults to os.environ
        """
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.reader = ConfigStringReader(backend)
        self.environ = environ

    def resolve(self, max_chars: int = MAX_PATH) -> LookupResult:
        """
        Resolve the install path.

        Args:
            max_chars: Capacity of the result in characters, terminator included.
                Must be at least MAX_PATH.

        Returns:
            LookupResult with the path, or the first failure encountered
        """
        # Appends are only checked against the buffer, which must hold MAX_PATH.
        if max_chars < MAX_PATH:
            log.debug("Buffer of %d characters is below MAX_PATH", max_chars)
            return _out_of_memory()

        settings = self.settings
        buffer = PathBuffer(max_chars)

        version = self._read_env(settings.version_env)
        if version is not None:
            if len(version) >= MAX_PATH:
                log.debug("%s does not fit MAX_PATH", settings.version_env)
                return _out_of_memory()

            root = self._read_env(settings.root_env)
            if root is not None:
                log.debug("Using %s=%s", settings.root_env, root)
                if not buffer.assign(root):
                    return _out_of_memory()
            else:
                # Private CLR version without a private root: take the root
                # from the registry but keep the requested version.
                result = self._read_registry(
                    buffer, settings.install_root_key, settings.install_root_value
                )
                if not result.ok:
                    return result

            if not buffer.append(version):
                return _out_of_memory()
        else:
            # The v4 key holds the full, version specific path.
            result = self._read_registry(
                buffer, settings.install_path_key, settings.install_path_value
            )
            if not result.ok:
                return result

        if not buffer.append(settings.product_subdir):
            return _out_of_memory()

        log.debug("Resolved install path %s", buffer.value)
        return LookupResult.success(buffer.value)

    def require(self, max_chars: int = MAX_PATH) -> str:
        """
        Resolve the install path or raise.

        Raises:
            InstallPathError: If any tier of the lookup fails
        """
        result = self.resolve(max_chars)
        if not result.ok:
            raise InstallPathError(result)
        return result.value

    def _read_env(self, name: str) -> str | None:
        return PlatformUtils.read_environment_variable(name, self.environ)

    def _read_registry(
        self, buffer: PathBuffer, key_path: str, value_name: str
    ) -> LookupResult:
        result = self.reader.read(
            self.settings.hive, key_path, value_name, buffer.capacity
        )
        if not result.ok:
            log.debug(
                "Registry lookup of %s\\%s failed: %s", key_path, value_name, result
            )
            return result
        # A value filling the whole buffer leaves no room for the terminator.
        if not buffer.assign(result.value):
            return _out_of_memory()
        return result


def resolve_install_path(
    max_chars: int = MAX_PATH,
    settings: ResolverSettings | None = None,
    backend: RegistryBackend | None = None,
    environ: Mapping[str, str] | None = None,
) -> LookupResult:
    """Resolve the install path with a one-off InstallPathResolver."""
    return InstallPathResolver(settings, backend, environ).resolve(max_chars)


def get_install_path(
    settings: ResolverSettings | None = None,
    backend: RegistryBackend | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the install path, raising InstallPathError if it cannot be found."""
    return InstallPathResolver(settings, backend, environ).require()
