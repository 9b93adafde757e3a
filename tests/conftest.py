"""
Shared fixtures for netfx-locator tests.

No test touches the real registry: lookups go through FakeRegistry, an
in-memory backend that records every key it opens and closes.
"""

from contextlib import contextmanager

import pytest

from netfx_locator.utils.constants import HKEY_LOCAL_MACHINE, REG_SZ


class FakeRegistry:
    """In-memory stand-in for the winreg primitives."""

    def __init__(self):
        self.keys = {}
        self.denied = set()
        self.opened = []
        self.open_handles = 0
        self.closed = 0

    def set_value(self, key_path, value_name, data, value_type=REG_SZ, root=None):
        root = root or HKEY_LOCAL_MACHINE
        values = self.keys.setdefault((root, key_path.lower()), {})
        values[value_name] = (data, value_type)

    def add_key(self, key_path, root=None):
        root = root or HKEY_LOCAL_MACHINE
        self.keys.setdefault((root, key_path.lower()), {})

    def deny(self, key_path, root=None):
        self.denied.add((root or HKEY_LOCAL_MACHINE, key_path.lower()))

    @contextmanager
    def open_key(self, root, key_path):
        self.opened.append((root, key_path))
        ident = (root, key_path.lower())
        if ident in self.denied:
            raise PermissionError(f"Access denied: {key_path}")
        if ident not in self.keys:
            raise FileNotFoundError(f"No such key: {key_path}")
        self.open_handles += 1
        try:
            yield self.keys[ident]
        finally:
            self.open_handles -= 1
            self.closed += 1

    def query_value(self, key, value_name):
        if value_name not in key:
            raise FileNotFoundError(f"No such value: {value_name}")
        return key[value_name]


class RecordingEnviron(dict):
    """Environment mapping that remembers which variables were read."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reads = []

    def get(self, key, default=None):
        self.reads.append(key)
        return super().get(key, default)


@pytest.fixture
def registry():
    return FakeRegistry()


@pytest.fixture
def environ():
    return RecordingEnviron()
