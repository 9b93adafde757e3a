"""
Bounded path buffer.
Holds a Windows path that must fit a fixed number of characters, terminator
included, and appends segments with path-join semantics.
"""

from __future__ import annotations

import logging
import ntpath

log = logging.getLogger(__name__)

_SEPARATORS = "\\/"


class PathBuffer:
    """A path string with a capacity measured in characters."""

    def __init__(self, capacity: int):
        """
        Initialize an empty buffer.

        Args:
            capacity: Number of characters available, terminator included
        """
        self.capacity = capacity
        self._value = ""

    @property
    def value(self) -> str:
        return self._value

    def fits(self, text: str) -> bool:
        """Return True if text plus its terminator fits in the buffer."""
        return len(text) + 1 <= self.capacity

    def assign(self, text: str) -> bool:
        """
        Replace the buffer contents.

        Returns:
            False, leaving the buffer untouched, if text does not fit
        """
        if not self.fits(text):
            log.debug(
                "%d characters do not fit a %d slot buffer", len(text), self.capacity
            )
            return False
        self._value = text
        return True

    def append(self, segment: str) -> bool:
        """
        Append a path segment the way PathAppend does.
        - Leading separators on the segment are ignored
        - Exactly one backslash joins root and segment, also after a bare drive
        - A segment carrying its own drive is refused
        - The result is normalized (forward slashes, '.' and '..' components)

        Returns:
            False, leaving the buffer untouched, if the result does not fit
            or the segment names a drive
        """
        segment = segment.lstrip(_SEPARATORS)
        if not segment:
            return True

        if ntpath.splitdrive(segment)[0]:
            log.debug("Refusing to append %r, it names its own drive", segment)
            return False

        root = self._value
        if root:
            # "D:" alone is drive relative; PathAppend roots it.
            if not ntpath.splitdrive(root)[1]:
                root += "\\"
            combined = ntpath.normpath(ntpath.join(root, segment))
        else:
            combined = ntpath.normpath(segment)

        return self.assign(combined)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PathBuffer(capacity={self.capacity}, value={self._value!r})"
