"""Path handling for netfx-locator."""

from .path_buffer import PathBuffer

__all__ = ["PathBuffer"]
