"""Uniform read and copy operations over streams, files and bundled resources."""

from __future__ import annotations

from .binary import copy_file, copy_from_stream, copy_stream, copy_to_stream, read
from .constants import BUFFER_SIZE, CLASSPATH_PREFIX
from .errors import ResourceIOError, ResourceNotFoundError, UnsupportedCopyOptionError
from .resources import find_resource, open_resource
from .source import classify_source, open_source
from .text import copy_text_from_stream, copy_text_stream, copy_text_to_stream, read_text
from .types import BundledResource, CopyOption, FilesystemPath, SourceRef

__all__ = [
    # binary
    "copy_file",
    "copy_from_stream",
    "copy_stream",
    "copy_to_stream",
    "read",
    # constants
    "BUFFER_SIZE",
    "CLASSPATH_PREFIX",
    # errors
    "ResourceIOError",
    "ResourceNotFoundError",
    "UnsupportedCopyOptionError",
    # resources
    "find_resource",
    "open_resource",
    # source
    "classify_source",
    "open_source",
    # text
    "copy_text_from_stream",
    "copy_text_stream",
    "copy_text_to_stream",
    "read_text",
    # types
    "BundledResource",
    "CopyOption",
    "FilesystemPath",
    "SourceRef",
]
