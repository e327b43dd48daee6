"""Resource I/O constants."""

from __future__ import annotations

BUFFER_SIZE = 8192
CLASSPATH_PREFIX = "classpath:"
