"""Text read and copy operations.

Crossing between bytes and characters always takes an explicit encoding;
there is no default. Files are opened with ``newline=""`` so line endings
pass through untranslated. Decoding and encoding are strict.
"""

from __future__ import annotations

import codecs
import io
from typing import TYPE_CHECKING, TextIO

from .constants import BUFFER_SIZE
from .logger import logger
from .source import open_source, prepare_target

if TYPE_CHECKING:
    from .source import PathOrString


def copy_text_stream(reader: TextIO, writer: TextIO) -> int:
    """Copy ``reader`` to ``writer`` in BUFFER_SIZE character chunks.

    Same loop as the binary copy: ``""`` ends it, ``None`` is no progress.
    Returns the number of characters copied. Neither stream is closed.
    """
    total = 0
    while True:
        chunk = reader.read(BUFFER_SIZE)
        if chunk is None:
            continue
        if not chunk:
            break
        writer.write(chunk)
        total += len(chunk)
    return total


def read_text(source: PathOrString, encoding: str) -> str:
    """Read the whole source, decoded with ``encoding``."""
    with open_source(source) as raw, io.TextIOWrapper(raw, encoding=encoding, newline="") as reader:
        with io.StringIO(newline="") as out:
            copy_text_stream(reader, out)
            return out.getvalue()


def copy_text_to_stream(source: PathOrString, encoding: str, writer: TextIO) -> int:
    """Decode a file or bundled resource with ``encoding`` into ``writer``.

    Returns the number of characters copied.
    """
    with open_source(source) as raw, io.TextIOWrapper(raw, encoding=encoding, newline="") as reader:
        return copy_text_stream(reader, writer)


def copy_text_from_stream(reader: TextIO, target: PathOrString, encoding: str) -> int:
    """Encode ``reader`` with ``encoding`` into the file at ``target``.

    The target is created or truncated; parent directories are created first.
    Returns the number of characters copied.
    """
    codecs.lookup(encoding)
    target_path = prepare_target(target)
    with open(target_path, "w", encoding=encoding, newline="") as writer:
        total = copy_text_stream(reader, writer)
    logger.debug("Copied text to file", target=str(target_path), encoding=encoding, chars=total)
    return total
