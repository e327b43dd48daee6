"""Binary read and copy operations.

Every function that opens a source or target owns that handle and closes it
before returning, including when the copy fails part way. Streams passed in
by the caller are never closed.
"""

from __future__ import annotations

import io
import os
import shutil
from typing import TYPE_CHECKING, BinaryIO

from .constants import BUFFER_SIZE
from .errors import UnsupportedCopyOptionError
from .logger import logger
from .source import as_target_path, classify_source, open_source, prepare_target
from .types import BundledResource, CopyOption

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from .source import PathOrString

STREAM_TARGET_OPTIONS = frozenset({CopyOption.REPLACE_EXISTING})
FILE_TARGET_OPTIONS = frozenset({CopyOption.REPLACE_EXISTING, CopyOption.COPY_ATTRIBUTES})


def check_options(options: Iterable[CopyOption], supported: frozenset[CopyOption]) -> None:
    """Reject copy options that the calling operation cannot honor."""
    unsupported = [option.name for option in options if option not in supported]
    if unsupported:
        raise UnsupportedCopyOptionError(f"Unsupported copy option(s): {', '.join(unsupported)}")


def open_target(target_path: Path, options: Iterable[CopyOption]) -> BinaryIO:
    """Open a prepared target for binary writing.

    Without REPLACE_EXISTING the target is created exclusively. With it, a
    symlink at the target is removed first so the link itself is replaced,
    not the file it points to.
    """
    if CopyOption.REPLACE_EXISTING not in options:
        return open(target_path, "xb")
    if target_path.is_symlink():
        target_path.unlink()
    return open(target_path, "wb")


def read(source: PathOrString) -> bytes:
    """Read the whole source into memory.

    Source strings for bundled resources must be prefixed with ``classpath:``.
    """
    with open_source(source) as src, io.BytesIO() as out:
        copy_stream(src, out)
        return out.getvalue()


def copy_stream(src: BinaryIO, dst: BinaryIO) -> int:
    """Copy ``src`` to ``dst`` in BUFFER_SIZE chunks until end of stream.

    An empty read ends the copy. A ``None`` read (non-blocking stream with
    nothing available yet) makes no progress and the loop keeps going.
    Returns the number of bytes copied.
    """
    total = 0
    while True:
        chunk = src.read(BUFFER_SIZE)
        if chunk is None:
            continue
        if not chunk:
            break
        dst.write(chunk)
        total += len(chunk)
    return total


def copy_to_stream(source: PathOrString, dst: BinaryIO) -> int:
    """Copy a file or bundled resource to ``dst``. Returns the bytes copied."""
    with open_source(source) as src:
        return copy_stream(src, dst)


def copy_from_stream(src: BinaryIO, target: PathOrString, *options: CopyOption) -> int:
    """Copy ``src`` into the file at ``target``.

    Without REPLACE_EXISTING an existing target raises FileExistsError.
    Returns the bytes copied.
    """
    check_options(options, STREAM_TARGET_OPTIONS)
    target_path = prepare_target(target)
    with open_target(target_path, options) as dst:
        total = copy_stream(src, dst)
    logger.debug("Copied stream to file", target=str(target_path), bytes=total)
    return total


def copy_file(source: PathOrString, target: PathOrString, *options: CopyOption) -> int:
    """Copy a file or bundled resource to the file at ``target``.

    Returns the size of the target on disk after the copy. COPY_ATTRIBUTES
    is only honored for filesystem sources.
    """
    ref = classify_source(source)

    if isinstance(ref, BundledResource):
        check_options(options, STREAM_TARGET_OPTIONS)
        with open_source(ref) as src:
            copy_from_stream(src, target, *options)
        size = as_target_path(target).stat().st_size
        logger.debug("Copied bundled resource", source=ref.describe(), target=str(target), size=size)
        return size

    check_options(options, FILE_TARGET_OPTIONS)
    target_path = prepare_target(target)

    if target_path.exists() and os.path.samefile(ref.path, target_path):
        return target_path.stat().st_size

    with open(ref.path, "rb") as src, open_target(target_path, options) as dst:
        copy_stream(src, dst)
    if CopyOption.COPY_ATTRIBUTES in options:
        shutil.copystat(ref.path, target_path)

    size = target_path.stat().st_size
    logger.debug("Copied file", source=ref.describe(), target=str(target_path), size=size)
    return size
