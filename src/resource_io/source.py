"""Classification and opening of source references.

A string starting with ``classpath:`` names a bundled resource; everything
else (any other string, or any path object) is a filesystem path.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from .constants import CLASSPATH_PREFIX
from .resources import open_resource
from .types import BundledResource, FilesystemPath

if TYPE_CHECKING:
    from .types import SourceRef

PathOrString = str | os.PathLike[str]


def classify_source(source: PathOrString) -> SourceRef:
    """Interpret a source argument as a filesystem path or a bundled resource.

    Only ``str`` values are checked for the ``classpath:`` prefix. After the
    prefix, exactly one leading ``/`` is dropped, so ``classpath:a.txt`` and
    ``classpath:/a.txt`` name the same resource.
    """
    if isinstance(source, str) and source.startswith(CLASSPATH_PREFIX):
        name = source[len(CLASSPATH_PREFIX) :]
        if name.startswith("/"):
            name = name[1:]
        return BundledResource(name=name)
    return FilesystemPath(path=Path(source))


def open_source(source: PathOrString | SourceRef) -> BinaryIO:
    """Open the resolved source for binary reading. The caller closes it."""
    ref = source if isinstance(source, (FilesystemPath, BundledResource)) else classify_source(source)
    if isinstance(ref, BundledResource):
        return open_resource(ref.name)
    return open(ref.path, "rb")


def as_target_path(target: PathOrString) -> Path:
    """Convert a copy target to a filesystem path.

    Bundled resources are read-only, so a ``classpath:`` string is not
    special here; it is taken literally as a path.
    """
    return Path(target)


def prepare_target(target: PathOrString) -> Path:
    """Resolve a target path and create its parent directory chain."""
    target_path = as_target_path(target)
    target_path.parent.mkdir(parents=True, exist_ok=True)
    return target_path
