"""Bundled resource lookup backed by importlib.resources.

A bundled resource is a file shipped inside an importable package. Names
use ``/`` separators. A name whose first segment is a package, such as
``mypkg/data/table.bin``, is looked up inside that package. Any name is also
tried against each package listed in ``RESOURCE_IO_PACKAGES``, in order, so
unqualified names like ``table.bin`` resolve too.

Lookup imports the anchor package, so its top-level code runs. A package
that cannot be imported holds no resources. Names with empty, ``.`` or
``..`` segments never match, so a lookup cannot leave its package.
"""

from __future__ import annotations

from importlib import resources
from typing import TYPE_CHECKING, BinaryIO

from . import config
from .errors import ResourceNotFoundError
from .logger import logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from importlib.resources.abc import Traversable


def _package_root(package: str) -> Traversable | None:
    try:
        return resources.files(package)
    except ImportError:
        return None
    except TypeError:
        # plain modules are not resource anchors on older interpreters
        return None


def _candidates(name: str, packages: Sequence[str]) -> Iterator[Traversable]:
    parts = name.split("/")
    if any(part in ("", ".", "..") for part in parts):
        return

    if len(parts) > 1 and parts[0].isidentifier():
        root = _package_root(parts[0])
        if root is not None:
            yield root.joinpath(*parts[1:])

    for package in packages:
        root = _package_root(package)
        if root is not None:
            yield root.joinpath(*parts)


def find_resource(name: str, packages: Sequence[str] | None = None) -> Traversable:
    """Return the first bundled file matching ``name``.

    ``packages`` overrides the configured search list.
    Raises ResourceNotFoundError when no package holds a file by that name.
    """
    search = config.RESOURCE_PACKAGES if packages is None else packages
    for candidate in _candidates(name, search):
        if candidate.is_file():
            logger.debug("Resolved bundled resource", name=name, location=str(candidate))
            return candidate
    raise ResourceNotFoundError(name)


def open_resource(name: str, packages: Sequence[str] | None = None) -> BinaryIO:
    """Open a bundled resource for binary reading. The caller closes it."""
    return find_resource(name, packages).open("rb")
