"""Shared fixtures for resource I/O tests."""

from __future__ import annotations

import importlib
import sys
from typing import TYPE_CHECKING

import pytest

from resource_io import config

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

BUNDLE_PACKAGE = "rio_test_bundle"
BROKEN_PACKAGE = "rio_broken_bundle"
UNICODE_RESOURCE = "UTF-8-test.txt"
SAMPLE_RESOURCE = "data/sample.bin"
EMPTY_RESOURCE = "data/empty.bin"

UNICODE_RANGES = ((0x0000, 0x007F), (0x0080, 0x07FF), (0x0800, 0xFFFF), (0x10000, 0x10FFFF))


def build_unicode_text() -> str:
    """Every Unicode scalar value, in four blocks with a line break every 80 code points.

    Surrogates (U+D800 to U+DFFF) are not encodable on their own and are left out.
    """
    parts: list[str] = []
    for start, end in UNICODE_RANGES:
        parts.append(f"Characters U+{start:04X} to U+{end:04X}\n")
        for code_point in range(start, end + 1):
            if 0xD800 <= code_point <= 0xDFFF:
                continue
            if (code_point + 1) % 80 == 0:
                parts.append("\n")
            parts.append(chr(code_point))
    return "".join(parts)


def sample_bytes(size: int) -> bytes:
    """Deterministic byte pattern of the given size."""
    return bytes((i * 31 + i // 251) % 256 for i in range(size))


@pytest.fixture(scope="session")
def unicode_text() -> str:
    return build_unicode_text()


@pytest.fixture(scope="session")
def bundle_package(tmp_path_factory: pytest.TempPathFactory, unicode_text: str) -> Iterator[str]:
    """Put an importable package holding test resources on sys.path."""
    root = tmp_path_factory.mktemp("bundle")
    pkg_dir = root / BUNDLE_PACKAGE
    (pkg_dir / "data").mkdir(parents=True)
    (pkg_dir / "__init__.py").write_text("", encoding="utf-8")
    (pkg_dir / UNICODE_RESOURCE).write_bytes(unicode_text.encode("utf-8"))
    (pkg_dir / SAMPLE_RESOURCE).write_bytes(sample_bytes(20_000))
    (pkg_dir / EMPTY_RESOURCE).write_bytes(b"")

    broken_dir = root / BROKEN_PACKAGE
    broken_dir.mkdir()
    (broken_dir / "__init__.py").write_text('raise ImportError("optional dependency missing")\n', encoding="utf-8")
    (broken_dir / "file.txt").write_text("unreachable", encoding="utf-8")

    sys.path.insert(0, str(root))
    importlib.invalidate_caches()
    yield BUNDLE_PACKAGE
    sys.path.remove(str(root))
    sys.modules.pop(BUNDLE_PACKAGE, None)
    sys.modules.pop(BROKEN_PACKAGE, None)


@pytest.fixture()
def bundle_search(bundle_package: str, monkeypatch: pytest.MonkeyPatch) -> str:
    """Make unqualified resource names resolve against the test bundle."""
    monkeypatch.setattr(config, "RESOURCE_PACKAGES", (bundle_package,))
    return bundle_package


@pytest.fixture()
def io_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
