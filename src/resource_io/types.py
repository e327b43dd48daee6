"""Resource I/O domain types."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .constants import CLASSPATH_PREFIX


class CopyOption(Enum):
    REPLACE_EXISTING = "replace_existing"
    COPY_ATTRIBUTES = "copy_attributes"


class FilesystemPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    path: Path

    def describe(self) -> str:
        return str(self.path)


class BundledResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["resource"] = "resource"
    name: str

    def describe(self) -> str:
        return f"{CLASSPATH_PREFIX}{self.name}"


SourceRef = FilesystemPath | BundledResource
