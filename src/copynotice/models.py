# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

ILLEGAL_PATH_CHARACTERS = '<>:"|?*'
ILLEGAL_EXTENSION_CHARACTERS = '<>:"/\\|?*.'
MAX_EXTENSION_LENGTH = 15
MAX_COMMENT_PREFIX_LENGTH = 15
DEFAULT_COMMENT_PREFIX = b"// "


@dataclass(frozen=True)
class DirectoryMapping:
    source_path: str
    destination_path: str


@dataclass
class RunCounters:
    files_created: int = 0
    per_target: Dict[str, int] = field(default_factory=dict)

    def record(self, target: str, created: int) -> None:
        self.per_target[target] = self.per_target.get(target, 0) + created
        self.files_created += created


def _has_trailing_separator(path: str) -> bool:
    return path.endswith("/") or path.endswith("\\")


class DirectoryArgument(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: str = Field(description="Directory to search; empty means the current directory")
    dst: str = Field(description="Directory that receives the output files")

    @field_validator("src")
    @classmethod
    def _check_src(cls, value: str) -> str:
        if _has_trailing_separator(value):
            raise ValueError("subargument 1 (src): do not use a trailing slash")
        if any(ch in ILLEGAL_PATH_CHARACTERS for ch in value):
            raise ValueError(f'subargument "{value}" contains an illegal character')
        return value

    @field_validator("dst")
    @classmethod
    def _check_dst(cls, value: str) -> str:
        if not value:
            raise ValueError("subargument 2 (dst): argument cannot be empty")
        if _has_trailing_separator(value):
            raise ValueError("subargument 2 (dst): do not use a trailing slash")
        if any(ch in ILLEGAL_PATH_CHARACTERS for ch in value):
            raise ValueError(f'subargument "{value}" contains an illegal character')
        return value

    def to_mapping(self) -> DirectoryMapping:
        return DirectoryMapping(source_path=self.src, destination_path=self.dst)


class RunOptions(BaseModel):
    """Validated configuration for one run.

    ``notice`` and ``comment_prefix`` are already encoded; the rewriter only
    ever deals in bytes.
    """

    model_config = ConfigDict(frozen=True)

    directories: List[DirectoryArgument] = Field(default_factory=list)
    extensions: List[str] = Field(default_factory=list)
    notice: bytes = b""
    comment_prefix: bytes = DEFAULT_COMMENT_PREFIX
    recurse: bool = False
    verbose: bool = False
    replace: bool = False

    @field_validator("extensions")
    @classmethod
    def _check_extensions(cls, value: List[str]) -> List[str]:
        for extension in value:
            if not extension:
                raise ValueError("extension cannot be blank")
            if len(extension) > MAX_EXTENSION_LENGTH:
                raise ValueError(f'extension "{extension}" too long')
            if any(ch in ILLEGAL_EXTENSION_CHARACTERS for ch in extension):
                raise ValueError(f'extension "{extension}" contains an illegal character')
        return value

    @field_validator("comment_prefix")
    @classmethod
    def _check_comment_prefix(cls, value: bytes) -> bytes:
        if not value:
            raise ValueError("comment prefix must not be blank")
        if len(value) > MAX_COMMENT_PREFIX_LENGTH:
            raise ValueError(f"comment prefix cannot exceed {MAX_COMMENT_PREFIX_LENGTH} characters")
        return value

    def mappings(self) -> List[DirectoryMapping]:
        return [directory.to_mapping() for directory in self.directories]
