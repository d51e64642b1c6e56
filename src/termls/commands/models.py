"""Pydantic models shared by the listing pipeline."""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

RESET_ESCAPE = '\x1b[0m'


class Options(BaseModel):
    """Flags for a single invocation."""
    model_config = ConfigDict(frozen=True)

    all: bool = Field(False, description="Include entries starting with '.'")
    long: bool = Field(False, description="Long listing")
    human: bool = Field(False, description="Sizes with human-readable units")
    one_per_line: bool = Field(False, description="One entry per line")
    treat_dir_as_file: bool = Field(False, description="List directories like files")
    color: bool = Field(True, description="Colorize names")
    sort_reverse: bool = Field(False, description="Reverse the final ordering")
    sort_by_time: bool = Field(False, description="Sort by modification time")
    sort_by_size: bool = Field(False, description="Sort by size")
    show_help: bool = Field(False, description="Display usage information")
    dirs_first: bool = Field(False, description="List directories before files")


class ModeDescriptor(BaseModel):
    """Raw mode string (type markers followed by rwx triples) of one entry."""
    model_config = ConfigDict(frozen=True)

    mode_string: str
    is_symlink: bool = False


class FileMetadata(BaseModel):
    """Metadata of one filesystem entry as read from the OS."""
    model_config = ConfigDict(frozen=True)

    name: str
    mode: int
    nlink: int = Field(..., ge=0)
    uid: int
    gid: int
    size: int = Field(..., ge=0)
    mtime_ns: int
    link_target: Optional[str] = None
    link_orphan: bool = False


class Listing(BaseModel):
    """Printable record for one filesystem entry."""
    model_config = ConfigDict(frozen=True)

    permissions: str
    hard_link_count: str
    owner: str
    group: str
    size: str
    mod_time_nanos: int
    month: str
    day: str
    time_or_year: str
    name: str
    link_target: Optional[str] = None
    link_orphan: bool = False
    is_socket: bool = False
    is_pipe: bool = False
    is_block_device: bool = False
    is_char_device: bool = False

    @field_validator('permissions')
    @classmethod
    def _check_permissions(cls, value: str) -> str:
        if len(value) != 10:
            raise ValueError(f"permissions must be 10 characters, got {value!r}")
        return value

    @field_validator('hard_link_count')
    @classmethod
    def _check_hard_link_count(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError(f"hard link count must be a non-negative integer, got {value!r}")
        return value

    @model_validator(mode='after')
    def _check_type_flags(self):
        flags = (self.is_socket, self.is_pipe, self.is_block_device, self.is_char_device)
        if sum(flags) > 1:
            raise ValueError("at most one of socket/pipe/block/character may be set")
        if self.link_target is not None and not self.is_symlink:
            raise ValueError("link_target is only allowed on symlinks")
        return self

    @property
    def is_directory(self) -> bool:
        return self.permissions[0] == 'd'

    @property
    def is_symlink(self) -> bool:
        return self.permissions[0] == 'l'

    @property
    def hard_links(self) -> int:
        return int(self.hard_link_count)


class ColorCategory(str, Enum):
    """Closed set of semantic roles that can carry a color."""
    DIRECTORY = 'directory'
    SYMLINK = 'symlink'
    SOCKET = 'socket'
    PIPE = 'pipe'
    EXECUTABLE = 'executable'
    BLOCK = 'block'
    CHARACTER = 'character'
    EXECUTABLE_SUID = 'executable_suid'
    EXECUTABLE_SGID = 'executable_sgid'
    DIRECTORY_OTHER_WRITABLE_STICKY = 'directory_o+w_sticky'
    DIRECTORY_OTHER_WRITABLE = 'directory_o+w'
    DIRECTORY_STICKY = 'directory_sticky'
    MULTI_HARDLINK = 'multi_hardlink'
    LINK_ORPHAN = 'link_orphan'
    LINK_ORPHAN_TARGET = 'link_orphan_target'
    END = 'end'


ColorKey = Union[ColorCategory, str]


class ColorTable(BaseModel):
    """Escape sequences by color category, plus extension globs and pass-through keys."""
    model_config = ConfigDict(frozen=True)

    categories: Dict[ColorCategory, str] = Field(default_factory=dict, validate_default=True)
    extensions: Dict[str, str] = Field(default_factory=dict)

    @field_validator('categories')
    @classmethod
    def _ensure_end(cls, value: Dict[ColorCategory, str]) -> Dict[ColorCategory, str]:
        if ColorCategory.END not in value:
            value = {**value, ColorCategory.END: RESET_ESCAPE}
        return value

    def lookup(self, key: ColorKey) -> str:
        """Escape sequence for a category or extension key ('' when undefined)."""
        if isinstance(key, ColorCategory):
            return self.categories.get(key, '')
        return self.extensions.get(key, '')

    def __contains__(self, key: ColorKey) -> bool:
        if isinstance(key, ColorCategory):
            return key in self.categories
        return key in self.extensions

    @property
    def end(self) -> str:
        return self.categories[ColorCategory.END]


class ColumnLayout(BaseModel):
    """Row count and column widths chosen for grid output."""
    model_config = ConfigDict(frozen=True)

    rows: int
    column_widths: List[int] = Field(default_factory=list)

    @property
    def columns(self) -> int:
        return len(self.column_widths)

    def column_of(self, index: int) -> int:
        """Column holding the entry at a given position (column-major)."""
        return index // self.rows
