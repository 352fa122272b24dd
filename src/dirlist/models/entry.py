"""
Directory entry data models for dirlist.

This module defines the records produced by a directory listing. An entry is
either a file or a folder; only files carry a size, so the two kinds are
separate models joined by a discriminated union on ``kind``.
"""

from typing import Dict, Optional, Any, Union, Literal, Annotated
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryKind(Enum):
    """Kinds of directory entries."""
    FILE = "File"
    FOLDER = "Folder"


class BaseEntry(BaseModel):
    """
    Fields shared by every directory entry.

    Attributes:
        path: Absolute path of the entry
        name: Final path segment (empty when the name cannot be decoded)
        relevance: Relevance score, lower is more relevant
        modified: Modification time as whole seconds since the epoch
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    path: str = Field(..., min_length=1, description="Absolute path of the entry")
    name: str = Field("", description="Final path segment")
    relevance: int = Field(0, ge=0, description="Relevance score, lower is more relevant")
    modified: Optional[str] = Field(None, description="Modification time in seconds since epoch")

    @field_validator('modified')
    @classmethod
    def validate_modified(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the timestamp is a plain run of digits."""
        if v is not None and not v.isdigit():
            raise ValueError(f"Invalid modification timestamp: {v!r}")
        return v

    @property
    def entry_kind(self) -> EntryKind:
        return EntryKind(self.kind)

    def is_folder(self) -> bool:
        """Check if this entry is a folder."""
        return self.entry_kind is EntryKind.FOLDER

    def with_relevance(self, relevance: int) -> 'BaseEntry':
        """Return a copy of this entry carrying a new relevance score."""
        return self.model_copy(update={'relevance': relevance})

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the entry to its wire representation.

        Absent optional fields are omitted rather than emitted as null.
        """
        data = self.model_dump(exclude_none=True)
        data['object_type'] = data.pop('kind')
        return data


class FileEntry(BaseEntry):
    """A regular file (or anything that is not a directory)."""

    kind: Literal["File"] = "File"
    size: Optional[int] = Field(None, ge=0, description="File size in bytes")

    def get_size_human_readable(self) -> Optional[str]:
        """Get file size in human-readable format."""
        if self.size is None:
            return None
        size = float(self.size)
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size < 1024.0:
                return f"{size:.1f} {unit}"
            size /= 1024.0
        return f"{size:.1f} PB"

    def __str__(self) -> str:
        parts = [f"{self.name} (relevance: {self.relevance})", "File"]
        if self.size is not None:
            parts.append(f"Size: {self.get_size_human_readable()}")
        return " | ".join(parts)


class FolderEntry(BaseEntry):
    """A directory. Folders never carry a size."""

    kind: Literal["Folder"] = "Folder"

    def __str__(self) -> str:
        return f"{self.name}/ (relevance: {self.relevance}) | Folder"


Entry = Annotated[Union[FileEntry, FolderEntry], Field(discriminator='kind')]
