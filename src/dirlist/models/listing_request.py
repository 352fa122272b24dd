"""
Listing request data models for dirlist.

This module defines the validated inputs of a directory listing: the directory
to list, the optional search query, the folder-only flag and pagination.
"""

import os
from typing import Dict, List, Optional, Any, TypeVar
from pydantic import BaseModel, Field, field_validator


T = TypeVar('T')


class PaginationOptions(BaseModel):
    """
    Window applied to a ranked listing.

    Attributes:
        limit: Maximum number of entries to return (no limit when None)
        offset: Number of leading entries to skip
    """

    limit: Optional[int] = Field(None, gt=0, description="Maximum number of entries to return")
    offset: int = Field(0, ge=0, description="Number of leading entries to skip")

    def apply(self, items: List[T]) -> List[T]:
        """Slice a ranked sequence according to these options."""
        if self.limit is None:
            return items[self.offset:]
        return items[self.offset:self.offset + self.limit]


class ListingRequest(BaseModel):
    """
    Represents a request to list and rank one directory.

    Attributes:
        path: Directory to list, normalized to an absolute path
        query: Optional search query; an empty query means no ranking
        folders_only: Whether to return folders only
        pagination: Optional window over the ranked result
    """

    path: str = Field(..., min_length=1, description="Directory to list")
    query: Optional[str] = Field(None, description="Optional search query")
    folders_only: bool = Field(False, description="Return folders only")
    pagination: Optional[PaginationOptions] = Field(None, description="Window over the ranked result")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Expand ``~`` and make the directory path absolute."""
        if not v.strip():
            raise ValueError("Directory path cannot be empty")
        # abspath rather than resolve: symlinked directories keep their own path
        return os.path.abspath(os.path.expanduser(v))

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty query as no query."""
        return v if v else None

    def has_query(self) -> bool:
        """Check if this request ranks entries against a query."""
        return self.query is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the request to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListingRequest':
        """Create a ListingRequest instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Path: {self.path}"]
        if self.has_query():
            parts.append(f"Query: '{self.query}'")
        if self.folders_only:
            parts.append("Folders only")
        if self.pagination:
            parts.append(f"Offset: {self.pagination.offset}")
            if self.pagination.limit is not None:
                parts.append(f"Limit: {self.pagination.limit}")
        return " | ".join(parts)
