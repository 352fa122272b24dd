"""
Sidebar location model for dirlist.
"""

from typing import Dict, Any
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SidebarLocation(BaseModel):
    """A well-known folder shown in the browser sidebar."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name")
    path: str = Field(..., min_length=1, description="Folder path")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Expand a leading ``~`` in configured paths."""
        return str(Path(v).expanduser())

    def exists(self) -> bool:
        """Check if the location currently exists as a directory."""
        return Path(self.path).is_dir()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
