"""
Configuration data models for dirlist.

This module defines the data structures for managing application configuration:
listing defaults, sidebar locations and logging.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from .sidebar import SidebarLocation


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ListingConfig(BaseModel):
    """
    Defaults applied to directory listings.

    Attributes:
        folders_only: List folders only unless overridden per call
        max_results: Default page size for listings (no limit when None)
    """

    folders_only: bool = Field(False, description="List folders only")
    max_results: Optional[int] = Field(None, gt=0, description="Default page size for listings")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class SidebarConfig(BaseModel):
    """
    Configuration for sidebar locations.

    Attributes:
        home: Home directory override (defaults to $HOME)
        include_optional: Whether to probe for Dropbox and iCloud Drive
        extra: Additional locations appended after the built-in ones
    """

    home: Optional[str] = Field(None, description="Home directory override")
    include_optional: bool = Field(True, description="Probe for optional cloud folders")
    extra: List[SidebarLocation] = Field(default_factory=list, description="Additional sidebar locations")

    @field_validator('home')
    @classmethod
    def validate_home(cls, v: Optional[str]) -> Optional[str]:
        """Expand user path for the home override."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Home directory cannot be empty")
        return str(Path(v).expanduser())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = self.model_dump()
        data['extra'] = [location.to_dict() for location in self.extra]
        return data


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: LogLevel = Field(LogLevel.WARNING, description="Minimum level to log")

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, v) -> LogLevel:
        """Validate and convert level to enum."""
        if isinstance(v, str):
            try:
                return LogLevel(v.upper())
            except ValueError:
                raise ValueError(f"Invalid log level: {v}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {'level': self.level.value}


class BrowserConfig(BaseModel):
    """
    Main configuration for dirlist.

    Attributes:
        listing: Listing defaults
        sidebar: Sidebar location settings
        logging: Logging settings
    """

    listing: ListingConfig = Field(default_factory=ListingConfig, description="Listing defaults")
    sidebar: SidebarConfig = Field(default_factory=SidebarConfig, description="Sidebar settings")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for suspicious but valid settings.

        Returns:
            List of warning messages (empty if nothing looks off)
        """
        warnings = []

        if self.sidebar.home and not Path(self.sidebar.home).is_dir():
            warnings.append(f"Sidebar home directory does not exist: {self.sidebar.home}")

        for location in self.sidebar.extra:
            if not location.exists():
                warnings.append(f"Sidebar location '{location.name}' does not exist: {location.path}")

        names = [location.name for location in self.sidebar.extra]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            warnings.append(f"Duplicate sidebar location names: {', '.join(duplicates)}")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'listing': self.listing.to_dict(),
            'sidebar': self.sidebar.to_dict(),
            'logging': self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BrowserConfig':
        """Create configuration from dictionary representation."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Folders only: {self.listing.folders_only}"]
        if self.listing.max_results is not None:
            parts.append(f"Max results: {self.listing.max_results}")
        parts.append(f"Extra sidebar locations: {len(self.sidebar.extra)}")
        parts.append(f"Log level: {self.logging.level.value}")
        return " | ".join(parts)
