"""
Data models for dirlist.

This module contains all the core data structures used throughout the system.
"""

from .entry import Entry, EntryKind, FileEntry, FolderEntry
from .listing_request import ListingRequest, PaginationOptions
from .sidebar import SidebarLocation
from .config import BrowserConfig

__all__ = [
    'Entry',
    'EntryKind',
    'FileEntry',
    'FolderEntry',
    'ListingRequest',
    'PaginationOptions',
    'SidebarLocation',
    'BrowserConfig'
]
