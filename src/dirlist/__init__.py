"""
dirlist - Core Package

Directory listing backend for a desktop file browser: lists one directory
level and ranks the entries against an optional fuzzy search query.
"""

from .listing import list_directory, list_request
from .sidebar import get_sidebar_items
from .tools.fs_lister import ListingError, RootUnavailableError

__version__ = "0.1.0"

__all__ = [
    'list_directory',
    'list_request',
    'get_sidebar_items',
    'ListingError',
    'RootUnavailableError'
]
