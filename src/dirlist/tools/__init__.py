"""
Listing tools for dirlist.

This module contains the pieces of the listing pipeline: edit distance,
relevance scoring, single-level enumeration and result assembly.
"""

from .edit_distance import levenshtein
from .relevance import score_relevance, fuzzy_threshold
from .fs_lister import (
    DirectoryEnumerator,
    FileSystem,
    ListingError,
    LocalFileSystem,
    RootUnavailableError
)
from .assembler import assemble_results

__all__ = [
    'levenshtein',
    'score_relevance',
    'fuzzy_threshold',
    'DirectoryEnumerator',
    'FileSystem',
    'ListingError',
    'LocalFileSystem',
    'RootUnavailableError',
    'assemble_results'
]
