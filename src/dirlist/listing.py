"""
Directory listing pipeline for dirlist.

Lists one directory level, scores every child against an optional query and
returns the ranked entries. This is the entry point used by callers such as
the command line interface.
"""

from typing import List, Optional
import logging

from .models.entry import Entry
from .models.listing_request import ListingRequest, PaginationOptions
from .tools.assembler import assemble_results
from .tools.fs_lister import DirectoryEnumerator, FileSystem
from .tools.relevance import score_relevance


logger = logging.getLogger(__name__)


def list_request(request: ListingRequest, filesystem: Optional[FileSystem] = None) -> List[Entry]:
    """
    Run a validated listing request.

    Args:
        request: The listing request
        filesystem: Filesystem to list (defaults to the local disk)

    Returns:
        Ranked entries

    Raises:
        RootUnavailableError: If the requested directory cannot be listed
    """
    enumerator = DirectoryEnumerator(filesystem)
    entries = enumerator.enumerate(request.path, include_files=not request.folders_only)

    scores = [score_relevance(entry.name, request.query) for entry in entries]
    results = assemble_results(entries, scores, request.query)

    if request.pagination:
        results = request.pagination.apply(results)

    logger.debug(f"{request} -> {len(results)} entries")
    return results


def list_directory(
    path: str,
    query: Optional[str] = None,
    folders_only: bool = False,
    pagination: Optional[PaginationOptions] = None,
    filesystem: Optional[FileSystem] = None
) -> List[Entry]:
    """
    List a directory, ranked against an optional search query.

    Without a query every child is returned with relevance 0 in filesystem
    order. With a query, children that match no tier are left out and the
    rest are ordered from most to least relevant.

    Args:
        path: Directory to list
        query: Optional search query
        folders_only: Return folders only
        pagination: Optional window over the ranked result
        filesystem: Filesystem to list (defaults to the local disk)

    Returns:
        Ranked entries

    Raises:
        RootUnavailableError: If the directory is missing, is not a directory,
            or cannot be read
    """
    request = ListingRequest(
        path=path,
        query=query,
        folders_only=folders_only,
        pagination=pagination
    )
    return list_request(request, filesystem)
