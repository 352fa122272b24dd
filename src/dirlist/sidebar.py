"""Well-known folder locations for the browser sidebar."""

import os
from typing import Iterable, List, Optional
import logging

from .models.sidebar import SidebarLocation


logger = logging.getLogger(__name__)

STANDARD_LOCATIONS = [
    ("Desktop", "Desktop"),
    ("Documents", "Documents"),
    ("Downloads", "Downloads"),
]

MEDIA_LOCATIONS = [
    ("Music", "Music"),
    ("Pictures", "Pictures"),
    ("Movies", "Movies"),
]

# Only shown when present on disk
OPTIONAL_LOCATIONS = [
    ("Dropbox", "Dropbox"),
    ("iCloud Drive", os.path.join("Library", "Mobile Documents", "com~apple~CloudDocs")),
]


def get_home_directory(home: Optional[str] = None) -> str:
    """Get the home directory: the override, then $HOME, then ``/``."""
    return home or os.environ.get("HOME") or "/"


def get_sidebar_items(
    home: Optional[str] = None,
    extra: Optional[Iterable[SidebarLocation]] = None,
    include_optional: bool = True
) -> List[SidebarLocation]:
    """
    Build the list of sidebar locations.

    Args:
        home: Home directory override
        extra: Additional locations appended at the end
        include_optional: Whether to probe for Dropbox and iCloud Drive

    Returns:
        Sidebar locations in display order
    """
    home_dir = get_home_directory(home)

    locations = [SidebarLocation(name="Home", path=home_dir)]
    locations.extend(
        SidebarLocation(name=name, path=os.path.join(home_dir, relative))
        for name, relative in STANDARD_LOCATIONS
    )
    locations.append(SidebarLocation(name="Applications", path="/Applications"))
    locations.extend(
        SidebarLocation(name=name, path=os.path.join(home_dir, relative))
        for name, relative in MEDIA_LOCATIONS
    )

    if include_optional:
        for name, relative in OPTIONAL_LOCATIONS:
            candidate = os.path.join(home_dir, relative)
            if os.path.exists(candidate):
                locations.append(SidebarLocation(name=name, path=candidate))
            else:
                logger.debug(f"Optional sidebar location not found: {candidate}")

    if extra:
        locations.extend(extra)

    return locations
