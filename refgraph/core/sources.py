"""Source listing: glob expansion and ignore filtering."""

from __future__ import annotations

import glob
import os
from typing import List, Optional, Pattern, Sequence


def list_sources(globs: Sequence[str], ignore: Optional[Pattern[str]] = None) -> List[str]:
    """Expand each glob (``**`` allowed, sorted), keep regular files, drop ignore-pattern matches."""
    sources: List[str] = []
    for pattern in globs:
        for path in sorted(glob.glob(pattern, recursive=True)):
            if not os.path.isfile(path):
                continue
            if ignore is not None and ignore.search(path):
                continue
            sources.append(path)
    return sources
