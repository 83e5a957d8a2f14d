"""
File layout management for the record store

Records live in a single storage root. Logical names use ``/`` as the
separator; everything before the last separator is a sub-path of the root,
the last segment names the record file.

Structure:
storage_root/
├── results/
│   ├── {query_slug}.yml
│   └── ...
├── collected/
└── trash/
"""

import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

from .errors import PathTraversalError

SEPARATOR = "/"


@dataclass
class StorageLayout:
    """
    Maps logical record names to physical directories under ``storage_root``.

    Holds no state besides the root, so one layout can be shared freely.
    """
    storage_root: Path

    def __post_init__(self):
        self.storage_root = Path(self.storage_root)

    def resolve(self, name: Optional[str] = None) -> Path:
        """
        Get the directory a logical name points into

        - no name, or a name without separator: the storage root
        - ``a/b/c``: ``root/a/b`` (the last segment is the record)
        - ``a/b/``: ``root/a/b`` (the whole name is a directory)

        A single leading separator is ignored, so ``/a/b`` equals ``a/b``.

        Raises:
            PathTraversalError: if the name contains ``..`` segments
        """
        root = self.storage_root

        if not name or SEPARATOR not in name:
            return root

        relative = name[1:] if name.startswith(SEPARATOR) else name
        if any(segment == ".." for segment in relative.split(SEPARATOR)):
            raise PathTraversalError(name)

        if relative.endswith(SEPARATOR):
            directory = root / relative
        else:
            directory = root / PurePosixPath(relative).parent

        # Still reject anything that ends up outside the root
        root_abs = os.path.abspath(root)
        dir_abs = os.path.abspath(directory)
        if os.path.commonpath([root_abs, dir_abs]) != root_abs:
            raise PathTraversalError(name)

        return directory

    def ensure_dirs(self) -> None:
        """Ensure the storage root exists"""
        self.storage_root.mkdir(parents=True, exist_ok=True)
