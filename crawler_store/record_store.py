"""
File-backed record store

Records are YAML or JSON documents addressed by slash-delimited logical
names (``results/air_quality``). The store resolves names to files under a
storage root, discovers the extension on read and always writes ``.yml``.

The store keeps no state besides its layout: every call lists the directory
it needs. Readers may run concurrently. Concurrent writes to the same record
are last-writer-wins; callers that need more must serialize them.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional, Union

import yaml

from crawler_core.errors import (
    InvalidRecordNameError,
    StorageIOError,
    UnsupportedFormatError,
)
from crawler_core.layout import SEPARATOR, StorageLayout
from . import codecs
from .codecs import ALLOWED_EXTENSIONS, FILEMASK, WRITE_EXTENSION

logger = logging.getLogger(__name__)


def record_stem(name: str) -> str:
    """
    Get the record base name of a logical name

    A recognized record extension (``json``, ``yml``, ``yaml``) is removed;
    any other dot belongs to the name (``v1.2`` stays ``v1.2``).
    """
    if not name or name.endswith(SEPARATOR):
        return ""
    basename = PurePosixPath(name).name
    stem, dot, ext = basename.rpartition(".")
    if dot and stem and ext in ALLOWED_EXTENSIONS:
        return stem
    return basename


def _file_mode(path: Path) -> int:
    """Permissions for a record file: the existing file's, else 0666 minus the umask"""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class RecordStore:
    """Get, list and write structured records below a storage root"""

    def __init__(self, storage_root: Union[str, Path]):
        """
        Initialize the record store

        Args:
            storage_root: Directory all records live in. It does not need to
                exist yet; it is created on first write.
        """
        self.layout = StorageLayout(Path(storage_root))

    @property
    def storage_root(self) -> Path:
        return self.layout.storage_root

    # ============================================================================
    # READING OPERATIONS
    # ============================================================================

    def _list_files(self, directory: Path) -> List[str]:
        """File names in a directory matching the filemask, sorted. Missing directory lists as empty."""
        try:
            with os.scandir(directory) as entries:
                names = [
                    entry.name for entry in entries
                    if FILEMASK.search(entry.name) and entry.is_file()
                ]
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as e:
            logger.warning(f"Cannot list record directory {directory}: {e}")
            return []
        return sorted(names)

    def _candidates(self, name: str) -> List[Path]:
        """Files that could hold the record, in precedence order"""
        stem = record_stem(name)
        if not stem:
            return []

        directory = self.layout.resolve(name)
        present = set(self._list_files(directory))

        extensions = list(ALLOWED_EXTENSIONS)
        requested = PurePosixPath(name).suffix[1:]
        if requested in extensions and PurePosixPath(name).name != stem:
            extensions.remove(requested)
            extensions.insert(0, requested)

        return [directory / f"{stem}.{ext}" for ext in extensions if f"{stem}.{ext}" in present]

    def path_for(self, name: str) -> Optional[Path]:
        """Physical file ``get`` would read for a name, or None"""
        candidates = self._candidates(name)
        return candidates[0] if candidates else None

    def exists(self, name: str) -> bool:
        """Check if a record with the given name exists"""
        return self.path_for(name) is not None

    def get(self, name: str) -> Optional[Any]:
        """
        Get something from storage.

        Returns parsed YAML or JSON, depending on the type of the first found
        file matching the given name. When several files share the base name,
        ``.yml`` wins over ``.yaml``, which wins over ``.json``.

        Args:
            name: Logical record name, usually without extension

        Returns:
            Decoded contents, or None if the record does not exist or cannot
            be read
        """
        path = self.path_for(name)
        if path is None:
            return None

        try:
            contents = path.read_text(encoding="utf-8")
            return codecs.decode(path.name, contents)
        except UnsupportedFormatError as e:
            logger.warning(f"Skipping record {name}: {e}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading record {name} from {path}: {e}")
            return None
        except (yaml.YAMLError, ValueError) as e:
            logger.warning(f"Error decoding record {name} from {path}: {e}")
            return None

    def get_all(self, path: str) -> Dict[str, str]:
        """
        Get all records found inside a given path.

        Args:
            path: Logical directory, e.g. ``results`` or ``results/``

        Returns:
            Mapping of record base name to logical record name
        """
        if not path.endswith(SEPARATOR):
            path += SEPARATOR

        directory = self.layout.resolve(path)

        records: Dict[str, str] = {}
        for filename in self._list_files(directory):
            key = FILEMASK.sub("", filename)
            if not key:
                continue
            records[key] = path + key

        return records

    # ============================================================================
    # WRITING OPERATIONS
    # ============================================================================

    def write(self, name: str, contents: Any) -> Path:
        """
        Write a value as YAML into a record file.

        The file is always ``<base name>.yml``, whatever extension ``name``
        carries. The previous file, if any, is replaced atomically.

        Args:
            name: Logical record name
            contents: Structured value (mappings, sequences, scalars)

        Returns:
            Path of the written file

        Raises:
            InvalidRecordNameError: if the name has no record segment
            StorageIOError: if the directory or file cannot be written
        """
        stem = record_stem(name)
        if not stem:
            raise InvalidRecordNameError(name)

        directory = self.layout.resolve(name)
        file_path = directory / f"{stem}.{WRITE_EXTENSION}"

        text = codecs.encode(contents)

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create record directory {directory}: {e}")
            raise StorageIOError(directory, e) from e

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory,
                prefix=f".{stem}.", suffix=".tmp", delete=False,
            ) as f:
                tmp_path = f.name
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _file_mode(file_path))
            os.replace(tmp_path, file_path)
        except OSError as e:
            logger.error(f"Error writing record {name} to {file_path}: {e}")
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageIOError(file_path, e) from e

        logger.debug(f"Wrote record {name} to {file_path}")
        return file_path

