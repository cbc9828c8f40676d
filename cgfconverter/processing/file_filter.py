"""Expansion of input file arguments into concrete file paths.

An input argument is either a path to an existing file or a filter such as
``Objects/*.cgf`` or ``model.*``. Wildcards are only honoured in the file name
component; when present, every subdirectory of the filter's directory is
searched as well.

Extension matching is deliberately loose: unless the requested extension
contains ``*``, a candidate is accepted when its extension has the same
*length* as the requested one. A pattern without an extension, such as ``*``
or ``ship*``, therefore only matches files without an extension.

File names are matched case-insensitively on every platform, so ``*.CGF``
selects ``ship.cgf``.
"""

import fnmatch
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Protocol

from cgfconverter.core.exceptions import FileFilterError
from cgfconverter.utils.logging import get_logger

logger = get_logger(__name__)

WILDCARD_CHARS = ("?", "*")


class DirectoryListing(Protocol):
    """Read-only view of a directory tree used by the expander."""

    def is_file(self, path: Path) -> bool:
        ...

    def is_dir(self, path: Path) -> bool:
        ...

    def list_files(self, directory: Path, recursive: bool) -> Iterable[Path]:
        ...


class FileSystemListing:
    """DirectoryListing backed by the real filesystem.

    Raises:
        FileFilterError: On any OS error other than a missing path
    """

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError as e:
            raise FileFilterError(str(path), str(e)) from e

    def is_dir(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError as e:
            raise FileFilterError(str(path), str(e)) from e

    def list_files(self, directory: Path, recursive: bool) -> Iterator[Path]:
        """Yield files below ``directory`` in walk order.

        Raises:
            FileFilterError: If a directory cannot be read
        """
        def _raise(error: OSError) -> None:
            raise FileFilterError(str(directory), str(error))

        for root, _, files in os.walk(directory, onerror=_raise):
            root_path = Path(root)
            for filename in files:
                yield root_path / filename
            if not recursive:
                break


def has_wildcard(text: str) -> bool:
    """Check whether ``text`` contains a glob wildcard."""
    return any(ch in text for ch in WILDCARD_CHARS)


def split_filter(spec: str) -> tuple[Path, str, str]:
    """Split a filter into absolute directory, file name pattern and extension.

    Args:
        spec: Path or filter as given on the command line

    Returns:
        Tuple of (directory, file name pattern, extension including the dot)
    """
    directory = os.path.dirname(spec)
    if not directory.strip():
        directory = "."

    file_name = os.path.basename(spec)
    extension = os.path.splitext(file_name)[1]

    return Path(os.path.abspath(directory)), file_name, extension


def extension_matches(candidate: Path, extension: str) -> bool:
    """Apply the extension post-filter to a single candidate."""
    if "*" in extension:
        return True
    return len(os.path.splitext(candidate.name)[1]) == len(extension)


def match_filter(
    candidates: Iterable[Path],
    file_pattern: str,
    extension: str,
) -> list[Path]:
    """Select candidates matching a file name pattern.

    Args:
        candidates: Paths to test, in listing order
        file_pattern: Glob pattern matched against each file name
        extension: Requested extension used for the length post-filter

    Returns:
        Matching paths in their original order
    """
    pattern = file_pattern.lower()
    return [
        path
        for path in candidates
        if fnmatch.fnmatchcase(path.name.lower(), pattern) and extension_matches(path, extension)
    ]


def expand_filter(spec: str, listing: Optional[DirectoryListing] = None) -> list[Path]:
    """Expand an input argument into absolute file paths.

    Args:
        spec: File path or filter
        listing: Directory listing to search, defaults to the filesystem

    Returns:
        Matching files, empty if the directory is missing or nothing matches

    Raises:
        FileFilterError: If the filesystem reports an error other than a
            missing path
    """
    listing = listing or FileSystemListing()

    if listing.is_file(Path(spec)):
        return [Path(os.path.abspath(spec))]

    directory, file_pattern, extension = split_filter(spec)
    if not listing.is_dir(directory):
        logger.debug("filter_directory_missing", spec=spec, directory=str(directory))
        return []

    recursive = has_wildcard(file_pattern)
    matches = match_filter(
        listing.list_files(directory, recursive),
        file_pattern,
        extension,
    )

    logger.debug(
        "filter_expanded",
        spec=spec,
        directory=str(directory),
        recursive=recursive,
        matches=len(matches),
    )
    return matches
