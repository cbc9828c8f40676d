"""Input file resolution for cgfconverter."""

from cgfconverter.processing.file_filter import (
    DirectoryListing,
    FileSystemListing,
    expand_filter,
    match_filter,
)

__all__ = [
    "DirectoryListing",
    "FileSystemListing",
    "expand_filter",
    "match_filter",
]
