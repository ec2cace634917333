"""
Read, rewrite and write back individual files.
"""

from __future__ import annotations

import enum
import logging
import os
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence

from license_headers.headers import LICENSE_HEADERS, LicenseHeader, find_license_header
from license_headers.rewriter import Mode, rewrite

logger = logging.getLogger(__name__)


class FileStatus(enum.Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    UPDATED = "updated"
    ERROR = "error"
    UNTOUCHED = "untouched"


class FileReport(NamedTuple):
    path: str
    relative_path: str
    status: FileStatus

    @property
    def label(self) -> str:
        if self.status is FileStatus.ADDED:
            return f"{self.relative_path} - ADDED"
        if self.status is FileStatus.UPDATED:
            return f"{self.relative_path} - UPDATED"
        return self.relative_path


def process_file(
    filename: str,
    add: bool = True,
    cwd: Optional[str] = None,
    headers: Sequence[LicenseHeader] = LICENSE_HEADERS,
) -> FileReport:
    """
    Read ``filename`` and write its fixed license header back to it.

    Read and write failures are reported as ``FileStatus.ERROR`` and never
    raised, so one bad file does not stop a batch.
    """
    relative = os.path.relpath(filename, cwd or os.getcwd())

    def report(status: FileStatus) -> FileReport:
        return FileReport(filename, relative, status)

    try:
        with open(filename, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeError) as e:
        # Failed to load the file (maybe deleted), skip it.
        logger.warning(f"Skipping {relative}: {e}")
        return report(FileStatus.ERROR)

    header = find_license_header(filename, headers)
    if header is None:
        logger.debug(f"{relative}: no license header for this file type")
        return report(FileStatus.UNTOUCHED)

    mode, new_content = rewrite(content, header, add=add)
    logger.debug(f"{relative}: {mode.value}")
    if mode is Mode.UNCHANGED:
        return report(FileStatus.UNCHANGED)

    try:
        with open(filename, "w", encoding="utf-8", newline="") as f:
            f.write(new_content)
    except OSError as e:
        logger.warning(f"Failed to write {relative}: {e}")
        return report(FileStatus.ERROR)

    if mode is Mode.ADDED:
        return report(FileStatus.ADDED)
    return report(FileStatus.UPDATED)


def process_files(
    filenames: Iterable[str],
    add: bool = True,
    cwd: Optional[str] = None,
    headers: Sequence[LicenseHeader] = LICENSE_HEADERS,
) -> Iterator[FileReport]:
    for filename in filenames:
        yield process_file(filename, add=add, cwd=cwd, headers=headers)
