"""
Resolve the list of files to process, from glob patterns or from git.
"""

from __future__ import annotations

import fnmatch
import glob
import logging
import os
import subprocess
from typing import Iterable, List, Optional, Sequence

from license_headers import config
from license_headers.exceptions import GitStatusError

logger = logging.getLogger(__name__)


def is_ignored(path: str, ignore: Iterable[str]) -> bool:
    """Match a cwd-relative path; a leading "**/" also matches zero directories."""
    path = path.replace(os.sep, "/")
    for pattern in ignore:
        if fnmatch.fnmatch(path, pattern):
            return True
        if pattern.startswith("**/") and fnmatch.fnmatch(path, pattern[3:]):
            return True
    return False


def glob_files(
    patterns: Iterable[str],
    cwd: Optional[str] = None,
    ignore: Sequence[str] = config.IGNORE_PATTERNS,
) -> List[str]:
    """Expand ``patterns`` from ``cwd``; return sorted, unique absolute paths."""
    cwd = os.path.abspath(cwd or os.getcwd())
    filenames = set()
    for pattern in patterns:
        matches = glob.glob(os.path.join(cwd, pattern), recursive=True)
        logger.debug(f"Glob {pattern!r} matched {len(matches)} paths")
        for match in matches:
            path = os.path.normpath(match)
            if not os.path.isfile(path) or is_ignored(os.path.relpath(path, cwd), ignore):
                continue
            filenames.add(path)
    return sorted(filenames)


def _run_git(args: List[str], cwd: str, git: str) -> str:
    try:
        result = subprocess.run(
            [git, *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitStatusError(f"git executable not found: {git}") from e
    except subprocess.CalledProcessError as e:
        raise GitStatusError(
            f"`git {' '.join(args)}` failed: {e.stderr.strip()}"
        ) from e
    return result.stdout


def parse_status(output: str) -> List[str]:
    """
    Parse ``git status --porcelain -z`` output into repository-relative paths.

    Renamed and copied entries carry the original path as an extra NUL
    separated field; only the new path is kept.
    """
    paths = []
    fields = output.split("\0")
    i = 0
    while i < len(fields):
        entry = fields[i]
        i += 1
        if len(entry) < 4:
            continue
        status, path = entry[:2], entry[3:]
        if "R" in status or "C" in status:
            i += 1
        paths.append(path)
    return paths


def git_changed_files(cwd: Optional[str] = None, git: str = config.GIT_BINARY) -> List[str]:
    """Return the modified and untracked files of the working tree, as absolute paths."""
    cwd = os.path.abspath(cwd or os.getcwd())
    top_level = _run_git(["rev-parse", "--show-toplevel"], cwd, git).strip()
    status = _run_git(["status", "--porcelain", "-z", "--untracked-files=all"], cwd, git)
    paths = parse_status(status)
    logger.debug(f"git status reported {len(paths)} files under {top_level}")
    return [os.path.normpath(os.path.join(top_level, path)) for path in paths]


def resolve_files(globs: Optional[Sequence[str]], cwd: Optional[str] = None) -> List[str]:
    if globs:
        return glob_files(globs, cwd=cwd)
    return git_changed_files(cwd=cwd)
