"""
Add, replace or keep the license header of a single file's content.
"""

from __future__ import annotations

import enum
import re
from typing import NamedTuple, Sequence

from license_headers.headers import LICENSE_HEADER_PATTERNS, LicenseHeader

SHEBANG_PATTERN = re.compile(r"^(?P<shebang>#![^\n]+)\n")


class Mode(enum.Enum):
    UNCHANGED = "Unchanged"
    ADDED = "Added"
    UPDATED = "Updated"


class RewriteResult(NamedTuple):
    mode: Mode
    new_content: str


def split_shebang(content: str) -> tuple[str, str]:
    """Split ``content`` into its shebang line (or "") and the rest."""
    match = SHEBANG_PATTERN.match(content)
    if match is None:
        return "", content
    return match.group("shebang"), content[match.end():]


def rewrite(
    content: str,
    header: LicenseHeader,
    add: bool = True,
    patterns: Sequence[re.Pattern[str]] = LICENSE_HEADER_PATTERNS,
) -> RewriteResult:
    """
    Add or replace the license header at the top of ``content``.

    The first detection pattern that matches decides the outcome. A header
    with a different year is kept as is; a header with the target year is
    replaced by the canonical text whatever its style. When no header is
    found the canonical one is prepended, unless ``add`` is False.

    Args:
        content: Full file content
        header: Canonical header for the file's family
        add: Whether to insert a header into files that have none

    Returns:
        RewriteResult with the mode and the new content, shebang included
    """
    shebang, content = split_shebang(content)

    def post_process(text: str) -> str:
        if shebang:
            return f"{shebang}\n{text}"
        return text

    for pattern in patterns:
        match = pattern.search(content)
        if match is None:
            continue
        if match.group("year") != str(header.year):
            # License header found and not equal to the target year. Keep the old header.
            return RewriteResult(Mode.UNCHANGED, post_process(content))
        new_content = content[:match.start()] + header.content + content[match.end():]
        mode = Mode.UNCHANGED if new_content == content else Mode.UPDATED
        return RewriteResult(mode, post_process(new_content))

    if not add:
        return RewriteResult(Mode.UNCHANGED, post_process(content))
    return RewriteResult(Mode.ADDED, post_process(f"{header.content.strip()}\n{content}"))
