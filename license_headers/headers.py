"""
Canonical license headers and the patterns used to detect existing ones.

Each header family is selected by a filename pattern. Detection patterns
are tried in order and capture the copyright year of the first block
comment at the top of the file.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from license_headers.exceptions import HeaderPatternError

# Comment body that never runs past the closing "*/"
_BODY = r"(?:\*(?!/)|[^*])+"

LICENSE_HEADER_PATTERNS = [
    # JS style license header
    re.compile(
        rf"^\s*/\*\*{_BODY}@license{_BODY}Copyright\s(?P<year>[0-9]{{4}}){_BODY}\*/",
        re.IGNORECASE,
    ),
    # CPP style license header
    re.compile(
        rf"^\s*/\*{_BODY}Copyright\s(?P<year>[0-9]{{4}}){_BODY}\*/",
        re.IGNORECASE,
    ),
]


@dataclass(frozen=True)
class LicenseHeader:
    filename_pattern: re.Pattern[str]
    year: Union[int, str]
    content: str

    def matches(self, path: str) -> bool:
        return self.filename_pattern.search(str(path)) is not None


LICENSE_HEADERS = [
    LicenseHeader(
        filename_pattern=re.compile(r"(\.ts|\.js)$", re.IGNORECASE),
        year=2023,
        content="""
/**
 * @license
 * Copyright 2023 Google LLC.
 * Licensed under the Apache License, Version 2.0 (the "License");
 * you may not use this file except in compliance with the License.
 * You may obtain a copy of the License at
 *
 * http://www.apache.org/licenses/LICENSE-2.0
 *
 * Unless required by applicable law or agreed to in writing, software
 * distributed under the License is distributed on an "AS IS" BASIS,
 * WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
 * See the License for the specific language governing permissions and
 * limitations under the License.
 * =============================================================================
 */""".strip(),
    ),
    LicenseHeader(
        filename_pattern=re.compile(r"(\.c|\.h|\.cc|\.cpp)$", re.IGNORECASE),
        year=2023,
        content="""
/* Copyright 2023 Google LLC.
 * Licensed under the Apache License, Version 2.0 (the "License");
 * you may not use this file except in compliance with the License.
 * You may obtain a copy of the License at
 *
 * http://www.apache.org/licenses/LICENSE-2.0
 *
 * Unless required by applicable law or agreed to in writing, software
 * distributed under the License is distributed on an "AS IS" BASIS,
 * WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
 * See the License for the specific language governing permissions and
 * limitations under the License.
 * ===========================================================================*/
""".strip(),
    ),
]


def find_license_header(
    path: str, headers: Iterable[LicenseHeader] = LICENSE_HEADERS
) -> Optional[LicenseHeader]:
    """Return the first header whose filename pattern matches ``path``."""
    for header in headers:
        if header.matches(path):
            return header
    return None


def validate_license_headers(
    headers: Iterable[LicenseHeader] = LICENSE_HEADERS,
    patterns: Sequence[re.Pattern[str]] = LICENSE_HEADER_PATTERNS,
) -> None:
    """
    Check that every canonical header is detected by one of the patterns.

    A header that no pattern detects would be prepended again on every
    run, so this is checked once at startup before any file is touched.

    Raises:
        HeaderPatternError: naming the first header no pattern detects
    """
    for header in headers:
        if not any(pattern.search(header.content) for pattern in patterns):
            details = json.dumps(
                {
                    "filename_pattern": header.filename_pattern.pattern,
                    "year": header.year,
                    "content": header.content,
                },
                indent=4,
            )
            raise HeaderPatternError(
                f"License header cannot be caught by any pattern: {details}"
            )
