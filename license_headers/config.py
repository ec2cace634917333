"""
Runtime settings, read from the environment.
"""

import os

# Debug mode flag - set via LICENSE_HEADERS_DEBUG environment variable
DEBUG = os.environ.get("LICENSE_HEADERS_DEBUG", "").lower() in ("true", "1", "yes")

GIT_BINARY = os.environ.get("LICENSE_HEADERS_GIT", "git")

# Dependency-manager directories never scanned by --glob
IGNORE_PATTERNS = [
    p.strip()
    for p in os.environ.get("LICENSE_HEADERS_IGNORE", "**/node_modules/**").split(",")
    if p.strip()
]
